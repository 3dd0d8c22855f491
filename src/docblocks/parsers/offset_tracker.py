# parsers/offset_tracker.py

from collections.abc import Iterable, Iterator

from .events import Event, EventKind

_LITERALS = {EventKind.TEXT, EventKind.CODE, EventKind.HTML}


class OffsetTracker:
    """
    Pairs each event with the byte offset at which it begins.

    The tokenizer reports no byte positions, so offsets are reconstructed:
    - Literal events (text, code spans, HTML) are located by searching for
      their content forward from a running cursor, bounded by the end of
      the enclosing block
    - Line-mapped block starts are anchored to the start of their first line
    - Every other event takes the cursor, i.e. the end of the preceding text

    Offsets never decrease. A literal that does not appear verbatim in the
    source (a decoded entity, say) keeps the cursor as its offset.

    Iteration consumes the wrapped events; re-tokenize to start over.
    """

    def __init__(self, source: str, events: Iterable[Event]) -> None:
        self.source = source.encode("utf-8")
        self._events = events
        self._line_starts = [0]
        newline = self.source.find(b"\n")
        while newline >= 0:
            self._line_starts.append(newline + 1)
            newline = self.source.find(b"\n", newline + 1)

    def __iter__(self) -> Iterator[tuple[Event, int]]:
        cursor = 0
        limit = len(self.source)

        for event in self._events:
            if event.line is not None:
                cursor = max(cursor, self._line_start(event.line))
                if event.end_line is not None:
                    limit = max(cursor, self._line_start(event.end_line))

            if event.kind in _LITERALS and event.content:
                needle = event.content.encode("utf-8")
                found = self.source.find(needle, cursor, limit)
                if found >= 0:
                    yield event, found
                    cursor = found + len(needle)
                    continue

            yield event, cursor

    def _line_start(self, line: int) -> int:
        if line < len(self._line_starts):
            return self._line_starts[line]
        return len(self.source)
