# parsers/stream.py

from collections.abc import Iterable, Iterator

from .events import Event


class EventStream:
    """Forward-only stream of (event, offset) pairs with one-event lookahead."""

    def __init__(self, events: Iterable[tuple[Event, int]], source: bytes) -> None:
        self._events = iter(events)
        self._source = source
        self._lookahead: tuple[Event, int] | None = None

    def __iter__(self) -> Iterator[tuple[Event, int]]:
        return self

    def __next__(self) -> tuple[Event, int]:
        if self._lookahead is not None:
            item, self._lookahead = self._lookahead, None
            return item
        return next(self._events)

    def peek(self) -> tuple[Event, int] | None:
        """Return the next pair without consuming it, or None at the end."""
        if self._lookahead is None:
            self._lookahead = next(self._events, None)
        return self._lookahead

    @property
    def end_offset(self) -> int:
        return len(self._source)

    def source_text(self, start: int, end: int) -> str:
        return self._source[start:end].decode("utf-8", errors="replace")
