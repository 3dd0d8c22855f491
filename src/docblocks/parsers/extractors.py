# parsers/extractors.py

"""Docblock grammar: teaser, optional description, then sections.

Each phase pulls events from an :class:`EventStream` and stops at its own
boundary, leaving the rest of the stream to the next phase. The first
violation raises a :class:`ParseError`.
"""

from collections.abc import Callable, Mapping

from .errors import (
    MalformedDescriptionError,
    MalformedSectionError,
    MissingTeaserError,
    UnexpectedTokenError,
)
from .events import Event, EventKind, render_inline
from .models import (
    Custom,
    DocSection,
    Examples,
    Parameters,
    Positioned,
    Returns,
    SectionKind,
)
from .stream import EventStream

SectionParser = Callable[[str, EventStream], DocSection]

_LISTS = ("bullet_list", "ordered_list")


def teaser(stream: EventStream) -> Positioned[str]:
    item = stream.peek()
    if item is None:
        raise MissingTeaserError(0)

    event, offset = item
    if not event.is_start("paragraph"):
        raise MissingTeaserError(offset, found=event.describe())

    return _paragraph(stream)


def description(stream: EventStream) -> Positioned[str] | None:
    item = stream.peek()
    if item is None:
        return None

    event, offset = item
    if event.is_start("heading"):
        return None
    if event.is_start("paragraph"):
        return _paragraph(stream)

    raise MalformedDescriptionError(event.describe(), offset)


def sections(
    stream: EventStream, parsers: Mapping[str, SectionParser]
) -> list[Positioned[DocSection]]:
    result: list[Positioned[DocSection]] = []

    while (item := stream.peek()) is not None:
        event, offset = item
        if not event.is_start("heading"):
            raise UnexpectedTokenError("a section heading", event.describe(), offset)

        next(stream)
        label = render_inline(e for e, _ in _until_close(stream)).strip()
        parser = parsers.get(label, parse_custom)
        result.append(Positioned(parser(label, stream), offset))

    return result


# --- Section parsers ---


def parse_parameters(label: str, stream: EventStream) -> Parameters:
    """Parse a list of ``- `name`: description`` items."""
    item = stream.peek()
    if item is None:
        raise MalformedSectionError(label, "expected a list", stream.end_offset)

    event, offset = item
    if not any(event.is_start(tag) for tag in _LISTS):
        raise MalformedSectionError(
            label, f"expected a list, found {event.describe()}", offset
        )
    next(stream)

    params: list[tuple[str, str]] = []
    for event, offset in stream:
        if event.kind is EventKind.END:
            break
        if not event.is_start("list_item"):
            raise MalformedSectionError(
                label, f"expected a list item, found {event.describe()}", offset
            )
        params.append(_parameter(label, [e for e, _ in _until_close(stream)], offset))

    return Parameters(items=tuple(params), label=label)


def parse_returns(label: str, stream: EventStream) -> Returns:
    return Returns(text=_body(stream), label=label)


def parse_examples(label: str, stream: EventStream) -> Examples:
    return Examples(text=_body(stream), label=label)


def parse_custom(label: str, stream: EventStream) -> Custom:
    return Custom(label=label, text=_body(stream))


SECTION_PARSERS: dict[SectionKind, SectionParser] = {
    SectionKind.PARAMETERS: parse_parameters,
    SectionKind.RETURNS: parse_returns,
    SectionKind.EXAMPLES: parse_examples,
    SectionKind.CUSTOM: parse_custom,
}


# --- Helpers ---


def _paragraph(stream: EventStream) -> Positioned[str]:
    _, offset = next(stream)
    inline = _until_close(stream)
    if inline:
        offset = inline[0][1]
    return Positioned(render_inline(e for e, _ in inline).strip(), offset)


def _until_close(stream: EventStream) -> list[tuple[Event, int]]:
    """Consume up to and including the END matching an already consumed START.

    The closing event itself is not returned.
    """
    depth = 0
    inner: list[tuple[Event, int]] = []
    for event, offset in stream:
        if event.kind is EventKind.END:
            if depth == 0:
                break
            depth -= 1
        elif event.kind is EventKind.START:
            depth += 1
        inner.append((event, offset))
    return inner


def _parameter(label: str, events: list[Event], offset: int) -> tuple[str, str]:
    shape = "list items must look like `name`: description"

    # paragraph start, code span, ..., paragraph end
    if (
        len(events) < 3
        or not events[0].is_start("paragraph")
        or events[1].kind is not EventKind.CODE
        or not events[-1].is_end("paragraph")
    ):
        raise MalformedSectionError(label, shape, offset)

    rest = events[2:-1]
    if any(e.is_end("paragraph") for e in rest):
        raise MalformedSectionError(label, shape, offset)

    text = render_inline(rest).lstrip()
    if not text.startswith(":"):
        raise MalformedSectionError(label, shape, offset)

    return events[1].content, text[1:].strip()


def _body(stream: EventStream) -> str:
    """Consume a section body and return its source text verbatim.

    The body runs up to the next top-level heading or the end of input.
    Indentation of the first line is kept; trailing whitespace is not.
    """
    item = stream.peek()
    start = stream.end_offset if item is None else item[1]
    end = stream.end_offset
    depth = 0

    while (item := stream.peek()) is not None:
        event, offset = item
        if depth == 0 and event.is_start("heading"):
            end = offset
            break
        next(stream)
        if event.kind is EventKind.START:
            depth += 1
        elif event.kind is EventKind.END:
            depth -= 1

    return stream.source_text(start, end).rstrip()
