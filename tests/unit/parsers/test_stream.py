from docblocks.parsers.events import Event, EventKind
from docblocks.parsers.stream import EventStream

TEXT = Event(EventKind.TEXT, content="a")
BREAK = Event(EventKind.SOFT_BREAK)


def test_peek_does_not_consume() -> None:
    stream = EventStream([(TEXT, 0), (BREAK, 1)], b"a\n")

    assert stream.peek() == (TEXT, 0)
    assert stream.peek() == (TEXT, 0)
    assert next(stream) == (TEXT, 0)
    assert next(stream) == (BREAK, 1)


def test_peek_at_end_returns_none() -> None:
    stream = EventStream([(TEXT, 0)], b"a")
    next(stream)

    assert stream.peek() is None
    assert list(stream) == []


def test_iterates_remaining_events() -> None:
    stream = EventStream([(TEXT, 0), (BREAK, 1)], b"a\n")
    stream.peek()

    assert list(stream) == [(TEXT, 0), (BREAK, 1)]


def test_source_text_slices_bytes() -> None:
    stream = EventStream([], "Ünïcode body".encode("utf-8"))

    assert stream.end_offset == 14
    assert stream.source_text(10, 14) == "body"
    assert stream.source_text(0, 2) == "Ü"
