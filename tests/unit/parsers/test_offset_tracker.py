from docblocks.parsers.events import EventKind, tokenize
from docblocks.parsers.offset_tracker import OffsetTracker


def track(source: str) -> list:
    return list(OffsetTracker(source, tokenize(source)))


def literal_offsets(source: str) -> list[tuple[str, int]]:
    return [
        (event.content, offset)
        for event, offset in track(source)
        if event.kind in (EventKind.TEXT, EventKind.CODE)
    ]


class TestOffsetTracker:
    def test_text_offsets_match_source(self) -> None:
        source = "Lorem ipsum\n\n# Title\n\nBody `code` end\n"

        assert literal_offsets(source) == [
            ("Lorem ipsum", 0),
            ("Title", 15),
            ("Body ", 22),
            ("code", 28),
            (" end", 33),
        ]

    def test_block_starts_anchor_to_their_line(self) -> None:
        source = "Teaser\n\n# Heading\n\n- item\n"
        starts = [
            (event.tag, offset)
            for event, offset in track(source)
            if event.kind is EventKind.START
        ]

        assert starts == [
            ("paragraph", 0),
            ("heading", 8),
            ("bullet_list", 19),
            ("list_item", 19),
            ("paragraph", 19),
        ]

    def test_offsets_are_byte_offsets(self) -> None:
        source = "Ünïcode\n\nnext\n"

        assert literal_offsets(source) == [("Ünïcode", 0), ("next", 11)]

    def test_crlf_line_endings(self) -> None:
        source = "One\r\n\r\nTwo\r\n"

        assert literal_offsets(source) == [("One", 0), ("Two", 7)]

    def test_unmatched_text_keeps_cursor(self) -> None:
        """Decoded entities are not in the source verbatim."""
        source = "Fish &amp; chips\n\nNext\n"

        assert literal_offsets(source) == [("Fish & chips", 0), ("Next", 18)]

    def test_offsets_never_decrease(self) -> None:
        source = (
            "Teaser with *emphasis*\nand more.\n\n"
            "> quoted `code`\n\n"
            "# Parameters\n\n"
            "- `a`: first\n"
            "- `b`: second\n\n"
            "```\nfenced\n```\n"
        )
        offsets = [offset for _, offset in track(source)]

        assert offsets == sorted(offsets)
        assert offsets[-1] <= len(source.encode("utf-8"))

    def test_repeated_text_resolves_to_next_occurrence(self) -> None:
        source = "a\n\na\n\na\n"

        assert literal_offsets(source) == [("a", 0), ("a", 3), ("a", 6)]

    def test_exposes_encoded_source(self) -> None:
        tracker = OffsetTracker("Ü", [])

        assert tracker.source == "Ü".encode("utf-8")
        assert list(tracker) == []
