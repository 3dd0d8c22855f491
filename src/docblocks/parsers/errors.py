# parsers/errors.py

from enum import Enum


class ParseErrorKind(str, Enum):
    MISSING_TEASER = "missing_teaser"
    MALFORMED_DESCRIPTION = "malformed_description"
    MALFORMED_SECTION = "malformed_section"
    UNEXPECTED_TOKEN = "unexpected_token"


class ParseError(Exception):
    """First grammar violation found in a docblock.

    ``offset`` is the byte offset in the UTF-8 encoded source at which the
    violation was detected.
    """

    kind: ParseErrorKind

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at byte {offset})")
        self.message = message
        self.offset = offset


class MissingTeaserError(ParseError):
    kind = ParseErrorKind.MISSING_TEASER

    def __init__(self, offset: int = 0, found: str | None = None) -> None:
        message = "Document must begin with a teaser paragraph"
        if found is not None:
            message = f"{message}, found {found}"
        super().__init__(message, offset)


class MalformedDescriptionError(ParseError):
    kind = ParseErrorKind.MALFORMED_DESCRIPTION

    def __init__(self, found: str, offset: int) -> None:
        super().__init__(
            f"Expected a description paragraph or a heading, found {found}", offset
        )
        self.found = found


class MalformedSectionError(ParseError):
    kind = ParseErrorKind.MALFORMED_SECTION

    def __init__(self, label: str, message: str, offset: int) -> None:
        super().__init__(f"Malformed '{label}' section: {message}", offset)
        self.label = label


class UnexpectedTokenError(ParseError):
    kind = ParseErrorKind.UNEXPECTED_TOKEN

    def __init__(self, expected: str, found: str, offset: int) -> None:
        super().__init__(f"Expected {expected}, found {found}", offset)
        self.expected = expected
        self.found = found


def line_col(text: str, offset: int) -> tuple[int, int]:
    """Convert a byte offset into a 1-based (line, column) pair.

    The column counts characters, not bytes. Offsets past the end of the
    text are clamped to the end.
    """
    data = text.encode("utf-8")
    offset = max(0, min(offset, len(data)))
    line_start = data.rfind(b"\n", 0, offset) + 1
    line = data.count(b"\n", 0, offset) + 1
    column = len(data[line_start:offset].decode("utf-8", errors="ignore")) + 1
    return line, column
