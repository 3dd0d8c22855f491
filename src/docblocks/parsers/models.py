# parsers/models.py

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar, Union

T = TypeVar("T")


class SectionKind(str, Enum):
    PARAMETERS = "parameters"
    RETURNS = "returns"
    EXAMPLES = "examples"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Positioned(Generic[T]):
    """A value and the byte offset in the source text where it begins."""

    value: T
    offset: int


@dataclass(frozen=True)
class Parameters:
    items: tuple[tuple[str, str], ...]
    label: str = "Parameters"

    kind: ClassVar[SectionKind] = SectionKind.PARAMETERS


@dataclass(frozen=True)
class Returns:
    text: str
    label: str = "Returns"

    kind: ClassVar[SectionKind] = SectionKind.RETURNS


@dataclass(frozen=True)
class Examples:
    text: str
    label: str = "Examples"

    kind: ClassVar[SectionKind] = SectionKind.EXAMPLES


@dataclass(frozen=True)
class Custom:
    """Section with an unrecognized heading; body is kept verbatim."""

    label: str
    text: str

    kind: ClassVar[SectionKind] = SectionKind.CUSTOM


DocSection = Union[Parameters, Returns, Examples, Custom]


@dataclass(frozen=True)
class DocBlock:
    """Extracted docblock.

    Teaser and description hold the paragraph text with its inline markup
    (code spans, emphasis, links) re-rendered as Markdown, so `` `x` `` stays
    `` `x` `` rather than collapsing to `` x ``.
    """

    teaser: Positioned[str]
    description: Positioned[str] | None
    sections: tuple[Positioned[DocSection], ...] = ()
