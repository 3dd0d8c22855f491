from .base import DocBlockParser
from .config import ParserConfig, load_config
from .errors import (
    MalformedDescriptionError,
    MalformedSectionError,
    MissingTeaserError,
    ParseError,
    ParseErrorKind,
    UnexpectedTokenError,
    line_col,
)
from .markdown_parser import MarkdownDocBlockParser, parse_docblock
from .models import (
    Custom,
    DocBlock,
    DocSection,
    Examples,
    Parameters,
    Positioned,
    Returns,
    SectionKind,
)
from .render import render_docblock

__all__ = [
    # Parsing
    "DocBlockParser",
    "MarkdownDocBlockParser",
    "parse_docblock",
    "render_docblock",
    # Config
    "ParserConfig",
    "load_config",
    # Models
    "Custom",
    "DocBlock",
    "DocSection",
    "Examples",
    "Parameters",
    "Positioned",
    "Returns",
    "SectionKind",
    # Errors
    "MalformedDescriptionError",
    "MalformedSectionError",
    "MissingTeaserError",
    "ParseError",
    "ParseErrorKind",
    "UnexpectedTokenError",
    "line_col",
]
