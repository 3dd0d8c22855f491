# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Custom,
    DocBlock,
    DocBlockParser,
    DocSection,
    Examples,
    MalformedDescriptionError,
    MalformedSectionError,
    MarkdownDocBlockParser,
    MissingTeaserError,
    Parameters,
    ParseError,
    ParseErrorKind,
    ParserConfig,
    Positioned,
    Returns,
    SectionKind,
    UnexpectedTokenError,
    line_col,
    load_config,
    parse_docblock,
    render_docblock,
)

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
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
