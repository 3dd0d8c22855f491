# parsers/markdown_parser.py

import logging
from time import monotonic

from docblocks.observability import names
from docblocks.observability.base import MetricsHook, NoOpMetricsHook

from . import extractors
from .base import DocBlockParser
from .config import ParserConfig
from .errors import ParseError
from .events import tokenize
from .models import DocBlock
from .offset_tracker import OffsetTracker
from .stream import EventStream

logger = logging.getLogger(__name__)


class MarkdownDocBlockParser(DocBlockParser):
    """
    Docblock parser over markdown-it-py events.
    - Teaser, then optional description, then heading-delimited sections
    - Section labels dispatch through the configured label table
    - Stateless between calls
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or ParserConfig()
        self.metrics_hook = metrics_hook
        self._parsers = {
            label: extractors.SECTION_PARSERS[kind]
            for label, kind in self.config.sections.items()
        }

    def parse(self, text: str) -> DocBlock:
        start = monotonic()
        self.metrics_hook.increment(names.DOCBLOCK_PARSE_REQUESTS_TOTAL)

        tracker = OffsetTracker(text, tokenize(text, self.config.preset))
        stream = EventStream(tracker, tracker.source)

        try:
            block = DocBlock(
                teaser=extractors.teaser(stream),
                description=extractors.description(stream),
                sections=tuple(extractors.sections(stream, self._parsers)),
            )
        except ParseError as e:
            logger.debug("Failed to parse docblock: %s", e)
            self.metrics_hook.increment(
                names.DOCBLOCK_PARSE_ERRORS_TOTAL, labels={"kind": e.kind.value}
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DOCBLOCK_PARSE_DURATION, elapsed_ms)
        for section in block.sections:
            self.metrics_hook.increment(
                names.DOCBLOCK_SECTIONS_TOTAL,
                labels={"kind": section.value.kind.value},
            )

        logger.debug(
            "Parsed docblock: description=%s, sections=%d",
            block.description is not None,
            len(block.sections),
        )
        return block


def parse_docblock(
    text: str,
    config: ParserConfig | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocBlock:
    """Parse documentation text and extract its docblock.

    Args:
        text: Markdown source of the documentation string.
        config: Optional parser configuration (section labels, preset).
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The extracted DocBlock. Unrecognized headings become Custom sections.

    Raises:
        ParseError: The first grammar violation found, tagged with its offset.

    Example:
        >>> block = parse_docblock("Lorem ipsum\\n\\n# Parameters\\n\\n- `x`: Foo\\n")
        >>> block.teaser.value
        'Lorem ipsum'
        >>> block.sections[0].value.items
        (('x', 'Foo'),)
    """
    return MarkdownDocBlockParser(config, metrics_hook).parse(text)
