# parsers/events.py

"""Markdown event stream built on markdown-it-py.

markdown-it-py produces a flat list of block tokens whose inline content is
nested in ``inline`` tokens. ``tokenize`` flattens both levels into a
single lazy stream of :class:`Event` values, shaped as start/end pairs for
containers and single events for literal content. Events carry no byte
positions; see :mod:`docblocks.parsers.offset_tracker` for those.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from markdown_it import MarkdownIt
from markdown_it.token import Token

Preset = Literal["commonmark", "default", "zero"]

_CODE_BLOCKS = {"fence", "code_block"}
_INLINE_MARKERS = {"em", "strong", "s"}


class EventKind(str, Enum):
    START = "start"
    END = "end"
    TEXT = "text"
    CODE = "code"
    HTML = "html"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    RULE = "rule"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    tag: str = ""
    content: str = ""
    level: int = 0
    markup: str = ""
    info: str = ""
    # Source line range [line, end_line) of a block, when the tokenizer maps it.
    line: int | None = None
    end_line: int | None = None

    def is_start(self, tag: str) -> bool:
        return self.kind is EventKind.START and self.tag == tag

    def is_end(self, tag: str) -> bool:
        return self.kind is EventKind.END and self.tag == tag

    def describe(self) -> str:
        if self.kind is EventKind.START:
            return f"start of {self.tag}"
        if self.kind is EventKind.END:
            return f"end of {self.tag}"
        if self.content:
            return f"{self.kind.value} {self.content!r}"
        return self.kind.value


def tokenize(text: str, preset: Preset = "commonmark") -> Iterator[Event]:
    """Lazily tokenize ``text`` into a flat stream of events."""
    tokens = MarkdownIt(preset).parse(text)
    yield from _flatten(tokens)


def _flatten(tokens: Iterable[Token]) -> Iterator[Event]:
    for token in tokens:
        if token.type == "inline":
            yield from _flatten(token.children or [])
        else:
            yield from _convert(token)


def _convert(token: Token) -> Iterator[Event]:
    line, end_line = token.map if token.map else (None, None)

    if token.nesting == 1:
        tag = token.type.removesuffix("_open")
        yield Event(
            EventKind.START,
            tag=tag,
            level=int(token.tag[1:]) if tag == "heading" else 0,
            markup=token.markup,
            info=_target(token) if tag == "link" else token.info,
            line=line,
            end_line=end_line,
        )
    elif token.nesting == -1:
        yield Event(
            EventKind.END,
            tag=token.type.removesuffix("_close"),
            markup=token.markup,
        )
    elif token.type in _CODE_BLOCKS:
        yield Event(
            EventKind.START,
            tag="code_block",
            markup=token.markup,
            info=token.info.strip(),
            line=line,
            end_line=end_line,
        )
        yield Event(EventKind.TEXT, content=token.content)
        yield Event(EventKind.END, tag="code_block")
    elif token.type == "image":
        yield Event(EventKind.START, tag="image", info=_target(token, "src"))
        yield from _flatten(token.children or [])
        yield Event(EventKind.END, tag="image")
    elif token.type == "code_inline":
        yield Event(EventKind.CODE, content=token.content, markup=token.markup)
    elif token.type in ("html_block", "html_inline"):
        yield Event(
            EventKind.HTML, content=token.content, line=line, end_line=end_line
        )
    elif token.type == "softbreak":
        yield Event(EventKind.SOFT_BREAK)
    elif token.type == "hardbreak":
        yield Event(EventKind.HARD_BREAK)
    elif token.type == "hr":
        yield Event(
            EventKind.RULE, markup=token.markup, line=line, end_line=end_line
        )
    elif token.content:
        yield Event(EventKind.TEXT, content=token.content)


def _target(token: Token, attr: str = "href") -> str:
    value = token.attrGet(attr)
    return "" if value is None else str(value)


def render_inline(events: Iterable[Event]) -> str:
    """Render inline events back to Markdown source."""
    parts: list[str] = []
    targets: list[str] = []

    for event in events:
        if event.kind is EventKind.TEXT or event.kind is EventKind.HTML:
            parts.append(event.content)
        elif event.kind is EventKind.CODE:
            fence = event.markup or "`"
            if event.content.startswith("`") or event.content.endswith("`"):
                parts.append(f"{fence} {event.content} {fence}")
            else:
                parts.append(f"{fence}{event.content}{fence}")
        elif event.kind in (EventKind.SOFT_BREAK, EventKind.HARD_BREAK):
            parts.append("\n")
        elif event.kind is EventKind.START and event.tag in ("link", "image"):
            parts.append("![" if event.tag == "image" else "[")
            targets.append(event.info)
        elif event.kind is EventKind.END and event.tag in ("link", "image"):
            parts.append(f"]({targets.pop() if targets else ''})")
        elif event.tag in _INLINE_MARKERS:
            parts.append(event.markup)

    return "".join(parts)
