# parsers/render.py

from .models import DocBlock, DocSection, Parameters


def render_docblock(block: DocBlock) -> str:
    """Render a docblock back to Markdown.

    Text content and section structure survive a parse of the output;
    original whitespace and offsets do not.
    """
    parts = [block.teaser.value]
    if block.description is not None:
        parts.append(block.description.value)

    for section in block.sections:
        parts.append(_render_heading(section.value.label))
        body = _render_section(section.value)
        if body:
            parts.append(body)

    return "\n\n".join(parts) + "\n"


def _render_heading(label: str) -> str:
    # ATX headings are single-line
    if "\n" in label:
        return f"{label}\n==="
    return f"# {label}"


def _render_section(section: DocSection) -> str:
    if isinstance(section, Parameters):
        return "\n".join(
            f"- `{name}`: {description}" for name, description in section.items
        )
    return section.text
