from dataclasses import replace

from docblocks.parsers import (
    Custom,
    DocBlock,
    Parameters,
    Positioned,
    parse_docblock,
    render_docblock,
)


def values(block: DocBlock) -> tuple:
    description = block.description.value if block.description else None
    return block.teaser.value, description, [s.value for s in block.sections]


def test_renders_canonical_source_unchanged() -> None:
    source = (
        "Lorem ipsum\n\nDolor sit amet.\n\n"
        "# Parameters\n\n- `param1`: Foo\n- `param2`: Bar\n"
    )

    assert render_docblock(parse_docblock(source)) == source


def test_renders_teaser_only() -> None:
    block = DocBlock(teaser=Positioned("Teaser", 0), description=None)

    assert render_docblock(block) == "Teaser\n"


def test_renders_custom_sections_verbatim() -> None:
    block = DocBlock(
        teaser=Positioned("Teaser", 0),
        description=None,
        sections=(
            Positioned(Custom("Notes", "Some *notes*.\n\n> quoted"), 8),
            Positioned(Custom("Empty", ""), 40),
        ),
    )

    assert render_docblock(block) == (
        "Teaser\n\n# Notes\n\nSome *notes*.\n\n> quoted\n\n# Empty\n"
    )


def test_reparse_preserves_values() -> None:
    source = (
        "Adds   two numbers.\n\nLonger   text with `code`.\n\n"
        "## Parameters\n\n* `a`:   first\n* `b`: second\n\n"
        "### Returns\n\nThe *sum*.\n\n"
        "# Examples\n\n```python\nadd(1, 2)\n```\n\n"
        "# See also\n\n- other\n"
    )
    block = parse_docblock(source)

    assert values(parse_docblock(render_docblock(block))) == values(block)


def test_parameter_labels_are_kept() -> None:
    block = DocBlock(
        teaser=Positioned("Teaser", 0),
        description=Positioned("More.", 8),
        sections=(Positioned(replace(Parameters((("x", "y"),)), label="Args"), 15),),
    )

    assert render_docblock(block) == "Teaser\n\nMore.\n\n# Args\n\n- `x`: y\n"


def test_multiline_label_is_written_as_setext_heading() -> None:
    block = parse_docblock("Teaser\n\n[l](u)\nSetext\n===\n\nBody\n")
    assert block.sections[0].value == Custom("[l](u)\nSetext", "Body")

    rendered = render_docblock(block)

    assert rendered == "Teaser\n\n[l](u)\nSetext\n===\n\nBody\n"
    assert values(parse_docblock(rendered)) == values(block)


def test_indented_code_body_survives_reparse() -> None:
    block = parse_docblock("Teaser\n\n# Notes\n\n    let x = 1;\n    let y = 2;\n")

    assert values(parse_docblock(render_docblock(block))) == values(block)
