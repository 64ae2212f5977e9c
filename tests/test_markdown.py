"""Tests for the Markdown renderer."""

from __future__ import annotations

from teiview.markdown import render_blocks, render_inline, render_markdown
from teiview.parser import (
    Block,
    Entity,
    FootnoteRef,
    Formatted,
    LineBreak,
    PageBreak,
    Paragraph,
    Passthrough,
    SemanticDocument,
    Text,
    load_document,
    parse_xml,
)


def test_render_sample_letter(sample_tei: str) -> None:
    """A full letter renders heading, paragraphs and notes."""

    text = render_markdown(load_document(parse_xml(sample_tei)))

    assert text.startswith("# Letter to Hans Bauer[^1]\n\n")
    assert "Wien, 4. März 1921" in text
    assert "gelesen[^2] und Doktor Russell" in text
    assert "Mehr *soon*." in text
    assert "--- p. 2 ---" in text
    assert "Second page.[^3]" in text
    assert "## Notes" in text
    assert "[^1]: Draft title." in text
    assert "[^2]: See *Tractatus*." in text
    assert text.endswith("[^3]: Second note.\n")


def test_inline_styles() -> None:
    """Formatting styles map to Markdown delimiters."""

    nodes = (
        Formatted(style="bold", children=(Text("b"),)),
        Text(" "),
        Formatted(style="deletion", children=(Text("d"),)),
        Text(" "),
        Formatted(style="sic", children=(Text("s"),)),
        Text(" "),
        Formatted(style=None, children=(Text("plain"),)),
    )
    assert render_inline(nodes) == "**b** ~~d~~ s [sic] plain"


def test_inline_whitespace_and_breaks() -> None:
    """Source whitespace collapses while line breaks stay hard."""

    nodes = (
        Text("a\n   b"),
        LineBreak(),
        Entity(entity_kind="persName", children=(Text("c"),)),
        FootnoteRef(4),
    )
    assert render_inline(nodes) == "a b\\\nc[^4]"


def test_formatting_keeps_boundary_spaces_outside() -> None:
    """Spaces at the edge of a styled span stay outside its delimiters."""

    nodes = (
        Formatted(style="italic", children=(Text("foo "),)),
        Text("bar "),
        Formatted(style="bold", children=(Text(" baz"),)),
    )
    assert render_inline(nodes) == "*foo* bar  **baz**"


def test_formatting_boundary_in_document() -> None:
    """A trailing space inside a styled span still separates words."""

    xml = (
        "<TEI><text><body>"
        '<p><hi rend="i">foo </hi>bar</p>'
        "</body></text></TEI>"
    )
    text = render_markdown(load_document(parse_xml(xml)))
    assert text == "*foo* bar\n"


def test_empty_formatting_renders_nothing() -> None:
    """Styled spans without content disappear."""

    assert render_inline((Formatted(style="italic"),)) == ""


def test_blocks_gather_loose_inline_content() -> None:
    """Inline nodes between blocks form paragraphs of their own."""

    nodes = (
        Text("\n  "),
        Text("loose "),
        Formatted(style="italic", children=(Text("text"),)),
        Paragraph((Text("para"),)),
        Passthrough((Block(block_kind="salute", children=(Text("Hi"),)),)),
        PageBreak(None),
    )
    assert render_blocks(nodes) == ["loose *text*", "para", "Hi", "--- page ---"]


def test_empty_document() -> None:
    """An empty document renders as a lone newline."""

    assert render_markdown(SemanticDocument()) == "\n"
