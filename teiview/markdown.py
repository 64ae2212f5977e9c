"""Render semantic documents as Markdown."""

from __future__ import annotations

import re

from teiview.parser.document_node import (
    Block,
    Entity,
    FootnoteRef,
    Formatted,
    LineBreak,
    PageBreak,
    Paragraph,
    Passthrough,
    Text,
)
from teiview.parser.semantic_document import SemanticDocument
from teiview.parser.types import DocumentNode, DocumentNodeList

NOTES_HEADING = "Notes"

# Markdown delimiters wrapped around each formatting style.
STYLE_MARKUP: dict[str, tuple[str, str]] = {
    "italic": ("*", "*"),
    "foreign": ("*", "*"),
    "bold": ("**", "**"),
    "underline": ("<u>", "</u>"),
    "monospace": ("`", "`"),
    "formula": ("`", "`"),
    "quotation": ('"', '"'),
    "deletion": ("~~", "~~"),
    "supplied": ("[", "]"),
    "unclear": ("[", "?]"),
    "sic": ("", " [sic]"),
}


def _tidy(text: str) -> str:
    """Collapse repeated spaces left over after joining inline parts."""

    return re.sub(r" {2,}", " ", text).strip()


def render_inline(nodes: DocumentNodeList) -> str:
    """Render inline nodes as a single Markdown string.

    Args:
        nodes: Inline document nodes.

    Returns:
        Markdown text; source whitespace is collapsed to single spaces.
    """

    return "".join(_inline(node) for node in nodes)


def _inline(node: DocumentNode) -> str:
    if isinstance(node, Text):
        return re.sub(r"\s+", " ", node.content)

    if isinstance(node, FootnoteRef):
        return f"[^{node.index}]"

    if isinstance(node, LineBreak):
        # Backslash hard break survives whitespace tidying.
        return "\\\n"

    if isinstance(node, PageBreak):
        return f" [p. {node.page_number}] " if node.page_number else " "

    if isinstance(node, Formatted):
        opening, closing = STYLE_MARKUP.get(node.style or "", ("", ""))
        inner = render_inline(node.children)
        text = inner.strip(" ")
        if not text:
            return " " if inner else ""
        # Boundary spaces stay outside the delimiters.
        leading = " " if inner.startswith(" ") else ""
        trailing = " " if inner.endswith(" ") else ""
        return f"{leading}{opening}{text}{closing}{trailing}"

    if isinstance(node, (Paragraph, Block)):
        # Loosely nested block content is flattened into the running text.
        return f" {render_inline(node.children)} "

    if isinstance(node, (Entity, Passthrough)):
        return render_inline(node.children)

    return ""


def render_blocks(nodes: DocumentNodeList) -> list[str]:
    """Render block-level nodes as a list of Markdown blocks.

    Inline nodes met at block level are gathered into paragraphs of their
    own, and whitespace-only text between blocks is dropped.

    Args:
        nodes: Block-level document nodes.

    Returns:
        Non-empty Markdown blocks in document order.
    """

    blocks: list[str] = []
    pending: list[DocumentNode] = []

    def flush() -> None:
        # Emit the inline run collected so far as one block.
        text = _tidy(render_inline(tuple(pending)))
        if text:
            blocks.append(text)
        pending.clear()

    for node in nodes:
        if isinstance(node, (Paragraph, Block)):
            flush()
            text = _tidy(render_inline(node.children))
            if text:
                blocks.append(text)
        elif isinstance(node, Passthrough):
            flush()
            blocks.extend(render_blocks(node.children))
        elif isinstance(node, PageBreak):
            flush()
            label = f"p. {node.page_number}" if node.page_number else "page"
            blocks.append(f"--- {label} ---")
        else:
            pending.append(node)

    flush()
    return blocks


def render_markdown(document: SemanticDocument) -> str:
    """Render ``document`` as Markdown.

    The title becomes a level-one heading, the body follows as paragraphs
    and the footnotes are listed at the end as Markdown footnotes.

    Args:
        document: Extracted semantic document.

    Returns:
        Markdown text ending with a newline.
    """

    parts: list[str] = []

    title = _tidy(render_inline(document.title))
    if title:
        parts.append(f"# {title}")

    parts.extend(render_blocks(document.body))

    if document.footnotes:
        parts.append(f"## {NOTES_HEADING}")
        for index, note in enumerate(document.footnotes, start=1):
            text = " ".join(render_blocks(note))
            parts.append(f"[^{index}]: {text}")

    return "\n\n".join(parts) + "\n"
