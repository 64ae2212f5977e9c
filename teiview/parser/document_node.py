"""Variants of the semantic document model."""

from __future__ import annotations

from attrs import define, evolve, field

from .types import DocumentNode, DocumentNodeList


@define(slots=True, frozen=True)
class Text:
    """Run of character data.

    Attributes:
        content: Text exactly as it appeared in the source.
    """

    kind: str = field(default="text", init=False)
    content: str = ""


@define(slots=True, frozen=True)
class Paragraph:
    """Paragraph holding inline content."""

    kind: str = field(default="paragraph", init=False)
    children: DocumentNodeList = ()


@define(slots=True, frozen=True)
class Block:
    """Structural part of a letter other than a paragraph.

    Attributes:
        block_kind: One of ``opener``, ``closer``, ``dateline``, ``salute``
            or ``signed``.
        children: Inline content of the block.
    """

    kind: str = field(default="block", init=False)
    block_kind: str = ""
    children: DocumentNodeList = ()


@define(slots=True, frozen=True)
class Entity:
    """Reference to a person, place, date, work or organization.

    Attributes:
        entity_kind: Canonical TEI element name such as ``persName``.
        children: Inline content of the reference.
        subtype: Entity type taken from ``type``, ``t`` or ``subtype``.
        reference: Value of the ``ref`` attribute, kept for display only.
        when: Exact date of a ``date`` element.
        not_before: Lower bound of a ``date`` element.
        not_after: Upper bound of a ``date`` element.
    """

    kind: str = field(default="entity", init=False)
    entity_kind: str = ""
    children: DocumentNodeList = ()
    subtype: str | None = None
    reference: str | None = None
    when: str | None = None
    not_before: str | None = None
    not_after: str | None = None


@define(slots=True, frozen=True)
class Formatted:
    """Inline content with editorial or typographic styling.

    Attributes:
        style: Semantic style name, or ``None`` for an unknown rendition.
        children: Inline content being styled.
        language: Language tag of a ``foreign`` span.
    """

    kind: str = field(default="formatted", init=False)
    style: str | None = None
    children: DocumentNodeList = ()
    language: str | None = None


@define(slots=True, frozen=True)
class FootnoteRef:
    """Marker for a footnote whose content lives in the footnote list.

    Attributes:
        index: 1-based position in ``SemanticDocument.footnotes``.
    """

    kind: str = field(default="footnote_ref", init=False)
    index: int = 0


@define(slots=True, frozen=True)
class PageBreak:
    """Start of a new manuscript page."""

    kind: str = field(default="page_break", init=False)
    page_number: str | None = None


@define(slots=True, frozen=True)
class LineBreak:
    """Forced line break."""

    kind: str = field(default="line_break", init=False)


@define(slots=True, frozen=True)
class Passthrough:
    """Content of an unrecognized element, contributed without a wrapper."""

    kind: str = field(default="passthrough", init=False)
    children: DocumentNodeList = ()


def flatten_passthrough(nodes: DocumentNodeList) -> DocumentNodeList:
    """Splice the children of ``Passthrough`` nodes into their parents.

    Args:
        nodes: Sequence of document nodes.

    Returns:
        Equivalent sequence that contains no ``Passthrough`` nodes at any
        depth.
    """

    result: list[DocumentNode] = []
    for node in nodes:
        if isinstance(node, Passthrough):
            result.extend(flatten_passthrough(node.children))
        elif hasattr(node, "children"):
            result.append(
                evolve(node, children=flatten_passthrough(node.children))
            )
        else:
            result.append(node)
    return tuple(result)
