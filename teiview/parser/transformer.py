"""Recursive walk turning normalized elements into document nodes."""

from __future__ import annotations

import logging

from .document_node import (
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
from .errors import StructureTooDeep
from .footnotes import FootnoteAccumulator
from .normalized_node import NormalizedNode, TextLeaf
from .tag_classifier import (
    DATE_ATTRIBUTES,
    Context,
    Role,
    TagDescriptor,
    classify,
    resolve_entity_subtype,
    resolve_hi_style,
)
from .types import MAX_DEPTH, DocumentNode, DocumentNodeList, NormalizedChild

logger = logging.getLogger(__name__)


def transform(
    node: NormalizedChild | None,
    context: Context,
    footnotes: FootnoteAccumulator,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
) -> DocumentNode | None:
    """Transform one normalized node into a document node.

    Args:
        node: Element or text leaf to transform.
        context: Whether ``node`` sits in block or inline content.
        footnotes: Accumulator receiving the notes met in this pass.
        depth: Nesting depth of ``node`` below the starting point.
        max_depth: Maximum nesting depth accepted.

    Returns:
        The resulting document node, or ``None`` when the node produces no
        output.

    Raises:
        StructureTooDeep: If nesting exceeds ``max_depth``.
    """

    if node is None:
        return None

    if isinstance(node, TextLeaf):
        return Text(node.text)

    if depth > max_depth:
        raise StructureTooDeep(max_depth)

    descriptor = classify(node.tag)
    role = descriptor.role

    if role is Role.PAGE_BREAK:
        return _page_break(node)

    if role is Role.LINE_BREAK:
        return LineBreak()

    if role is Role.FOOTNOTE:
        return _footnote(node, footnotes, depth, max_depth)

    child_context = descriptor.child_context or context

    if role is Role.CHOICE:
        return _choice(node, child_context, footnotes, depth, max_depth)

    if role in (Role.PARAGRAPH, Role.BLOCK) and context is Context.INLINE:
        # Kept rather than dropped; real letters nest these loosely.
        logger.debug(f"Block element <{node.tag}> found in inline content")

    children = transform_children(
        node, child_context, footnotes, depth + 1, max_depth
    )

    if role is Role.PARAGRAPH:
        return Paragraph(children)

    if role is Role.BLOCK:
        return Block(block_kind=descriptor.kind or node.tag, children=children)

    if role is Role.ENTITY:
        return _entity(node, descriptor, children)

    if role is Role.FORMATTING:
        return _formatted(node, descriptor, children)

    return Passthrough(children)


def transform_children(
    node: NormalizedNode,
    context: Context,
    footnotes: FootnoteAccumulator,
    depth: int = 0,
    max_depth: int = MAX_DEPTH,
) -> DocumentNodeList:
    """Transform the children of ``node``, dropping empty results."""

    results = (
        transform(child, context, footnotes, depth, max_depth)
        for child in node.children
    )
    return tuple(result for result in results if result is not None)


def _page_break(node: NormalizedNode) -> PageBreak | None:
    """Return a page break, suppressing the one that opens page 1."""

    number = node.get("n")
    if number is not None and number.strip() == "1":
        return None
    return PageBreak(number)


def _footnote(
    node: NormalizedNode,
    footnotes: FootnoteAccumulator,
    depth: int,
    max_depth: int,
) -> DocumentNode:
    """Register a note and return the marker standing in its place."""

    # Notes inside the note get a scratch accumulator, so they can never
    # reach the outer list or disturb its numbering.
    content = transform_children(
        node, Context.BLOCK, footnotes.contained(), depth + 1, max_depth
    )

    if footnotes.is_contained:
        return Passthrough(content)

    return FootnoteRef(footnotes.append(content))


def _choice(
    node: NormalizedNode,
    context: Context,
    footnotes: FootnoteAccumulator,
    depth: int,
    max_depth: int,
) -> DocumentNode:
    """Resolve an abbreviation choice, preferring the expansion."""

    for tag, style in (("expan", "expansion"), ("abbr", "abbreviation")):
        option = node.find(tag)
        if option is not None:
            children = transform_children(
                option, context, footnotes, depth + 2, max_depth
            )
            return Formatted(style=style, children=children)

    return Passthrough(
        transform_children(node, context, footnotes, depth + 1, max_depth)
    )


def _entity(
    node: NormalizedNode,
    descriptor: TagDescriptor,
    children: DocumentNodeList,
) -> Entity:
    """Build an entity node with its display metadata."""

    kind = descriptor.kind or node.tag
    dates: dict[str, str | None] = {name: None for name in DATE_ATTRIBUTES}
    if kind == "date":
        dates.update({name: node.get(name) for name in DATE_ATTRIBUTES})

    return Entity(
        entity_kind=kind,
        children=children,
        subtype=resolve_entity_subtype(node.attributes),
        reference=node.get("ref"),
        when=dates["when"],
        not_before=dates["notBefore"],
        not_after=dates["notAfter"],
    )


def _formatted(
    node: NormalizedNode,
    descriptor: TagDescriptor,
    children: DocumentNodeList,
) -> Formatted:
    """Build a formatted span with its resolved style."""

    if node.tag == "hi":
        style = resolve_hi_style(node.attributes)
    else:
        style = descriptor.kind

    language = node.get("xml:lang") if node.tag == "foreign" else None
    return Formatted(style=style, children=children, language=language)
