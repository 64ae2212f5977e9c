"""Locate the title and letter body of a TEI document and transform them."""

from __future__ import annotations

import logging

from .errors import NotATeiDocument, StructureTooDeep
from .footnotes import FootnoteAccumulator
from .normalized_node import NormalizedNode
from .normalizer import normalize
from .semantic_document import SemanticDocument
from .tag_classifier import Context
from .transformer import transform_children
from .types import MAX_DEPTH, DocumentNodeList

logger = logging.getLogger(__name__)

ROOT_TAG = "tei"
TITLE_PATH = ("teiheader", "filedesc", "titlestmt", "title")
BODY_PATH = ("text", "body")
WRITING_SESSION = "writingSession"


def _find_path(
    root: NormalizedNode, path: tuple[str, ...]
) -> NormalizedNode | None:
    """Follow ``path`` through element children.

    Every element matching a step is searched, so a later branch is used
    when the first one lacks the rest of the path.

    Args:
        root: Element where the search starts.
        path: Tag names of the successive children.

    Returns:
        The first element at the end of the path in document order, or
        ``None`` if no branch reaches it.
    """

    candidates = [root]
    for tag in path:
        candidates = [
            child for node in candidates for child in node.find_all(tag)
        ]
    return candidates[0] if candidates else None


def _select_letter_content(body: NormalizedNode) -> NormalizedNode:
    """Choose the element holding the letter text within ``body``.

    Prefers the writing-session division, then the first typed division,
    then the first division, and finally the body itself.
    """

    divisions = [n for n in body.iter_descendants() if n.tag == "div"]

    for division in divisions:
        if division.get("type") == WRITING_SESSION:
            return division

    typed = [d for d in divisions if d.get("type")]
    if typed:
        division_type = typed[0].get("type")
        logger.debug(f"No writing session; using div of type {division_type}")
        return typed[0]

    if divisions:
        logger.debug("No typed division; using the first division")
        return divisions[0]

    return body


def extract(
    root: NormalizedNode | None, max_depth: int = MAX_DEPTH
) -> SemanticDocument:
    """Build the semantic model of a normalized TEI document.

    Args:
        root: Root element produced by the normalizer.
        max_depth: Maximum element nesting accepted.

    Returns:
        The assembled document. Missing title or body sections yield empty
        sequences.

    Raises:
        NotATeiDocument: If ``root`` is missing or is not a ``TEI`` element.
        StructureTooDeep: If nesting exceeds ``max_depth`` or the interpreter
            stack.
    """

    if root is None:
        raise NotATeiDocument(None)
    if root.tag.lower() != ROOT_TAG:
        raise NotATeiDocument(root.tag)

    # One accumulator per pass; the title's notes are numbered first.
    footnotes = FootnoteAccumulator()

    title_node = _find_path(root, TITLE_PATH)
    if title_node is None:
        logger.warning("Missing section: teiHeader/fileDesc/titleStmt/title")

    body_node = _find_path(root, BODY_PATH)
    if body_node is None:
        logger.warning("Missing section: text/body")

    title: DocumentNodeList = ()
    body: DocumentNodeList = ()
    try:
        if title_node is not None:
            title = transform_children(
                title_node, Context.INLINE, footnotes, 1, max_depth
            )
        if body_node is not None:
            content = _select_letter_content(body_node)
            body = transform_children(
                content, Context.BLOCK, footnotes, 1, max_depth
            )
    except RecursionError as exc:
        raise StructureTooDeep(max_depth, stack_exhausted=True) from exc

    logger.debug(
        f"Extracted {len(title)} title nodes, {len(body)} body nodes and "
        f"{len(footnotes)} footnotes"
    )
    return SemanticDocument(
        title=title, body=body, footnotes=footnotes.freeze()
    )


def load_document(raw: object, max_depth: int = MAX_DEPTH) -> SemanticDocument:
    """Normalize any supported parse tree and extract its document.

    Args:
        raw: Root of a DOM, ElementTree, BeautifulSoup or object tree.
        max_depth: Maximum element nesting accepted.

    Returns:
        The extracted semantic document.
    """

    return extract(normalize(raw, max_depth), max_depth)
