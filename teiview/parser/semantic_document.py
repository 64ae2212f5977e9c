"""Result of transforming one TEI document."""

from __future__ import annotations

from typing import Any

from attrs import asdict, define

from .types import DocumentNodeList, FootnoteList


@define(slots=True, frozen=True)
class SemanticDocument:
    """Display-agnostic model of a letter transcription.

    Attributes:
        title: Inline content of the title, empty when the header lacks one.
        body: Block content of the letter.
        footnotes: Content of each footnote; ``footnotes[i]`` belongs to the
            ``FootnoteRef`` with index ``i + 1``.
    """

    title: DocumentNodeList = ()
    body: DocumentNodeList = ()
    footnotes: FootnoteList = ()


def document_to_dict(document: SemanticDocument) -> dict[str, Any]:
    """Convert ``document`` to plain dictionaries and lists.

    Args:
        document: Extracted semantic document.

    Returns:
        Structure suitable for JSON or YAML serialization.
    """

    return asdict(document)
