"""Common type aliases for parser structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .document_node import (  # noqa: F401
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
    from .normalized_node import NormalizedNode, TextLeaf  # noqa: F401


DocumentNode = Union[
    "Text",
    "Paragraph",
    "Block",
    "Entity",
    "Formatted",
    "FootnoteRef",
    "PageBreak",
    "LineBreak",
    "Passthrough",
]
DocumentNodeList = tuple[DocumentNode, ...]
FootnoteList = tuple[DocumentNodeList, ...]
NormalizedChild = Union["NormalizedNode", "TextLeaf"]
NormalizedChildList = list[NormalizedChild]
AttributeMap = dict[str, str]

# Default limit on element nesting for one transformation pass.
MAX_DEPTH = 200
