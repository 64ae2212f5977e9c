"""Parser package for TEI letter transcriptions."""

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
    flatten_passthrough,
)
from .errors import (
    NotATeiDocument,
    ParseFailure,
    StructureTooDeep,
    TeiViewError,
)
from .extractor import extract, load_document
from .footnotes import FootnoteAccumulator
from .normalized_node import NormalizedNode, TextLeaf
from .normalizer import normalize
from .parse_xml import DEFAULT_SHAPE, SHAPES, parse_xml
from .read_document import read_document
from .semantic_document import SemanticDocument, document_to_dict
from .tag_classifier import Context, Role, classify
from .transformer import transform, transform_children

__all__ = [
    "Block",
    "Context",
    "DEFAULT_SHAPE",
    "Entity",
    "FootnoteAccumulator",
    "FootnoteRef",
    "Formatted",
    "LineBreak",
    "NormalizedNode",
    "NotATeiDocument",
    "PageBreak",
    "Paragraph",
    "ParseFailure",
    "Passthrough",
    "Role",
    "SHAPES",
    "SemanticDocument",
    "StructureTooDeep",
    "TeiViewError",
    "Text",
    "TextLeaf",
    "classify",
    "document_to_dict",
    "extract",
    "flatten_passthrough",
    "load_document",
    "normalize",
    "parse_xml",
    "read_document",
    "transform",
    "transform_children",
]
