"""Read a TEI file from disk and extract its semantic document."""

from __future__ import annotations

import logging
from pathlib import Path

from teiview.json_utils import json_loads

from .extractor import load_document
from .parse_xml import DEFAULT_SHAPE, parse_xml
from .semantic_document import SemanticDocument
from .types import MAX_DEPTH

logger = logging.getLogger(__name__)

# Files with these suffixes hold an object tree dumped by another parser.
OBJECT_TREE_SUFFIXES = (".json",)


def read_document(
    path: Path,
    shape: str = DEFAULT_SHAPE,
    max_depth: int = MAX_DEPTH,
) -> SemanticDocument:
    """Read ``path`` and build its semantic document.

    Args:
        path: XML file, or JSON file containing an object tree.
        shape: Upstream parser used for XML files.
        max_depth: Maximum element nesting accepted.

    Returns:
        The extracted semantic document.
    """

    data = path.read_bytes()

    if path.suffix.lower() in OBJECT_TREE_SUFFIXES:
        logger.debug(f"Loading object tree from {path}")
        raw = json_loads(data)
    else:
        logger.debug(f"Parsing {path} as {shape}")
        raw = parse_xml(data, shape)

    return load_document(raw, max_depth)
