"""Adapt upstream parse trees into ``NormalizedNode`` trees.

Each supported parser output shape has its own adapter. ``normalize`` picks
the first adapter that recognizes the input, so callers never need to say
which parser produced it.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, PreformattedString, Tag
from lxml import etree

from .errors import StructureTooDeep
from .normalized_node import NormalizedNode, TextLeaf
from .types import MAX_DEPTH, AttributeMap, NormalizedChild

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

# Reserved keys used by object-tree parsers.
ATTRIBUTE_PREFIXES = ("@_", "@")
ATTRIBUTE_GROUP_KEY = ":@"
TEXT_KEY = "#text"

# DOM node types.
ELEMENT_NODE = 1
TEXT_NODE = 3
CDATA_SECTION_NODE = 4
DOCUMENT_NODE = 9


def _local_name(name: str) -> str:
    """Strip a namespace URI or prefix from ``name`` and lower-case it."""

    if "}" in name:
        name = name.split("}", 1)[1]
    if ":" in name:
        name = name.split(":", 1)[1]
    return name.lower()


def _attribute_name(name: str) -> str:
    """Return the qualified attribute name for an etree attribute key."""

    if name.startswith("{"):
        uri, local = name[1:].split("}", 1)
        if uri == XML_NAMESPACE:
            return f"xml:{local}"
        return local
    return name


def _scalar_text(value: object) -> str:
    """Render a parser-converted scalar back into its source text."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _clean_attributes(attributes: AttributeMap) -> AttributeMap:
    """Drop namespace declarations, which not every parser reports."""

    return {
        name: value
        for name, value in attributes.items()
        if name != "xmlns" and not name.startswith("xmlns:")
    }


def _check_depth(depth: int, max_depth: int) -> None:
    """Raise ``StructureTooDeep`` once ``depth`` passes ``max_depth``."""

    if depth > max_depth:
        raise StructureTooDeep(max_depth)


@runtime_checkable
class NodeAdapter(Protocol):
    """Contract implemented by every upstream shape adapter."""

    def supports(self, raw: object) -> bool:
        """Return True when this adapter understands ``raw``."""

    def normalize(
        self, raw: object, max_depth: int = MAX_DEPTH
    ) -> NormalizedNode | None:
        """Convert the root ``raw`` into a normalized element."""


class SoupAdapter:
    """Adapter for BeautifulSoup trees."""

    def supports(self, raw: object) -> bool:
        return isinstance(raw, (Tag, NavigableString))

    def normalize(
        self, raw: object, max_depth: int = MAX_DEPTH
    ) -> NormalizedNode | None:
        if isinstance(raw, BeautifulSoup):
            # The document object wraps the root element.
            raw = next(
                (c for c in raw.contents if isinstance(c, Tag)), None
            )
        node = self._node(raw, 0, max_depth)
        return node if isinstance(node, NormalizedNode) else None

    def _node(
        self, raw: Any, depth: int, max_depth: int  # noqa: ANN401
    ) -> NormalizedChild | None:
        if isinstance(raw, CData):
            return TextLeaf(str(raw))

        # Comments, declarations and processing instructions.
        if isinstance(raw, PreformattedString):
            return None

        if isinstance(raw, NavigableString):
            return TextLeaf(str(raw))

        if not isinstance(raw, Tag):
            logger.debug(f"Skipping unrecognized soup node {raw!r}")
            return None

        _check_depth(depth, max_depth)

        attributes: AttributeMap = {}
        for name, value in raw.attrs.items():
            # Multi-valued attributes arrive as lists.
            if isinstance(value, list):
                value = " ".join(value)
            attributes[str(name)] = str(value)

        node = NormalizedNode(
            tag=_local_name(raw.name), attributes=_clean_attributes(attributes)
        )
        for child in raw.contents:
            normalized = self._node(child, depth + 1, max_depth)
            if normalized is not None:
                node.children.append(normalized)
        return node


class EtreeAdapter:
    """Adapter for lxml and standard library ElementTree elements."""

    def supports(self, raw: object) -> bool:
        if isinstance(raw, (ET.Element, ET.ElementTree)):
            return True
        return etree.iselement(raw) or isinstance(raw, etree._ElementTree)

    def normalize(
        self, raw: object, max_depth: int = MAX_DEPTH
    ) -> NormalizedNode | None:
        if isinstance(raw, (ET.ElementTree, etree._ElementTree)):
            raw = raw.getroot()
        if raw is None or not isinstance(raw.tag, str):
            return None
        return self._element(raw, 0, max_depth)

    def _element(
        self, raw: Any, depth: int, max_depth: int  # noqa: ANN401
    ) -> NormalizedNode:
        _check_depth(depth, max_depth)

        attributes = {
            _attribute_name(name): value for name, value in raw.attrib.items()
        }
        node = NormalizedNode(
            tag=_local_name(raw.tag), attributes=_clean_attributes(attributes)
        )

        if raw.text:
            node.children.append(TextLeaf(raw.text))

        for child in raw:
            # Comments and processing instructions have a callable tag, but
            # the text that follows them still belongs to this element.
            if isinstance(child.tag, str):
                node.children.append(
                    self._element(child, depth + 1, max_depth)
                )
            if child.tail:
                node.children.append(TextLeaf(child.tail))

        return node


class DomAdapter:
    """Adapter for DOM trees such as those built by ``xml.dom.minidom``."""

    def supports(self, raw: object) -> bool:
        return hasattr(raw, "nodeType") and hasattr(raw, "childNodes")

    def normalize(
        self, raw: object, max_depth: int = MAX_DEPTH
    ) -> NormalizedNode | None:
        if getattr(raw, "nodeType", None) == DOCUMENT_NODE:
            raw = getattr(raw, "documentElement", None)
        node = self._node(raw, 0, max_depth)
        return node if isinstance(node, NormalizedNode) else None

    def _node(
        self, raw: Any, depth: int, max_depth: int  # noqa: ANN401
    ) -> NormalizedChild | None:
        node_type = getattr(raw, "nodeType", None)

        if node_type in (TEXT_NODE, CDATA_SECTION_NODE):
            return TextLeaf(raw.data)

        if node_type != ELEMENT_NODE:
            # Comments and processing instructions carry no content.
            return None

        _check_depth(depth, max_depth)

        node = NormalizedNode(
            tag=_local_name(raw.tagName),
            attributes=_clean_attributes(self._attributes(raw.attributes)),
        )
        for child in raw.childNodes:
            normalized = self._node(child, depth + 1, max_depth)
            if normalized is not None:
                node.children.append(normalized)
        return node

    def _attributes(self, raw: Any) -> AttributeMap:  # noqa: ANN401
        """Read attributes from a mapping or a ``NamedNodeMap``."""

        if raw is None:
            return {}

        items = getattr(raw, "items", None)
        if callable(items):
            return {str(name): str(value) for name, value in items()}

        attributes: AttributeMap = {}
        for index in range(raw.length):
            attr = raw.item(index)
            attributes[attr.name] = attr.value
        return attributes


class ObjectTreeAdapter:
    """Adapter for trees produced by declarative XML-to-object parsers.

    Two arrangements are understood. The preserve-order arrangement is a
    list of single-key mappings, with attributes grouped under ``:@``::

        [{"TEI": [{"text": [...]}], ":@": {"@_xml:lang": "de"}}]

    The collapsed arrangement nests mappings and turns repeated elements
    into lists::

        {"TEI": {"@xml:lang": "de", "text": {"body": {"p": ["a", "b"]}}}}
    """

    def supports(self, raw: object) -> bool:
        return isinstance(raw, (Mapping, list))

    def normalize(
        self, raw: object, max_depth: int = MAX_DEPTH
    ) -> NormalizedNode | None:
        if isinstance(raw, list):
            for entry in raw:
                node = self._ordered(entry, 0, max_depth)
                if isinstance(node, NormalizedNode):
                    return node
            return None

        if not isinstance(raw, Mapping):
            return None

        if self._is_ordered_entry(raw):
            node = self._ordered(raw, 0, max_depth)
            return node if isinstance(node, NormalizedNode) else None

        tags = [key for key in raw if self._is_element_key(key)]
        if len(tags) != 1:
            logger.debug(f"Object tree root has element keys {tags}")
            return None
        return self._collapsed(tags[0], raw[tags[0]], 0, max_depth)

    def _is_attribute_key(self, key: str) -> bool:
        return key.startswith(ATTRIBUTE_PREFIXES) and key != ATTRIBUTE_GROUP_KEY

    def _is_element_key(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        if key == ATTRIBUTE_GROUP_KEY or self._is_attribute_key(key):
            return False

        # Declarations, comments and the text key.
        return not key.startswith(("?", "!", "#"))

    def _is_ordered_entry(self, raw: Mapping) -> bool:
        if ATTRIBUTE_GROUP_KEY in raw:
            return True
        return any(
            isinstance(value, list)
            for key, value in raw.items()
            if self._is_element_key(key)
        )

    def _attributes(self, raw: Mapping) -> AttributeMap:
        attributes: AttributeMap = {}
        for key, value in raw.items():
            name = str(key)
            for prefix in ATTRIBUTE_PREFIXES:
                if name.startswith(prefix):
                    name = name[len(prefix) :]
                    break
            attributes[name] = _scalar_text(value)
        return _clean_attributes(attributes)

    def _ordered(
        self, entry: object, depth: int, max_depth: int
    ) -> NormalizedChild | None:
        if not isinstance(entry, Mapping):
            logger.debug(f"Skipping unrecognized entry {entry!r}")
            return None

        if TEXT_KEY in entry:
            return TextLeaf(_scalar_text(entry[TEXT_KEY]))

        keys = [key for key in entry if key != ATTRIBUTE_GROUP_KEY]
        if len(keys) != 1:
            logger.debug(f"Skipping entry with keys {keys}")
            return None

        tag = keys[0]
        if not self._is_element_key(tag):
            return None

        children = entry[tag]
        if children is None:
            children = []
        if not isinstance(children, list):
            logger.debug(f"Skipping <{tag}> with non-list content")
            return None

        _check_depth(depth, max_depth)

        attributes = entry.get(ATTRIBUTE_GROUP_KEY) or {}
        node = NormalizedNode(
            tag=_local_name(tag),
            attributes=(
                self._attributes(attributes)
                if isinstance(attributes, Mapping)
                else {}
            ),
        )
        for child in children:
            normalized = self._ordered(child, depth + 1, max_depth)
            if normalized is not None:
                node.children.append(normalized)
        return node

    def _collapsed(
        self,
        tag: str,
        value: object,
        depth: int,
        max_depth: int,
    ) -> NormalizedNode | None:
        _check_depth(depth, max_depth)

        node = NormalizedNode(tag=_local_name(tag))

        if value is None:
            return node

        if isinstance(value, (str, int, float, bool)):
            node.children.append(TextLeaf(_scalar_text(value)))
            return node

        if not isinstance(value, Mapping):
            logger.debug(f"Skipping <{tag}> with content {value!r}")
            return None

        attributes: dict[str, object] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                continue

            if self._is_attribute_key(key):
                attributes[key] = item
                continue

            if key == TEXT_KEY:
                texts = item if isinstance(item, list) else [item]
                node.children.extend(
                    TextLeaf(_scalar_text(text))
                    for text in texts
                    if text is not None
                )
                continue

            if not self._is_element_key(key):
                continue

            # Repeated elements are siblings, never a wrapper.
            entries = item if isinstance(item, list) else [item]
            for entry in entries:
                child = self._collapsed(key, entry, depth + 1, max_depth)
                if child is not None:
                    node.children.append(child)

        node.attributes = self._attributes(attributes)
        return node


# Soup and etree objects come first: a soup ``Tag`` answers any attribute
# lookup, which would fool the duck-typed DOM check.
ADAPTERS: tuple[NodeAdapter, ...] = (
    SoupAdapter(),
    EtreeAdapter(),
    DomAdapter(),
    ObjectTreeAdapter(),
)


def normalize(
    raw: object, max_depth: int = MAX_DEPTH
) -> NormalizedNode | None:
    """Convert any supported parse tree into a ``NormalizedNode``.

    Args:
        raw: Root of a DOM, ElementTree, BeautifulSoup or object tree.
        max_depth: Maximum element nesting accepted.

    Returns:
        The normalized root element, or ``None`` when ``raw`` is missing or
        has an unrecognized shape.

    Raises:
        StructureTooDeep: If nesting exceeds ``max_depth`` or the interpreter
            stack.
    """

    if raw is None:
        return None

    if isinstance(raw, NormalizedNode):
        return raw

    for adapter in ADAPTERS:
        if adapter.supports(raw):
            try:
                return adapter.normalize(raw, max_depth)
            except RecursionError as exc:
                raise StructureTooDeep(
                    max_depth, stack_exhausted=True
                ) from exc

    logger.debug(f"No adapter recognizes {type(raw).__name__}")
    return None
