"""Hand raw markup to one of the supported upstream XML parsers."""

from __future__ import annotations

from typing import Any
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from bs4 import BeautifulSoup
from lxml import etree

from .errors import ParseFailure

# Object trees are not listed: the collapsed arrangement loses the order of
# mixed content, so they are only accepted as already-parsed input.
SHAPES = ("etree", "dom", "soup")
DEFAULT_SHAPE = "etree"


def _as_bytes(text: str | bytes) -> bytes:
    """Encode ``text`` so that XML encoding declarations are honored."""

    return text.encode("utf-8") if isinstance(text, str) else text


def parse_xml(
    text: str | bytes, shape: str = DEFAULT_SHAPE
) -> Any:  # noqa: ANN401
    """Parse XML markup into the tree shape named by ``shape``.

    Args:
        text: Raw XML content.
        shape: ``etree`` for lxml, ``dom`` for ``xml.dom.minidom`` or
            ``soup`` for BeautifulSoup.

    Returns:
        Root of the parsed tree, ready for the normalizer.

    Raises:
        ParseFailure: If the markup is not well-formed or has no root
            element.
        ValueError: If ``shape`` is not supported.
    """

    if shape not in SHAPES:
        raise ValueError(f"Unsupported shape {shape!r}; use one of {SHAPES}")

    try:
        if shape == "etree":
            # Untrusted input: never resolve entities or fetch DTDs.
            parser = etree.XMLParser(
                resolve_entities=False, no_network=True, load_dtd=False
            )
            return etree.fromstring(_as_bytes(text), parser=parser)

        if shape == "dom":
            return minidom.parseString(_as_bytes(text)).documentElement
    except (etree.XMLSyntaxError, ExpatError) as exc:
        raise ParseFailure(f"XML parsing error: {exc}") from exc

    # The soup builder recovers from most errors instead of raising.
    soup = BeautifulSoup(_as_bytes(text), "xml")
    if soup.find(True) is None:
        raise ParseFailure("Could not find a valid root XML element.")
    return soup
