"""Tests for parsing raw markup and reading files from disk."""

from __future__ import annotations

import json
from pathlib import Path
from xml.dom import minidom

import pytest
from bs4 import BeautifulSoup
from lxml import etree

from teiview.parser import (
    SHAPES,
    ParseFailure,
    Paragraph,
    Text,
    load_document,
    parse_xml,
    read_document,
)

TINY = "<TEI><text><body><p>hi</p></body></text></TEI>"


def test_shapes_produce_their_parser_trees() -> None:
    """Each shape returns the tree type of its parser."""

    assert isinstance(parse_xml(TINY, "etree"), etree._Element)
    assert isinstance(parse_xml(TINY, "dom"), minidom.Element)
    assert isinstance(parse_xml(TINY, "soup"), BeautifulSoup)


@pytest.mark.parametrize("shape", SHAPES)
def test_every_shape_extracts_the_same_body(shape: str) -> None:
    """All shapes lead to the same document for simple markup."""

    doc = load_document(parse_xml(TINY, shape))
    assert doc.body == (Paragraph((Text("hi"),)),)


def test_bytes_input_honors_declared_encoding() -> None:
    """Byte input is decoded using its XML declaration."""

    raw = (
        '<?xml version="1.0" encoding="ISO-8859-1"?>'
        "<TEI><text><body><p>März</p></body></text></TEI>"
    ).encode("latin-1")
    doc = load_document(parse_xml(raw))
    assert doc.body == (Paragraph((Text("März"),)),)


@pytest.mark.parametrize("shape", ["etree", "dom"])
def test_malformed_markup_fails(shape: str) -> None:
    """Strict parsers report malformed markup as a parse failure."""

    with pytest.raises(ParseFailure) as excinfo:
        parse_xml("<TEI><p></TEI>", shape)
    assert "XML parsing error" in str(excinfo.value)


def test_soup_without_elements_fails() -> None:
    """The lenient soup parser fails only when no element is found."""

    with pytest.raises(ParseFailure):
        parse_xml("just text", "soup")


def test_unknown_shape_is_rejected() -> None:
    """Unsupported shapes raise ``ValueError``."""

    with pytest.raises(ValueError):
        parse_xml(TINY, "html5")


def test_object_trees_are_not_a_markup_shape() -> None:
    """Object trees are accepted only as already-parsed input."""

    assert "object" not in SHAPES
    with pytest.raises(ValueError):
        parse_xml(TINY, "object")


def test_entities_are_not_expanded() -> None:
    """External entities stay unresolved."""

    xml = (
        '<!DOCTYPE TEI [<!ENTITY ext SYSTEM "file:///etc/passwd">]>'
        "<TEI><text><body><p>&ext;</p></body></text></TEI>"
    )
    doc = load_document(parse_xml(xml))
    assert "root:" not in repr(doc)


def test_read_document_from_xml(tmp_path: Path, sample_tei: str) -> None:
    """XML files go through the chosen parser."""

    path = tmp_path / "letter.xml"
    path.write_text(sample_tei, encoding="utf-8")

    from_etree = read_document(path)
    from_dom = read_document(path, "dom")

    assert from_etree == from_dom
    assert len(from_etree.footnotes) == 3


def test_read_document_from_object_tree(
    tmp_path: Path, compact_tei: str, compact_ordered: list
) -> None:
    """JSON files are loaded as object trees."""

    path = tmp_path / "letter.json"
    path.write_text(json.dumps(compact_ordered), encoding="utf-8")

    assert read_document(path) == load_document(parse_xml(compact_tei))


def test_read_document_reports_bad_xml(tmp_path: Path) -> None:
    """Malformed files raise a parse failure."""

    path = tmp_path / "broken.xml"
    path.write_text("<TEI>", encoding="utf-8")

    with pytest.raises(ParseFailure):
        read_document(path)
