"""Shared TEI samples for the test suite."""

from __future__ import annotations

import copy

import pytest
import xmltodict  # type: ignore[import-untyped]

SAMPLE_TEI = """<?xml version="1.0" encoding="UTF-8"?>
<TEI xmlns="http://www.tei-c.org/ns/1.0">
  <teiHeader>
    <fileDesc>
      <titleStmt>
        <title>Letter to <persName ref="#hb">Hans Bauer</persName><note>Draft title.</note></title>
      </titleStmt>
    </fileDesc>
  </teiHeader>
  <text>
    <body>
      <div type="letter">
        <div type="writingSession">
          <opener>
            <dateline><placeName>Wien</placeName>, <date when="1921-03-04">4. März 1921</date></dateline>
            <salute>Lieber Freund!</salute>
          </opener>
          <pb n="1"/>
          <p>Ich habe <rs type="work">das Buch</rs> gelesen<note>See <hi rend="i">Tractatus</hi>.</note> und <choice><abbr>Dr</abbr><expan>Doktor</expan></choice> <persName>Russell</persName> geschrieben.<lb/>Mehr <foreign xml:lang="en">soon</foreign>.</p>
          <pb n="2"/>
          <p>Second <unknownTag>page</unknownTag>.<note>Second note.</note></p>
          <closer><salute>Dein</salute> <signed>Ludwig</signed></closer>
        </div>
      </div>
    </body>
  </text>
</TEI>
"""

# Same logical letter without whitespace between elements, so that every
# parser reports identical text. Text only ever follows the child elements
# of its parent, which the collapsed object arrangement can represent.
COMPACT_TEI = (
    '<TEI xmlns="http://www.tei-c.org/ns/1.0">'
    "<teiHeader><fileDesc><titleStmt>"
    "<title><persName>Moore</persName>: Brief</title>"
    "</titleStmt></fileDesc></teiHeader>"
    '<text><body><div type="writingSession">'
    '<p><rs type="person">Moore</rs><note>Erste Notiz.</note>, lieber Freund</p>'
    "<p><choice><abbr>Dr</abbr><expan>Doktor</expan></choice>"
    '<hi rend="u">jetzt</hi></p>'
    '<pb n="2"/>'
    "</div></body></text></TEI>"
)

# COMPACT_TEI as a preserve-order object tree.
COMPACT_ORDERED = [
    {"?xml": [{"#text": ""}], ":@": {"@_version": "1.0"}},
    {
        "TEI": [
            {
                "teiHeader": [
                    {
                        "fileDesc": [
                            {
                                "titleStmt": [
                                    {
                                        "title": [
                                            {"persName": [{"#text": "Moore"}]},
                                            {"#text": ": Brief"},
                                        ]
                                    }
                                ]
                            }
                        ]
                    }
                ]
            },
            {
                "text": [
                    {
                        "body": [
                            {
                                "div": [
                                    {
                                        "p": [
                                            {
                                                "rs": [{"#text": "Moore"}],
                                                ":@": {"@_type": "person"},
                                            },
                                            {
                                                "note": [
                                                    {"#text": "Erste Notiz."}
                                                ]
                                            },
                                            {"#text": ", lieber Freund"},
                                        ]
                                    },
                                    {
                                        "p": [
                                            {
                                                "choice": [
                                                    {"abbr": [{"#text": "Dr"}]},
                                                    {
                                                        "expan": [
                                                            {"#text": "Doktor"}
                                                        ]
                                                    },
                                                ]
                                            },
                                            {
                                                "hi": [{"#text": "jetzt"}],
                                                ":@": {"@_rend": "u"},
                                            },
                                        ]
                                    },
                                    {"pb": [], ":@": {"@_n": 2}},
                                ],
                                ":@": {"@_type": "writingSession"},
                            }
                        ]
                    }
                ]
            },
        ],
        ":@": {"@_xmlns": "http://www.tei-c.org/ns/1.0"},
    },
]


@pytest.fixture
def sample_tei() -> str:
    """Return a complete letter with notes, choices and page breaks."""
    return SAMPLE_TEI


@pytest.fixture
def compact_tei() -> str:
    """Return a short letter without inter-element whitespace."""
    return COMPACT_TEI


@pytest.fixture
def compact_ordered() -> list:
    """Return ``COMPACT_TEI`` in the preserve-order object arrangement."""
    return copy.deepcopy(COMPACT_ORDERED)


@pytest.fixture
def compact_collapsed() -> dict:
    """Return ``COMPACT_TEI`` as parsed by xmltodict."""
    return xmltodict.parse(COMPACT_TEI, strip_whitespace=False)
