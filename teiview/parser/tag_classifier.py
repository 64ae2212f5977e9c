"""Static table describing what each TEI tag means."""

from __future__ import annotations

from enum import Enum

from attrs import define

from .types import AttributeMap


class Role(str, Enum):
    """Semantic role of an element."""

    PARAGRAPH = "paragraph"
    BLOCK = "block"
    ENTITY = "entity"
    FORMATTING = "formatting"
    PAGE_BREAK = "page_break"
    LINE_BREAK = "line_break"
    FOOTNOTE = "footnote"
    CHOICE = "choice"
    PASSTHROUGH = "passthrough"


class Context(str, Enum):
    """Whether content occupies its own position or runs inside text."""

    BLOCK = "block"
    INLINE = "inline"


@define(slots=True, frozen=True)
class TagDescriptor:
    """Role of a tag plus the metadata needed to build its output.

    Attributes:
        role: Semantic role of the tag.
        kind: Block kind, entity kind or formatting style, depending on the
            role.
        child_context: Context in which the children are transformed;
            ``None`` keeps the parent's context.
    """

    role: Role
    kind: str | None = None
    child_context: Context | None = Context.INLINE


PASSTHROUGH = TagDescriptor(Role.PASSTHROUGH, child_context=None)

# Keys are lower-case tag names.
TAG_TABLE: dict[str, TagDescriptor] = {
    # Blocks
    "p": TagDescriptor(Role.PARAGRAPH, "paragraph"),
    "opener": TagDescriptor(Role.BLOCK, "opener"),
    "closer": TagDescriptor(Role.BLOCK, "closer"),
    "dateline": TagDescriptor(Role.BLOCK, "dateline"),
    "salute": TagDescriptor(Role.BLOCK, "salute"),
    "signed": TagDescriptor(Role.BLOCK, "signed"),
    # Entities
    "rs": TagDescriptor(Role.ENTITY, "rs"),
    "persname": TagDescriptor(Role.ENTITY, "persName"),
    "placename": TagDescriptor(Role.ENTITY, "placeName"),
    "date": TagDescriptor(Role.ENTITY, "date"),
    "work": TagDescriptor(Role.ENTITY, "work"),
    "organization": TagDescriptor(Role.ENTITY, "organization"),
    # Formatting; the style of ``hi`` depends on its rendition.
    "q": TagDescriptor(Role.FORMATTING, "quotation"),
    "hi": TagDescriptor(Role.FORMATTING),
    "foreign": TagDescriptor(Role.FORMATTING, "foreign"),
    "add": TagDescriptor(Role.FORMATTING, "addition"),
    "del": TagDescriptor(Role.FORMATTING, "deletion"),
    "sic": TagDescriptor(Role.FORMATTING, "sic"),
    "supplied": TagDescriptor(Role.FORMATTING, "supplied"),
    "formula": TagDescriptor(Role.FORMATTING, "formula"),
    "unclear": TagDescriptor(Role.FORMATTING, "unclear"),
    # Structural breaks
    "pb": TagDescriptor(Role.PAGE_BREAK, child_context=None),
    "lb": TagDescriptor(Role.LINE_BREAK, child_context=None),
    # Special constructs
    "note": TagDescriptor(Role.FOOTNOTE, child_context=Context.BLOCK),
    "choice": TagDescriptor(Role.CHOICE),
}

# ``hi`` rendition values and the style they resolve to.
HI_STYLES: dict[str, str] = {
    "u": "underline",
    "underline": "underline",
    "uu": "underline",
    "i": "italic",
    "italic": "italic",
    "b": "bold",
    "bold": "bold",
    "aq": "monospace",
}

ENTITY_SUBTYPE_ATTRIBUTES = ("type", "t", "subtype")
DATE_ATTRIBUTES = ("when", "notBefore", "notAfter")


def classify(tag: str) -> TagDescriptor:
    """Return the descriptor for ``tag``, ignoring case.

    Unknown tags classify as passthrough so that their content survives.
    """

    return TAG_TABLE.get(tag.lower(), PASSTHROUGH)


def resolve_hi_style(attributes: AttributeMap) -> str | None:
    """Return the style named by the ``rend`` or ``rendition`` attribute."""

    rendition = attributes.get("rend") or attributes.get("rendition")
    if rendition is None:
        return None
    return HI_STYLES.get(rendition)


def resolve_entity_subtype(attributes: AttributeMap) -> str | None:
    """Return the entity type from ``type``, then ``t``, then ``subtype``."""

    for name in ENTITY_SUBTYPE_ATTRIBUTES:
        value = attributes.get(name)
        if value:
            return value
    return None
