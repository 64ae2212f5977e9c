"""Shape-independent element tree consumed by the transformer."""

from __future__ import annotations

from collections.abc import Iterator

from attrs import define, field

from .types import AttributeMap, NormalizedChildList


@define(slots=True, frozen=True)
class TextLeaf:
    """Character data found between elements.

    Attributes:
        text: Text content, kept verbatim including whitespace.
    """

    text: str


@define(slots=True)
class NormalizedNode:
    """Element of the normalized tree.

    Attributes:
        tag: Lower-cased local element name.
        attributes: Attribute values keyed by their qualified name, such as
            ``xml:lang``.
        children: Child elements and text leaves in document order.
    """

    tag: str
    attributes: AttributeMap = field(factory=dict)
    children: NormalizedChildList = field(factory=list, repr=False)

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name`` or ``default``."""

        return self.attributes.get(name, default)

    def elements(self) -> Iterator[NormalizedNode]:
        """Iterate over the element children, skipping text."""

        for child in self.children:
            if isinstance(child, NormalizedNode):
                yield child

    def find(self, tag: str) -> NormalizedNode | None:
        """Return the first element child named ``tag``."""

        tag = tag.lower()
        return next((c for c in self.elements() if c.tag == tag), None)

    def find_all(self, tag: str) -> list[NormalizedNode]:
        """Return every element child named ``tag``."""

        tag = tag.lower()
        return [c for c in self.elements() if c.tag == tag]

    def iter_descendants(self) -> Iterator[NormalizedNode]:
        """Iterate over descendant elements in document order."""

        # Explicit stack keeps deep trees off the call stack.
        stack = list(reversed(list(self.elements())))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.elements())))
