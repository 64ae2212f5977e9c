"""Registry of footnotes met during one transformation pass."""

from __future__ import annotations

from attrs import define, field

from .types import DocumentNodeList, FootnoteList


@define(slots=True)
class FootnoteAccumulator:
    """Append-only list of footnote contents.

    Each instance belongs to exactly one pass and is never shared between
    documents.

    Attributes:
        notes: Footnote contents in registration order.
        is_contained: True for the scratch accumulator used inside a note
            body; notes met there are not numbered.
    """

    notes: list[DocumentNodeList] = field(factory=list)
    is_contained: bool = False

    def append(self, content: DocumentNodeList) -> int:
        """Register ``content`` and return its 1-based index."""

        self.notes.append(tuple(content))
        return len(self.notes)

    def contained(self) -> FootnoteAccumulator:
        """Return a fresh accumulator for the body of a note."""

        return FootnoteAccumulator(is_contained=True)

    def freeze(self) -> FootnoteList:
        """Return an immutable snapshot of the registered notes."""

        return tuple(self.notes)

    def __len__(self) -> int:
        return len(self.notes)
