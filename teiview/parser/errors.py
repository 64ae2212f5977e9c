"""Exceptions raised while loading and extracting TEI documents."""

from __future__ import annotations


class TeiViewError(Exception):
    """Base class for failures reported to the caller."""


class ParseFailure(TeiViewError):
    """The upstream XML parser rejected the markup."""


class NotATeiDocument(TeiViewError):
    """The root element is not a ``TEI`` element."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        if tag is None:
            message = "Not a valid TEI document: no root element found"
        else:
            message = f"Not a valid TEI document: root element is <{tag}>"
        super().__init__(message)


class StructureTooDeep(TeiViewError):
    """Element nesting exceeds the configured depth limit.

    Also raised when the interpreter stack runs out before ``max_depth`` is
    reached, which a large user-supplied limit makes possible.
    """

    def __init__(self, max_depth: int, stack_exhausted: bool = False) -> None:
        self.max_depth = max_depth
        self.stack_exhausted = stack_exhausted
        if stack_exhausted:
            message = (
                "Document nesting exhausted the interpreter stack before "
                f"reaching the maximum depth of {max_depth}"
            )
        else:
            message = (
                f"Document nesting exceeds the maximum depth of {max_depth}"
            )
        super().__init__(message)
