"""Exception classes for tagtree.

Provides standardized exceptions for error handling throughout tagtree.
"""

from __future__ import annotations


class TagTreeError(Exception):
    """Base exception for all tagtree errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(TagTreeError):
    """Error during markup parsing.

    Raised when the parser cannot make progress on its input.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        """Initialize parse error with optional cursor position.

        Args:
            message: Error description
            position: Offset into the source where the parser stopped (0-indexed)
        """
        self.message = message
        self.position = position

        location = f"offset {position}: " if position is not None else ""
        super().__init__(f"{location}{message}")


class UnboundedLoopError(ParseError):
    """Child collection for one element exceeded the iteration cap.

    The matching close tag never appeared. The whole parse is aborted;
    no partial tree is returned.
    """

    def __init__(self, tag_name: str, iterations: int, position: int | None = None) -> None:
        """Initialize unbounded loop error.

        Args:
            tag_name: Name of the element whose close tag was never found
            iterations: Number of loop iterations performed before giving up
            position: Offset into the source where the parser stopped
        """
        self.tag_name = tag_name
        self.iterations = iterations
        super().__init__(
            f"unbounded loop while collecting children of <{tag_name}> "
            f"(no matching close tag after {iterations} iterations)",
            position=position,
        )
