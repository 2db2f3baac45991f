"""Domain exceptions: all public errors of globtree.

All exceptions visible to users are defined in the domain layer.
Application code raises these, never its own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from globtree.domain.matchers import Matcher


class GlobTreeError(Exception):
    """Base for all globtree exceptions.

    Allows: except GlobTreeError to catch all library errors.
    """


class CompilationError(GlobTreeError):
    """Compilation of an AST into a matcher tree failed.

    Compilation is all-or-nothing: no partial tree accompanies the error.
    """


class NoAnchorFoundError(CompilationError, ValueError):
    """Matcher sequence has no primitive to split a BTree on.

    Inherits ValueError: the sequence handed to the tree builder is invalid.

    Attributes:
        matchers: The offending sequence, kept for diagnostics.
    """

    def __init__(self, matchers: tuple[Matcher, ...]) -> None:
        """Initialize with the sequence that could not be converted."""
        self.matchers = matchers
        rendered = ", ".join(str(m) for m in matchers)
        super().__init__(f"could not convert matchers [{rendered}]: need at least one primitive")


class UnknownNodeKindError(CompilationError, TypeError):
    """AST walker met a value that is not a known node kind.

    Inherits TypeError: expected one of the Node variants, got something else.

    Attributes:
        node: The unrecognized value.
    """

    def __init__(self, node: object) -> None:
        """Initialize with the unrecognized node."""
        self.node = node
        super().__init__(f"could not compile tree: unknown node type {type(node).__name__}")
