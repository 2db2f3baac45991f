"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from globtree.domain.matchers import Matcher


class ReporterProtocol(Protocol):
    """Protocol for compiled matcher reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, matcher: Matcher) -> str:
        """Format compiled matcher tree as string.

        Args:
            matcher: Root of the matcher tree.

        Returns:
            Formatted string representation.
        """
        ...
