"""Console reporter: Matcher → rich formatted tree."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from globtree.application.reporters._base import labeled_children, matcher_kind, walk
from globtree.domain.matchers import is_primitive

if TYPE_CHECKING:
    from globtree.domain.matchers import Matcher


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Immutable (frozen dataclass).

    Attributes:
        show_summary: Show node count by kind above the tree.
        width: Console width in characters.
    """

    show_summary: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders a matcher tree with rich.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, matcher: Matcher) -> str:
        """Format matcher tree as rich formatted string.

        Args:
            matcher: Root of the matcher tree.

        Returns:
            Formatted string with colors and tree guides.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            highlight=False,
            width=self._config.width,
        )

        if self._config.show_summary:
            self._render_summary(console, matcher)

        tree = Tree(self._label(matcher))
        self._add_children(tree, matcher)
        console.print(tree)

        return output.getvalue()

    def _render_summary(self, console: Console, matcher: Matcher) -> None:
        """Render node count by kind."""
        by_kind: dict[str, int] = {}
        total = 0
        for node in walk(matcher):
            kind = matcher_kind(node)
            by_kind[kind] = by_kind.get(kind, 0) + 1
            total += 1

        kind_parts = [f"{k}: {v}" for k, v in sorted(by_kind.items())]
        console.print(f"[bold]Matchers:[/bold] {total} ({', '.join(kind_parts)})")

    def _label(self, matcher: Matcher) -> str:
        """Label for one node. Primitives show their full form."""
        if is_primitive(matcher):
            return f"[cyan]{escape(str(matcher))}[/cyan]"
        return f"[bold yellow]{matcher_kind(matcher)}[/bold yellow]"

    def _add_children(self, tree: Tree, matcher: Matcher) -> None:
        """Recursively attach children of composite matchers."""
        for role, child in labeled_children(matcher):
            if child is None:
                tree.add(f"[dim]{role}: <nil>[/dim]")
                continue
            branch = tree.add(f"[dim]{role}:[/dim] {self._label(child)}")
            self._add_children(branch, child)
