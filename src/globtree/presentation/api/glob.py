"""Compiled glob: public entry point of globtree.

Takes a parsed glob AST (see globtree.domain.nodes) and returns an
immutable CompiledGlob. Text parsing is the caller's job.

Example:
    ast = PatternNode((TextNode("foo"), AnyNode(), TextNode(".py")))
    glob = compile_glob(ast, separators="/")
    glob.match("foo_bar.py")   # True
    glob.match("foo/bar.py")   # False
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from globtree.application.compiler import compile_ast
from globtree.domain.config import CompileConfig

if TYPE_CHECKING:
    from globtree.domain.matchers import Matcher
    from globtree.domain.nodes import Node


@dataclass(frozen=True, slots=True)
class CompiledGlob:
    """Compiled glob pattern.

    Immutable value object holding the source AST and its matcher tree.
    Safe to reuse for any number of match() calls.

    Attributes:
        ast: AST the glob was compiled from
        separators: Separator set used for restricted wildcards
        matcher: Root of the compiled matcher tree
    """

    ast: Node
    separators: str
    matcher: Matcher

    def match(self, text: str) -> bool:
        """Check if text matches the glob.

        Args:
            text: String to match

        Returns:
            True if text matches the whole pattern

        Raises:
            TypeError: If text is None
        """
        if text is None:
            raise TypeError("text must not be None")
        return self.matcher.match(text)

    def __str__(self) -> str:
        """Return compiled matcher tree."""
        return str(self.matcher)


def compile_glob(ast: Node, separators: str = "", *, optimize: bool = True) -> CompiledGlob:
    """Compile glob AST.

    Args:
        ast: Root node of the parsed pattern
        separators: Characters * and ? must not match (empty = none)
        optimize: Apply peephole optimizer (default True)

    Returns:
        CompiledGlob with AST and matcher tree

    Raises:
        NoAnchorFoundError: If a concatenation has no primitive to split on
        UnknownNodeKindError: If the AST holds an unknown node
    """
    config = CompileConfig(separators=separators, optimize=optimize)
    return CompiledGlob(ast=ast, separators=separators, matcher=compile_ast(ast, config))


def matches_any(text: str, globs: tuple[CompiledGlob, ...]) -> bool:
    """Check if text matches any of the globs.

    Args:
        text: String to match
        globs: Compiled globs to check

    Returns:
        True if text matches at least one glob
    """
    return any(g.match(text) for g in globs)


def matches_all(text: str, globs: tuple[CompiledGlob, ...]) -> bool:
    """Check if text matches all globs.

    Args:
        text: String to match
        globs: Compiled globs to check

    Returns:
        True if text matches all globs (empty globs = True)
    """
    return all(g.match(text) for g in globs)
