"""AST lowering: compile a glob AST into an optimized matcher tree.

Bottom-up walk. Each node lowers to a matcher which is optimized before
being handed to its parent:

    TextNode    → Raw            PatternNode → convert_matchers(children)
    ListNode    → List           AnyOfNode   → AnyOf(children)
    RangeNode   → Range
    SingleNode  → Single(separators)
    AnyNode     → Any(separators)
    SuperNode   → Super

Alternation branches are optimized one by one, never fused together.
"""

from __future__ import annotations

import logging

from globtree.application.compiler.optimizer import optimize
from globtree.application.compiler.tree_builder import convert_matchers
from globtree.domain.config import CompileConfig
from globtree.domain.exceptions import UnknownNodeKindError
from globtree.domain.matchers import (
    Any,
    AnyOf,
    List,
    Matcher,
    Range,
    Raw,
    Single,
    Super,
)
from globtree.domain.nodes import (
    AnyNode,
    AnyOfNode,
    ListNode,
    Node,
    PatternNode,
    RangeNode,
    SingleNode,
    SuperNode,
    TextNode,
)

logger = logging.getLogger(__name__)


def _lower(node: Node, config: CompileConfig) -> Matcher:
    matcher: Matcher
    match node:
        case PatternNode(children=children):
            matcher = convert_matchers([_lower(child, config) for child in children])
        case AnyOfNode(children=children):
            matcher = AnyOf(tuple(_lower(child, config) for child in children))
        case TextNode(text=text):
            matcher = Raw(text)
        case ListNode(chars=chars, negated=negated):
            matcher = List(chars, negated)
        case RangeNode(lo=lo, hi=hi, negated=negated):
            matcher = Range(lo, hi, negated)
        case AnyNode():
            matcher = Any(config.separators)
        case SuperNode():
            matcher = Super()
        case SingleNode():
            matcher = Single(config.separators)
        case _:
            raise UnknownNodeKindError(node)

    if config.optimize:
        return optimize(matcher)
    return matcher


def compile_ast(node: Node, config: CompileConfig | None = None) -> Matcher:
    """Compile glob AST into a matcher tree.

    All-or-nothing: either a complete matcher or an exception.

    Args:
        node: Root of the AST (normally a PatternNode)
        config: Compile configuration. Uses defaults if None.

    Returns:
        Matcher accepting exactly the strings the pattern matches

    Raises:
        NoAnchorFoundError: If a concatenation has no primitive to split on
        UnknownNodeKindError: If the tree holds a value that is not a Node
    """
    config = config or CompileConfig()
    matcher = _lower(node, config)
    logger.debug("compiled %s with separators %r", matcher, config.separators)
    return matcher
