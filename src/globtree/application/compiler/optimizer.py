"""Peephole optimizer: rewrite a matcher into an equivalent, cheaper one.

Recognized shapes (a = literal):
    Any("")                   → Super
    BTree(a)                  → Raw(a)
    BTree(a, -, Super)        → Prefix(a)            a*
    BTree(a, Super, -)        → Suffix(a)            *a
    BTree(a, Super, Super)    → Contains(a)          *a*
    BTree(a, -, Suffix(b))    → Every(Prefix(a), Suffix(b))
    BTree(a, Prefix(b), -)    → Every(Prefix(b), Suffix(a))

Everything else is returned unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from globtree.domain.matchers import (
    Any,
    BTree,
    Contains,
    Every,
    Matcher,
    Min,
    Prefix,
    Raw,
    Suffix,
    Super,
)

logger = logging.getLogger(__name__)


def can_overlap(head: str, tail: str) -> bool:
    """Check if a string shorter than head + tail can start with head and end with tail.

    True when some non-empty suffix of head (or head as a whole, inside tail)
    is consistent with the beginning of tail.
    """
    for offset in range(max(len(head) - len(tail), 0), len(head)):
        if head[offset:] == tail[: len(head) - offset]:
            return True
    return False


def _prefix_and_suffix(prefix: str, suffix: str) -> Every:
    """AND of Prefix and Suffix that never share characters.

    Adds a Min bound when the two could overlap in a short string.
    """
    every = Every((Prefix(prefix), Suffix(suffix)))
    if can_overlap(prefix, suffix):
        every = every.add(Min(len(prefix) + len(suffix)))
    return every


def _optimize_tree(tree: BTree) -> Matcher:
    left = optimize(tree.left) if tree.left is not None else None
    right = optimize(tree.right) if tree.right is not None else None
    tree = replace(tree, left=left, right=right)

    if not isinstance(tree.value, Raw):
        return tree

    text = tree.value.text
    match left, right:
        case None, None:
            result: Matcher = tree.value
        case Super(), Super():
            result = Contains(text, negated=False)
        case Super(), None:
            result = Suffix(text)
        case None, Super():
            result = Prefix(text)
        case None, Suffix(suffix=suffix):
            result = _prefix_and_suffix(text, suffix)
        case Prefix(prefix=prefix), None:
            result = _prefix_and_suffix(prefix, text)
        case _:
            return tree

    logger.debug("rewrote %s to %s", tree, result)
    return result


def optimize(matcher: Matcher) -> Matcher:
    """Rewrite matcher into an equivalent, cheaper matcher.

    Pure: never mutates its input. BTree sides are optimized bottom-up
    before the node itself. Idempotent.

    Args:
        matcher: Matcher to optimize

    Returns:
        Matcher accepting exactly the same strings
    """
    match matcher:
        case Any(separators=""):
            return Super()
        case BTree():
            return _optimize_tree(matcher)
        case _:
            return matcher
