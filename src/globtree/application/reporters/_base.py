"""Shared helpers for reporters: walking a matcher tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from globtree.domain.matchers import AnyOf, BTree, Every

if TYPE_CHECKING:
    from collections.abc import Iterator

    from globtree.domain.matchers import Matcher


def matcher_kind(matcher: Matcher) -> str:
    """Short kind name: raw, single, ..., every, any_of, btree."""
    match matcher:
        case AnyOf():
            return "any_of"
        case _:
            return type(matcher).__name__.lower()


def labeled_children(matcher: Matcher) -> tuple[tuple[str, Matcher | None], ...]:
    """Children of a composite matcher with their role labels.

    Primitives have no children. BTree sides may be None.
    """
    match matcher:
        case BTree(value=value, left=left, right=right):
            return (("left", left), ("value", value), ("right", right))
        case Every(matchers=matchers) | AnyOf(matchers=matchers):
            return tuple((str(i), m) for i, m in enumerate(matchers))
        case _:
            return ()


def walk(matcher: Matcher) -> Iterator[Matcher]:
    """Yield matcher and all its descendants, pre-order."""
    yield matcher
    for _, child in labeled_children(matcher):
        if child is not None:
            yield from walk(child)
