"""Tree builder: turn a matcher sequence into a single matcher.

Tries the run fuser first. Otherwise picks an anchor primitive, splits the
sequence around it and recurses into both sides, producing a BTree.

Anchor choice: the first Raw; if there is none, the last primitive seen.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from globtree.application.compiler.fuser import glue_matchers
from globtree.domain.exceptions import NoAnchorFoundError
from globtree.domain.matchers import BTree, Primitive, Raw, is_primitive

if TYPE_CHECKING:
    from collections.abc import Sequence

    from globtree.domain.matchers import Matcher

logger = logging.getLogger(__name__)


def find_anchor(matchers: Sequence[Matcher]) -> int | None:
    """Index of the BTree anchor in matchers.

    Returns:
        Index of the first Raw, else of the last primitive, else None
    """
    index: int | None = None
    for i, matcher in enumerate(matchers):
        if is_primitive(matcher):
            index = i
            if isinstance(matcher, Raw):
                break
    return index


def convert_matchers(matchers: Sequence[Matcher]) -> Matcher:
    """Build one matcher equivalent to the concatenation of matchers.

    Args:
        matchers: Ordered matchers, each already optimized

    Returns:
        Fused matcher, or BTree split around the anchor

    Raises:
        NoAnchorFoundError: If matchers can't be fused and hold no primitive
    """
    fused = glue_matchers(matchers)
    if fused is not None:
        logger.debug("fused %d matchers into %s", len(matchers), fused)
        return fused

    index = find_anchor(matchers)
    if index is None:
        raise NoAnchorFoundError(tuple(matchers))

    value: Primitive = matchers[index]  # type: ignore[assignment]
    left = matchers[:index]
    right = matchers[index + 1 :]
    logger.debug("split %d matchers at %d on %s", len(matchers), index, value)

    return BTree(
        value=value,
        left=convert_matchers(left) if left else None,
        right=convert_matchers(right) if right else None,
    )
