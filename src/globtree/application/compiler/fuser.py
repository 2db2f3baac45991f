"""Run fuser: collapse a run of wildcards into one aggregate matcher.

A run of Super, Any(sep), Single(sep) and negated List (a Single whose
separators are the listed chars) has a fixed shape: a length bound plus
"no separator anywhere in the span". That shape is expressible with
Super, Any, Min, Max and negated Contains, no tree needed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from globtree.domain.matchers import (
    Any,
    Contains,
    Every,
    List,
    Matcher,
    Max,
    Min,
    Single,
    Super,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def _separators_guard(separators: str) -> tuple[Contains, ...]:
    """Negated Contains per distinct separator character, in first-seen order."""
    return tuple(Contains(c, negated=True) for c in dict.fromkeys(separators))


def glue_matchers(matchers: Sequence[Matcher]) -> Matcher | None:
    """Fuse a sequence of sibling matchers into one matcher.

    Never raises.

    Args:
        matchers: Ordered matchers of one concatenation

    Returns:
        Equivalent single matcher, or None if the sequence is not fusible
        (empty, contains a non-wildcard, or mixes separator sets)
    """
    match len(matchers):
        case 0:
            return None
        case 1:
            return matchers[0]

    has_any = False
    has_super = False
    has_single = False
    width = 0
    separator = ""

    for i, matcher in enumerate(matchers):
        match matcher:
            case Super():
                sep = ""
                has_super = True
            case Any(separators=sep):
                has_any = True
            case Single(separators=sep):
                has_single = True
                width += 1
            case List(chars=sep, negated=True):
                has_single = True
                width += 1
            case _:
                return None

        if i == 0:
            separator = sep
        elif sep != separator:
            logger.debug("not fusible: separators %r and %r differ", separator, sep)
            return None

    if has_super and not has_any and not has_single:
        return Super()

    if has_any and not has_super and not has_single:
        return Any(separator)

    if (has_any or has_super) and width > 0 and separator == "":
        return Min(width)

    every = Every()

    if width > 0:
        every = every.add(Min(width))

        if not has_any and not has_super:
            every = every.add(Max(width))

    for guard in _separators_guard(separator):
        every = every.add(guard)

    return every
