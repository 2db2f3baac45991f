"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from globtree.domain.matchers import (
    Any,
    AnyOf,
    BTree,
    Contains,
    Every,
    List,
    Max,
    Min,
    Prefix,
    Range,
    Raw,
    Single,
    Suffix,
    Super,
)

if TYPE_CHECKING:
    from globtree.domain.matchers import Matcher


def matcher_to_dict(matcher: Matcher) -> dict[str, object]:
    """Convert matcher tree to JSON-serializable dict.

    Every dict carries a "kind" key plus the fields of that kind.

    Args:
        matcher: Root of the matcher tree

    Returns:
        Dictionary suitable for json.dumps()
    """
    match matcher:
        case Raw(text=text):
            return {"kind": "raw", "text": text}
        case Single(separators=separators):
            return {"kind": "single", "separators": separators}
        case Any(separators=separators):
            return {"kind": "any", "separators": separators}
        case Super():
            return {"kind": "super"}
        case List(chars=chars, negated=negated):
            return {"kind": "list", "chars": chars, "negated": negated}
        case Range(lo=lo, hi=hi, negated=negated):
            return {"kind": "range", "lo": lo, "hi": hi, "negated": negated}
        case Prefix(prefix=prefix):
            return {"kind": "prefix", "prefix": prefix}
        case Suffix(suffix=suffix):
            return {"kind": "suffix", "suffix": suffix}
        case Contains(needle=needle, negated=negated):
            return {"kind": "contains", "needle": needle, "negated": negated}
        case Min(limit=limit):
            return {"kind": "min", "limit": limit}
        case Max(limit=limit):
            return {"kind": "max", "limit": limit}
        case Every(matchers=matchers):
            return {"kind": "every", "matchers": [matcher_to_dict(m) for m in matchers]}
        case AnyOf(matchers=matchers):
            return {"kind": "any_of", "matchers": [matcher_to_dict(m) for m in matchers]}
        case BTree(value=value, left=left, right=right):
            return {
                "kind": "btree",
                "value": matcher_to_dict(value),
                "left": matcher_to_dict(left) if left is not None else None,
                "right": matcher_to_dict(right) if right is not None else None,
            }
        case _:
            raise TypeError(f"expected Matcher, got {type(matcher).__name__}")


class JSONReporter:
    """JSON reporter for machine-readable output.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, matcher: Matcher) -> str:
        """Format matcher tree as JSON.

        Args:
            matcher: Root of the matcher tree

        Returns:
            JSON document
        """
        return json.dumps(matcher_to_dict(matcher), indent=self._indent)
