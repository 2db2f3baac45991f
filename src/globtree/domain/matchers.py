"""Domain layer: matcher algebra.

Compiled form of a glob pattern. Every matcher is an immutable value object
that tests a whole string with match(). Primitives additionally report
where they match inside a larger string (match_lengths), which makes them
usable as the split anchor of a BTree.

Primitives: Raw, Single, Any, Super, List, Range, Prefix, Suffix,
Contains, Min, Max.
Composites: Every (AND), AnyOf (OR), BTree (split around a primitive).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


def _scan_lengths(matcher: Primitive, text: str, start: int) -> Iterator[int]:
    """Lengths n for which matcher accepts text[start:start + n]."""
    for n in range(len(text) - start + 1):
        if matcher.match(text[start : start + n]):
            yield n


def _single_length(matcher: Primitive, text: str, start: int) -> Iterator[int]:
    """Length 1 if matcher accepts the character at start."""
    if start < len(text) and matcher.match(text[start]):
        yield 1


# =============================================================================
# Primitives
# =============================================================================


@dataclass(frozen=True, slots=True)
class Raw:
    """Literal text, matched exactly."""

    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")

    def match(self, text: str) -> bool:
        return text == self.text

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        if text.startswith(self.text, start):
            yield len(self.text)

    def __str__(self) -> str:
        return f'<text:"{self.text}">'


@dataclass(frozen=True, slots=True)
class Single:
    """Exactly one character that is not a separator."""

    separators: str = ""

    def match(self, text: str) -> bool:
        return len(text) == 1 and text not in self.separators

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return _single_length(self, text, start)

    def __str__(self) -> str:
        return f"<single:![{self.separators}]>"


@dataclass(frozen=True, slots=True)
class Any:
    """Any number of characters, none of them a separator."""

    separators: str = ""

    def match(self, text: str) -> bool:
        return not any(c in self.separators for c in text)

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        end = start
        while end < len(text) and text[end] not in self.separators:
            end += 1
        return iter(range(end - start + 1))

    def __str__(self) -> str:
        return f"<any:![{self.separators}]>"


@dataclass(frozen=True, slots=True)
class Super:
    """Any string at all."""

    def match(self, text: str) -> bool:
        return True

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return iter(range(len(text) - start + 1))

    def __str__(self) -> str:
        return "<super>"


@dataclass(frozen=True, slots=True)
class List:
    """One character from chars (or, negated, one character not in chars)."""

    chars: str
    negated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.chars:
            raise ValueError("chars must not be empty")

    def match(self, text: str) -> bool:
        return len(text) == 1 and (text in self.chars) != self.negated

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return _single_length(self, text, start)

    def __str__(self) -> str:
        return f"<list:{'!' if self.negated else ''}[{self.chars}]>"


@dataclass(frozen=True, slots=True)
class Range:
    """One character within lo..hi inclusive (or, negated, outside it)."""

    lo: str
    hi: str
    negated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.lo) != 1 or len(self.hi) != 1:
            raise ValueError(f"range bounds must be single characters, got {self.lo!r}-{self.hi!r}")
        if self.lo > self.hi:
            raise ValueError(f"range lo ({self.lo!r}) must be <= hi ({self.hi!r})")

    def match(self, text: str) -> bool:
        return len(text) == 1 and (self.lo <= text <= self.hi) != self.negated

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return _single_length(self, text, start)

    def __str__(self) -> str:
        return f"<range:{'!' if self.negated else ''}[{self.lo},{self.hi}]>"


@dataclass(frozen=True, slots=True)
class Prefix:
    """String starting with prefix."""

    prefix: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.prefix:
            raise ValueError("prefix must not be empty")

    def match(self, text: str) -> bool:
        return text.startswith(self.prefix)

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        if text.startswith(self.prefix, start):
            return iter(range(len(self.prefix), len(text) - start + 1))
        return iter(())

    def __str__(self) -> str:
        return f"<prefix:{self.prefix}>"


@dataclass(frozen=True, slots=True)
class Suffix:
    """String ending with suffix."""

    suffix: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.suffix:
            raise ValueError("suffix must not be empty")

    def match(self, text: str) -> bool:
        return text.endswith(self.suffix)

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return _scan_lengths(self, text, start)

    def __str__(self) -> str:
        return f"<suffix:{self.suffix}>"


@dataclass(frozen=True, slots=True)
class Contains:
    """String containing needle (or, negated, not containing it)."""

    needle: str
    negated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.needle:
            raise ValueError("needle must not be empty")

    def match(self, text: str) -> bool:
        return (self.needle in text) != self.negated

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return _scan_lengths(self, text, start)

    def __str__(self) -> str:
        return f"<contains:{'!' if self.negated else ''}[{self.needle}]>"


@dataclass(frozen=True, slots=True)
class Min:
    """String of at least limit characters."""

    limit: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")

    def match(self, text: str) -> bool:
        return len(text) >= self.limit

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return iter(range(self.limit, len(text) - start + 1))

    def __str__(self) -> str:
        return f"<min:{self.limit}>"


@dataclass(frozen=True, slots=True)
class Max:
    """String of at most limit characters."""

    limit: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")

    def match(self, text: str) -> bool:
        return len(text) <= self.limit

    def match_lengths(self, text: str, start: int) -> Iterator[int]:
        return iter(range(min(self.limit, len(text) - start) + 1))

    def __str__(self) -> str:
        return f"<max:{self.limit}>"


Primitive = Raw | Single | Any | Super | List | Range | Prefix | Suffix | Contains | Min | Max


# =============================================================================
# Composites
# =============================================================================


@dataclass(frozen=True, slots=True)
class Every:
    """AND: all matchers accept the string. Empty = always True."""

    matchers: tuple[Matcher, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.matchers, tuple):
            raise TypeError(f"matchers must be tuple, got {type(self.matchers).__name__}")

    def add(self, matcher: Matcher) -> Every:
        """Return new Every with matcher appended."""
        return Every((*self.matchers, matcher))

    def match(self, text: str) -> bool:
        return all(m.match(text) for m in self.matchers)

    def __str__(self) -> str:
        return f"<every_of:[{','.join(str(m) for m in self.matchers)}]>"


@dataclass(frozen=True, slots=True)
class AnyOf:
    """OR: some matcher accepts the string. Empty = always False."""

    matchers: tuple[Matcher, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.matchers, tuple):
            raise TypeError(f"matchers must be tuple, got {type(self.matchers).__name__}")

    def match(self, text: str) -> bool:
        return any(m.match(text) for m in self.matchers)

    def __str__(self) -> str:
        return f"<any_of:[{','.join(str(m) for m in self.matchers)}]>"


@dataclass(frozen=True, slots=True)
class BTree:
    """Split node: value matches somewhere, left before it, right after it.

    Attributes:
        value: Primitive anchor
        left: Matcher for text before the anchor. None = must be empty.
        right: Matcher for text after the anchor. None = must be empty.
    """

    value: Primitive
    left: Matcher | None = None
    right: Matcher | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not is_primitive(self.value):
            raise TypeError(f"value must be a primitive matcher, got {type(self.value).__name__}")

    def match(self, text: str) -> bool:
        for start in range(len(text) + 1):
            if self.left is None:
                if start > 0:
                    break
            elif not self.left.match(text[:start]):
                continue

            for length in self.value.match_lengths(text, start):
                end = start + length
                if self.right is None:
                    if end == len(text):
                        return True
                elif self.right.match(text[end:]):
                    return True

        return False

    def __str__(self) -> str:
        left = "<nil>" if self.left is None else str(self.left)
        right = "<nil>" if self.right is None else str(self.right)
        return f"<btree:[{left}<-{self.value}->{right}]>"


Matcher = Primitive | Every | AnyOf | BTree


def is_primitive(matcher: object) -> bool:
    """Check if matcher can serve as a BTree anchor."""
    return isinstance(matcher, Primitive)
