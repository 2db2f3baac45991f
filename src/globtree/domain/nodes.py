"""Domain layer: immutable AST nodes of a parsed glob pattern.

Produced by a parser outside this package, consumed by the compiler.
All nodes frozen, invariants validated in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    """Kinds of glob AST nodes."""

    PATTERN = "PATTERN"
    ANY_OF = "ANY_OF"
    TEXT = "TEXT"
    LIST = "LIST"
    RANGE = "RANGE"
    ANY = "ANY"
    SUPER = "SUPER"
    SINGLE = "SINGLE"


@dataclass(frozen=True, slots=True)
class PatternNode:
    """Concatenation: children match consecutive parts of the input."""

    children: tuple[Node, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.children, tuple):
            raise TypeError(f"children must be tuple, got {type(self.children).__name__}")


@dataclass(frozen=True, slots=True)
class AnyOfNode:
    """Alternation: the input matches if any child matches it whole."""

    children: tuple[Node, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.children, tuple):
            raise TypeError(f"children must be tuple, got {type(self.children).__name__}")


@dataclass(frozen=True, slots=True)
class TextNode:
    """Literal text."""

    text: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")


@dataclass(frozen=True, slots=True)
class ListNode:
    """Character list: [abc] or [!abc]."""

    chars: str
    negated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.chars:
            raise ValueError("chars must not be empty")


@dataclass(frozen=True, slots=True)
class RangeNode:
    """Character range: [a-z] or [!a-z]."""

    lo: str
    hi: str
    negated: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.lo) != 1 or len(self.hi) != 1:
            raise ValueError(f"range bounds must be single characters, got {self.lo!r}-{self.hi!r}")
        if self.lo > self.hi:
            raise ValueError(f"range lo ({self.lo!r}) must be <= hi ({self.hi!r})")


@dataclass(frozen=True, slots=True)
class AnyNode:
    """Multi-character wildcard (*) that must not cross a separator."""


@dataclass(frozen=True, slots=True)
class SuperNode:
    """Multi-character wildcard (**) with no restriction."""


@dataclass(frozen=True, slots=True)
class SingleNode:
    """Single-character wildcard (?) that must not match a separator."""


Node = PatternNode | AnyOfNode | TextNode | ListNode | RangeNode | AnyNode | SuperNode | SingleNode


def get_node_kind(node: Node) -> NodeKind:
    """Get NodeKind for node.

    Exhaustive match on Node union.

    Raises:
        TypeError: If node is not a Node variant
    """
    match node:
        case PatternNode():
            return NodeKind.PATTERN
        case AnyOfNode():
            return NodeKind.ANY_OF
        case TextNode():
            return NodeKind.TEXT
        case ListNode():
            return NodeKind.LIST
        case RangeNode():
            return NodeKind.RANGE
        case AnyNode():
            return NodeKind.ANY
        case SuperNode():
            return NodeKind.SUPER
        case SingleNode():
            return NodeKind.SINGLE
        case _:
            raise TypeError(f"expected Node, got {type(node).__name__}")
