"""globtree domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from globtree.domain.config import CompileConfig
from globtree.domain.exceptions import (
    CompilationError,
    GlobTreeError,
    NoAnchorFoundError,
    UnknownNodeKindError,
)
from globtree.domain.matchers import (
    Any,
    AnyOf,
    BTree,
    Contains,
    Every,
    List,
    Matcher,
    Max,
    Min,
    Prefix,
    Primitive,
    Range,
    Raw,
    Single,
    Suffix,
    Super,
    is_primitive,
)
from globtree.domain.nodes import (
    AnyNode,
    AnyOfNode,
    ListNode,
    Node,
    NodeKind,
    PatternNode,
    RangeNode,
    SingleNode,
    SuperNode,
    TextNode,
    get_node_kind,
)

__all__ = [
    # Exceptions
    "GlobTreeError",
    "CompilationError",
    "NoAnchorFoundError",
    "UnknownNodeKindError",
    # Configuration
    "CompileConfig",
    # AST
    "Node",
    "NodeKind",
    "PatternNode",
    "AnyOfNode",
    "TextNode",
    "ListNode",
    "RangeNode",
    "AnyNode",
    "SuperNode",
    "SingleNode",
    "get_node_kind",
    # Matchers
    "Matcher",
    "Primitive",
    "Raw",
    "Single",
    "Any",
    "Super",
    "List",
    "Range",
    "Prefix",
    "Suffix",
    "Contains",
    "Min",
    "Max",
    "Every",
    "AnyOf",
    "BTree",
    "is_primitive",
]
