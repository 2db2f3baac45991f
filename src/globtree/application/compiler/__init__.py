"""Glob compiler: AST lowering, run fusion, tree building, peephole optimization.

Usage:
    from globtree.application.compiler import compile_ast

    matcher = compile_ast(PatternNode((TextNode("foo"), SuperNode())))
    matcher.match("foobar")  # True
"""

from globtree.application.compiler.fuser import glue_matchers
from globtree.application.compiler.lowering import compile_ast
from globtree.application.compiler.optimizer import can_overlap, optimize
from globtree.application.compiler.tree_builder import convert_matchers, find_anchor

__all__ = [
    "can_overlap",
    "compile_ast",
    "convert_matchers",
    "find_anchor",
    "glue_matchers",
    "optimize",
]
