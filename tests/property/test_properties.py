"""
Property-based tests for the glob compiler using Hypothesis.

Invariants that should hold for all inputs:
- Each optimizer rewrite preserves the accepted set of strings
- Optimization is idempotent
- Fusion accepts exactly what the concatenation accepts
- Optimized and plain compilation agree
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from globtree.application.compiler import compile_ast, glue_matchers, optimize
from globtree.domain.config import CompileConfig
from globtree.domain.matchers import Any, BTree, Matcher, Raw, Single, Suffix, Super
from globtree.domain.nodes import AnyNode, PatternNode, SingleNode, SuperNode, TextNode
from tests.factories import concat_match

# ============================================================================
# Strategy Definitions
# ============================================================================

ALPHABET = "ab/"

literals = st.text(alphabet=ALPHABET, min_size=1, max_size=4)

probes = st.text(alphabet=ALPHABET, max_size=8)

separator_sets = st.sampled_from(["", "/", "/a"])

leaf_nodes = st.one_of(
    st.builds(TextNode, literals),
    st.just(AnyNode()),
    st.just(SuperNode()),
    st.just(SingleNode()),
)

pattern_asts = st.lists(leaf_nodes, min_size=1, max_size=6).map(
    lambda children: PatternNode(tuple(children))
)


def wildcard_runs(separators: str) -> st.SearchStrategy[list[Matcher]]:
    """Runs of wildcards sharing one separator set."""
    wildcards: list[Matcher] = [Any(separators), Single(separators)]
    if not separators:
        wildcards.append(Super())
    return st.lists(st.sampled_from(wildcards), min_size=2, max_size=6)


# ============================================================================
# Optimizer rewrites
# ============================================================================


@settings(deadline=None)
@given(literal=literals, text=probes)
def test_prefix_rewrite_preserves_matches(literal: str, text: str) -> None:
    tree = BTree(Raw(literal), right=Super())
    assert optimize(tree).match(text) == tree.match(text)


@settings(deadline=None)
@given(literal=literals, text=probes)
def test_suffix_rewrite_preserves_matches(literal: str, text: str) -> None:
    tree = BTree(Raw(literal), left=Super())
    assert optimize(tree).match(text) == tree.match(text)


@settings(deadline=None)
@given(literal=literals, text=probes)
def test_contains_rewrite_preserves_matches(literal: str, text: str) -> None:
    tree = BTree(Raw(literal), left=Super(), right=Super())
    assert optimize(tree).match(text) == tree.match(text)


@settings(deadline=None)
@given(literal=literals, suffix=literals, text=probes)
def test_prefix_suffix_rewrite_preserves_matches(literal: str, suffix: str, text: str) -> None:
    tree = BTree(Raw(literal), right=BTree(Raw(suffix), left=Super()))
    assert optimize(tree).match(text) == tree.match(text)


@settings(deadline=None)
@given(literal=literals, other=literals, text=probes)
def test_literal_then_suffix_preserves_matches(literal: str, other: str, text: str) -> None:
    """Literal followed by Suffix, including overlapping pairs."""
    tree = BTree(Raw(literal), right=Suffix(other))
    assert optimize(tree).match(text) == tree.match(text)


# ============================================================================
# Whole-pipeline properties
# ============================================================================


@settings(deadline=None, max_examples=200)
@given(ast=pattern_asts, separators=separator_sets, text=probes)
def test_optimized_agrees_with_plain(ast: PatternNode, separators: str, text: str) -> None:
    optimized = compile_ast(ast, CompileConfig(separators=separators))
    plain = compile_ast(ast, CompileConfig(separators=separators, optimize=False))
    assert optimized.match(text) == plain.match(text)


@settings(deadline=None)
@given(ast=pattern_asts, separators=separator_sets)
def test_optimize_idempotent(ast: PatternNode, separators: str) -> None:
    plain = compile_ast(ast, CompileConfig(separators=separators, optimize=False))
    once = optimize(plain)
    assert optimize(once) == once


@settings(deadline=None)
@given(data=st.data(), separators=separator_sets)
def test_fusion_sound(data: st.DataObject, separators: str) -> None:
    run = data.draw(wildcard_runs(separators))
    fused = glue_matchers(run)
    assert fused is not None

    text = data.draw(probes)
    assert fused.match(text) == concat_match(run, text)
