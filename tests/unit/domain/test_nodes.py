"""Tests for domain/nodes.py."""

import pytest

from globtree.domain.nodes import (
    AnyNode,
    AnyOfNode,
    ListNode,
    NodeKind,
    PatternNode,
    RangeNode,
    SingleNode,
    SuperNode,
    TextNode,
    get_node_kind,
)


class TestNodeFailFirst:
    """FAIL-FIRST validation tests."""

    def test_empty_text_raises(self) -> None:
        with pytest.raises(ValueError, match="text must not be empty"):
            TextNode("")

    def test_empty_list_raises(self) -> None:
        with pytest.raises(ValueError, match="chars must not be empty"):
            ListNode("")

    def test_range_bounds_single_char(self) -> None:
        with pytest.raises(ValueError, match="single characters"):
            RangeNode("a", "yz")

    def test_range_inverted_raises(self) -> None:
        with pytest.raises(ValueError, match="must be <="):
            RangeNode("z", "a")

    @pytest.mark.parametrize("cls", [PatternNode, AnyOfNode])
    def test_children_must_be_tuple(self, cls: type) -> None:
        """Children lists are rejected: nodes must stay immutable."""
        with pytest.raises(TypeError, match="tuple"):
            cls([TextNode("a")])


class TestGetNodeKind:
    """Exhaustive node kind dispatch."""

    @pytest.mark.parametrize(
        ("node", "kind"),
        [
            (PatternNode(()), NodeKind.PATTERN),
            (AnyOfNode(()), NodeKind.ANY_OF),
            (TextNode("a"), NodeKind.TEXT),
            (ListNode("ab"), NodeKind.LIST),
            (RangeNode("a", "z"), NodeKind.RANGE),
            (AnyNode(), NodeKind.ANY),
            (SuperNode(), NodeKind.SUPER),
            (SingleNode(), NodeKind.SINGLE),
        ],
    )
    def test_kind(self, node: object, kind: NodeKind) -> None:
        assert get_node_kind(node) is kind  # type: ignore[arg-type]

    def test_unknown_raises(self) -> None:
        with pytest.raises(TypeError, match="expected Node"):
            get_node_kind("foo")  # type: ignore[arg-type]


class TestNodeImmutability:
    """Nodes are frozen value objects."""

    def test_frozen(self) -> None:
        node = TextNode("a")
        with pytest.raises(AttributeError):
            node.text = "b"  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert PatternNode((TextNode("a"), AnyNode())) == PatternNode((TextNode("a"), AnyNode()))
