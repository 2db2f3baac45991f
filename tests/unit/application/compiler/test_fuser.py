"""Tests for application/compiler/fuser.py."""

import pytest

from globtree.application.compiler.fuser import glue_matchers
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
    Range,
    Raw,
    Single,
    Super,
)
from tests.factories import concat_match, probe_strings

PROBES = probe_strings("ab/", max_len=6)


def fusible_sequences(separators: str) -> list[tuple[Matcher, ...]]:
    """Wildcard runs with k = 0..5 singles around Super/Any."""
    sequences: list[tuple[Matcher, ...]] = []
    for k in range(6):
        singles = (Single(separators),) * k
        if k:
            sequences.append(singles)
        sequences.append((*singles, Any(separators)))
        sequences.append((Any(separators), *singles, Any(separators)))
        if not separators:
            sequences.append((Super(), *singles))
            sequences.append((*singles, Super(), Any(separators)))
    return sequences


class TestGlueNotFusible:
    """Sequences that must fall through to tree building."""

    def test_empty(self) -> None:
        assert glue_matchers([]) is None

    @pytest.mark.parametrize(
        "matchers",
        [
            (Raw("a"), Super()),
            (Super(), Range("a", "z")),
            (Single(), List("ab", negated=False)),
            (Any(), AnyOf((Raw("a"),))),
            (Single(), BTree(Raw("a"))),
            (Min(1), Single()),
        ],
        ids=str,
    )
    def test_non_wildcard_aborts(self, matchers: tuple[Matcher, ...]) -> None:
        assert glue_matchers(matchers) is None

    @pytest.mark.parametrize(
        "matchers",
        [
            (Any("/"), Single(".")),
            (Super(), Any("/")),
            (Single("/"), Super()),
            (Single("/"), List("ab", negated=True)),
            (Any("/."), Any("./")),
        ],
        ids=str,
    )
    def test_mismatched_separators_abort(self, matchers: tuple[Matcher, ...]) -> None:
        """Separator sets must be textually identical."""
        assert glue_matchers(matchers) is None


class TestGlueShapes:
    """Result shape per classification."""

    def test_single_element_returned_as_is(self) -> None:
        """A one-element run is already fused, whatever its kind."""
        any_of = AnyOf((Raw("a"), Raw("b")))
        assert glue_matchers([any_of]) is any_of

    def test_only_super(self) -> None:
        assert glue_matchers([Super(), Super()]) == Super()

    def test_only_any(self) -> None:
        assert glue_matchers([Any("/"), Any("/")]) == Any("/")

    def test_unrestricted_wildcard_with_singles(self) -> None:
        assert glue_matchers([Super(), Single(), Single()]) == Min(2)

    def test_only_singles_unrestricted(self) -> None:
        """Five ? make an exact-length matcher."""
        assert glue_matchers([Single()] * 5) == Every((Min(5), Max(5)))

    def test_only_singles_restricted(self) -> None:
        result = glue_matchers([Single("/")] * 2)
        assert result == Every((Min(2), Max(2), Contains("/", negated=True)))

    def test_any_with_singles_restricted(self) -> None:
        result = glue_matchers([Any("/"), Single("/")])
        assert result == Every((Min(1), Contains("/", negated=True)))

    def test_negated_list_acts_as_single(self) -> None:
        """[!/] fuses with ? when the listed chars equal the separators."""
        result = glue_matchers([List("/", negated=True), Single("/")])
        assert result == Every((Min(2), Max(2), Contains("/", negated=True)))

    def test_multi_char_separators_guard_each_char(self) -> None:
        """Each separator character is forbidden on its own."""
        result = glue_matchers([Single("/."), Single("/.")])
        guards = (Contains("/", negated=True), Contains(".", negated=True))
        assert result == Every((Min(2), Max(2), *guards))
        assert result is not None
        assert not result.match("a.")
        assert result.match("ab")

    def test_unrestricted_super_and_any(self) -> None:
        """Super with Any("") leaves no constraint at all."""
        result = glue_matchers([Super(), Any("")])
        assert result == Every()
        assert result is not None
        assert result.match("")


class TestGlueSoundness:
    """Fused matcher accepts exactly what the concatenation accepts."""

    @pytest.mark.parametrize("separators", ["", "/"])
    def test_equivalent_to_concatenation(self, separators: str) -> None:
        for sequence in fusible_sequences(separators):
            fused = glue_matchers(sequence)
            assert fused is not None, sequence
            for text in PROBES:
                expected = concat_match(sequence, text)
                assert fused.match(text) == expected, (sequence, text, str(fused))

    def test_multi_char_separators_equivalent(self) -> None:
        sequence = (Any("/a"), Single("/a"), Single("/a"))
        fused = glue_matchers(sequence)
        assert fused is not None
        for text in PROBES:
            assert fused.match(text) == concat_match(sequence, text), text
