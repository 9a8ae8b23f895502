"""
Tests for symstr — Relationship Engine.

These tests verify that:
1. strings_match follows the equality / overlap policy
2. includes and directly_includes decide membership
3. Symmetry, reflexivity and monotonicity hold over a sample of sets
"""

import itertools

import pytest

from symstr.model import ANY, VOID, literals, union
from symstr.relations import (
    directly_includes,
    extends,
    includes,
    is_subset,
    strings_match,
)
from symstr.truth import Verdict

T, F, U = Verdict.TRUE, Verdict.FALSE, Verdict.UNKNOWN

AB = literals("A", "B")

SAMPLE_SETS = [
    "A",
    "B",
    "",
    VOID,
    ANY,
    AB,
    literals("B", "C"),
    literals("C", "D"),
    union("A", None),
    union(ANY, None),
]


# =============================================================================
# SUBTYPE TESTS
# =============================================================================

class TestExtends:
    """Test the distributive and whole-set subtype checks."""

    def test_literal_within_union(self):
        assert extends("A", AB) is T

    def test_union_partly_within_literal(self):
        """Only one member of the union fits: the answer depends on the member."""
        assert extends(AB, "A") is U

    def test_literal_within_wildcard(self):
        assert extends("A", ANY) is T
        assert extends(ANY, "A") is F

    def test_void_only_within_void(self):
        assert extends(VOID, VOID) is T
        assert extends(VOID, ANY) is F

    def test_is_subset(self):
        assert is_subset(AB, literals("A", "B", "C"))
        assert not is_subset(AB, "A")


# =============================================================================
# STRINGS MATCH TESTS
# =============================================================================

class TestStringsMatch:
    """Test the equality / overlap policy."""

    @pytest.mark.parametrize("a,b,expected", [
        ("A", "A", T),
        ("A", "B", F),
        (VOID, VOID, T),
        ("A", VOID, F),
        (VOID, "A", F),
        ("", VOID, F),
    ])
    def test_singletons(self, a, b, expected):
        assert strings_match(a, b) is expected

    @pytest.mark.parametrize("a,b,expected", [
        (AB, "A", U),
        ("A", AB, U),
        (AB, "C", F),
        ("C", AB, F),
        (AB, AB, U),
        (AB, literals("B", "C"), U),
        (AB, literals("C", "D"), F),
        (AB, VOID, F),
        (VOID, AB, F),
    ])
    def test_unions(self, a, b, expected):
        assert strings_match(a, b) is expected

    @pytest.mark.parametrize("a,b,expected", [
        ("A", ANY, U),
        (ANY, "A", U),
        (ANY, ANY, U),
        (ANY, AB, U),
        (AB, ANY, U),
        (ANY, VOID, F),
        (VOID, ANY, F),
    ])
    def test_wildcard(self, a, b, expected):
        assert strings_match(a, b) is expected

    @pytest.mark.parametrize("a,b,expected", [
        (union("A", None), "A", U),
        (union("A", None), union("A", None), U),
        (union("A", None), VOID, U),
        (union("A", None), "B", F),
    ])
    def test_mixed_with_void(self, a, b, expected):
        assert strings_match(a, b) is expected

    def test_absorbed_union_matches_like_wildcard(self):
        assert strings_match(union("A", ANY), "B") is U

    @pytest.mark.parametrize("a,b", list(itertools.product(SAMPLE_SETS, repeat=2)))
    def test_symmetry(self, a, b):
        assert strings_match(a, b) is strings_match(b, a)

    @pytest.mark.parametrize("a", SAMPLE_SETS)
    def test_reflexive(self, a):
        """A value never definitely differs from itself."""
        assert strings_match(a, a) is not F


# =============================================================================
# MEMBERSHIP TESTS
# =============================================================================

class TestIncludes:
    """Test membership queries."""

    @pytest.mark.parametrize("container,item,expected", [
        ("A", "A", T),
        ("A", "B", F),
        ("A", ANY, F),
        (ANY, "A", T),
        (AB, "A", T),
        ("A", AB, F),
        (AB, AB, T),
        (literals("A", "B", "C"), AB, T),
        (union("A", ANY), "A", T),
        (VOID, VOID, T),
        (union("A", None), "A", T),
        (union("A", None), VOID, T),
        (VOID, ANY, F),
        (union(None, ANY), ANY, T),
        (ANY, VOID, F),
        (union(ANY, None), VOID, T),
        ("", VOID, F),
    ])
    def test_includes(self, container, item, expected):
        assert includes(container, item) is expected

    def test_union_item_partial_overlap_is_false(self):
        """A union item is included only as a whole."""
        assert directly_includes(AB, literals("A", "C")) is F

    def test_directly_includes_is_determinate(self):
        for container, item in itertools.product(SAMPLE_SETS, repeat=2):
            assert directly_includes(container, item).is_determinate()

    def test_includes_agrees_with_directly_includes(self):
        for container, item in itertools.product(SAMPLE_SETS, repeat=2):
            assert includes(container, item) is directly_includes(container, item)

    @pytest.mark.parametrize("item", SAMPLE_SETS)
    def test_monotonic(self, item):
        """Widening the container never turns TRUE into FALSE."""
        for container, extra in itertools.product(SAMPLE_SETS, repeat=2):
            if includes(container, item) is T:
                assert includes(union(container, extra), item) is T
