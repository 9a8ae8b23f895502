"""
Tests for symstr — Symbolic Set Model and notation.

These tests verify that:
1. Normalization is idempotent and applies absorption
2. Void and the empty string are never conflated
3. Classifications follow the normalized atom set
4. Enumeration refuses sets that have no finite listing
5. Set notation parses and renders consistently
"""

import pytest

from symstr.model import (
    ANY,
    VOID,
    VOID_ATOM,
    WILDCARD_ATOM,
    Atom,
    AtomKind,
    EmptySetError,
    NotEnumerableError,
    SetClass,
    SymbolicString,
    UnsupportedOperandError,
    as_literal,
    as_symbolic,
    classify,
    enumerate_literals,
    is_only_literal_strings,
    is_union,
    literal,
    literal_atom,
    literals,
    normalize,
    union,
)
from symstr.notation import NotationError, format_set, parse_set


# =============================================================================
# NORMALIZATION TESTS
# =============================================================================

class TestNormalization:
    """Test construction-time normalization."""

    def test_deduplicates_keeping_order(self):
        s = normalize([literal_atom("B"), literal_atom("A"), literal_atom("B")])
        assert s.atoms == (literal_atom("B"), literal_atom("A"))

    def test_idempotent(self):
        s = normalize([literal_atom("A"), VOID_ATOM, literal_atom("A")])
        assert normalize(s) == s
        assert normalize(s.atoms) == s

    def test_wildcard_absorbs_literals(self):
        """A union holding the Wildcard and Literals collapses to the Wildcard."""
        s = union("A", ANY, "B")
        assert s == ANY
        assert s.atoms == (WILDCARD_ATOM,)

    def test_absorption_keeps_void(self):
        s = union("A", ANY, None)
        assert s.atoms == (WILDCARD_ATOM, VOID_ATOM)

    def test_empty_set_rejected(self):
        with pytest.raises(EmptySetError):
            normalize([])

    def test_direct_construction_must_be_normalized(self):
        with pytest.raises(ValueError, match="not normalized"):
            SymbolicString((literal_atom("A"), WILDCARD_ATOM))

    def test_equality_ignores_order(self):
        assert literals("A", "B") == literals("B", "A")
        assert hash(literals("A", "B")) == hash(literals("B", "A"))

    def test_literal_atom_requires_str(self):
        with pytest.raises(TypeError):
            Atom(AtomKind.LITERAL, 12)

    def test_sentinel_atoms_carry_no_value(self):
        with pytest.raises(ValueError):
            Atom(AtomKind.VOID, "x")


class TestVoidVersusEmpty:
    """Void is the absence of a value, not the empty string."""

    def test_not_equal(self):
        assert VOID != literal("")

    def test_union_keeps_both(self):
        assert len(union("", None)) == 2

    def test_classify_differs(self):
        assert classify("") is SetClass.LITERAL
        assert classify(None) is SetClass.VOID


# =============================================================================
# CLASSIFICATION TESTS
# =============================================================================

class TestClassification:
    """Test derived classifications."""

    @pytest.mark.parametrize("value,expected", [
        ("A", False),
        (ANY, False),
        (VOID, False),
        (literals("A", "B"), True),
        (union("A", None), True),
        (union(None, "A"), True),
        (union(ANY, None), True),
        (union("A", ANY), False),
    ])
    def test_is_union(self, value, expected):
        assert is_union(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("A", True),
        (literals("A", "B"), True),
        (ANY, False),
        (union(ANY, "A"), False),
        (union(ANY, "A", "B"), False),
        (VOID, False),
        (union("A", None), False),
    ])
    def test_is_only_literal_strings(self, value, expected):
        assert is_only_literal_strings(value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("A", SetClass.LITERAL),
        (literals("A", "B"), SetClass.UNION_OF_LITERALS),
        (ANY, SetClass.WILDCARD),
        (union("A", ANY), SetClass.WILDCARD),
        (VOID, SetClass.VOID),
        (union("A", None), SetClass.MIXED_WITH_VOID),
        (union(ANY, None), SetClass.MIXED_WITH_VOID),
    ])
    def test_classify(self, value, expected):
        assert classify(value) is expected


# =============================================================================
# ENUMERATION TESTS
# =============================================================================

class TestEnumeration:
    """Test enumeration and unwrapping of literal sets."""

    def test_enumerates_in_order(self):
        assert enumerate_literals(literals("x", "y", "z")) == ("x", "y", "z")

    def test_wildcard_not_enumerable(self):
        with pytest.raises(NotEnumerableError, match="no finite enumeration"):
            enumerate_literals(ANY)

    def test_void_not_enumerable(self):
        with pytest.raises(NotEnumerableError):
            enumerate_literals(union("A", None))

    def test_as_literal(self):
        assert as_literal(literal("A")) == "A"

    def test_as_literal_rejects_union(self):
        with pytest.raises(UnsupportedOperandError, match="single literal"):
            as_literal(literals("A", "B"))

    def test_as_symbolic_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_symbolic(12)


# =============================================================================
# NOTATION TESTS
# =============================================================================

class TestNotation:
    """Test set notation parsing and formatting."""

    def test_parse_quoted_union(self):
        assert parse_set("'A' | 'B'") == literals("A", "B")

    def test_parse_sentinels(self):
        assert parse_set("*") == ANY
        assert parse_set("void") == VOID
        assert parse_set("'void'") == literal("void")

    def test_parse_bare_word(self):
        assert parse_set("hello world") == literal("hello world")

    def test_bare_word_trimmed(self):
        assert parse_set("  ab ") == literal("ab")

    def test_quoted_literal_keeps_spaces(self):
        assert parse_set("'  ab '") == literal("  ab ")

    def test_parse_empty_string_literal(self):
        assert parse_set("''") == literal("")

    def test_parse_separator_inside_quotes(self):
        assert parse_set('"a|b" | c') == literals("a|b", "c")

    def test_parse_escaped_quote(self):
        assert parse_set(r"'it\'s'") == literal("it's")

    def test_parse_applies_absorption(self):
        assert parse_set("'A' | *") == ANY

    @pytest.mark.parametrize("text", ["", "'A' |", "'open", "a'b", "'A' x"])
    def test_malformed(self, text):
        with pytest.raises(NotationError):
            parse_set(text)

    def test_format(self):
        assert format_set(union("A", ANY, None)) == "* | void"
        assert str(literals("A", "B")) == "'A' | 'B'"

    def test_format_reads_back(self):
        value = literals("it's", "back\\slash", "")
        assert parse_set(format_set(value)) == value
