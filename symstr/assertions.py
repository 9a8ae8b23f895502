"""
Assertion helpers for tests that reason about symbolic strings.

Each helper raises VerdictAssertionError (an AssertionError, so pytest
reports it as a normal failure) with both operands in the message.
"""

from __future__ import annotations

from .model import SetLike, as_symbolic, is_only_literal_strings
from .relations import extends, is_subset, strings_match
from .truth import Verdict


class VerdictAssertionError(AssertionError):
    """Raised when a symbolic assertion does not hold."""
    pass


def _expect(verdict: Verdict, expected: Verdict, label: str) -> None:
    if not isinstance(verdict, Verdict):
        raise TypeError(f"{label} expects a Verdict, got {type(verdict).__name__}")
    if verdict is not expected:
        raise VerdictAssertionError(f"{label}: expected {expected}, got {verdict}")


def assert_true(verdict: Verdict) -> None:
    _expect(verdict, Verdict.TRUE, "assert_true")


def assert_false(verdict: Verdict) -> None:
    _expect(verdict, Verdict.FALSE, "assert_false")


def assert_unknown(verdict: Verdict) -> None:
    """Passes only when both outcomes remain possible."""
    _expect(verdict, Verdict.UNKNOWN, "assert_unknown")


def assert_match(a: SetLike, b: SetLike) -> None:
    """Passes when the two values definitely denote the same string."""
    verdict = strings_match(a, b)
    if verdict is not Verdict.TRUE:
        raise VerdictAssertionError(
            f"assert_match: {as_symbolic(a)} vs {as_symbolic(b)} is {verdict}"
        )


def assert_same(a: SetLike, b: SetLike) -> None:
    """Passes when both values normalize to the same set of atoms."""
    if not (is_subset(a, b) and is_subset(b, a)):
        raise VerdictAssertionError(
            f"assert_same: {as_symbolic(a)} and {as_symbolic(b)} differ"
        )


def assert_not_literal(value: SetLike) -> None:
    """Passes when the value is not made only of literal strings."""
    if is_only_literal_strings(value):
        raise VerdictAssertionError(
            f"assert_not_literal: {as_symbolic(value)} holds only literals"
        )


def assert_void(value: SetLike) -> None:
    assert_same(value, None)


def assert_extends(a: SetLike, b: SetLike) -> Verdict:
    """Assert that `a` falls inside `b` for every member; returns the verdict."""
    verdict = extends(a, b)
    if verdict is not Verdict.TRUE:
        raise VerdictAssertionError(
            f"assert_extends: {as_symbolic(a)} within {as_symbolic(b)} is {verdict}"
        )
    return verdict
