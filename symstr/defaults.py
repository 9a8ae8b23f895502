"""
Defaulting Helpers — pick between a candidate value and a fallback.

All helpers are total and side-effect free. Where the candidate is a
union, auto_string() and auto() decide member by member and return the
normalized union of the picks, so `{"A", void}` with fallback "Z" becomes
`{"A", "Z"}`.
"""

from __future__ import annotations

from typing import Any, Optional

from .model import (
    ANY,
    Atom,
    SetLike,
    SymbolicString,
    as_symbolic,
    literal,
    normalize,
)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# "any string"
DEFAULT_FALLBACK = ANY


def _pick(value: SymbolicString, keep, fallback: SymbolicString) -> SymbolicString:
    """Keep the atoms accepted by `keep`; swap every other atom for `fallback`."""
    picked: list[Atom] = []
    for atom in value.atoms:
        if keep(atom):
            picked.append(atom)
        else:
            picked.extend(fallback.atoms)
    return normalize(picked)


def auto_string(value: Any, fallback: SetLike = DEFAULT_FALLBACK) -> SymbolicString:
    """
    Return `value` if it is string-like, otherwise `fallback`.

        auto_string("A")                    # 'A'
        auto_string(None)                   # *
        auto_string(12, "Z")                # 'Z'
        auto_string(literals("A", "B"))     # 'A' | 'B'
        auto_string(VOID, literals("Y", "Z"))  # 'Y' | 'Z'
    """
    fallback = as_symbolic(fallback)
    if isinstance(value, str):
        return literal(value)
    if isinstance(value, SymbolicString):
        return _pick(value, lambda atom: not atom.is_void, fallback)
    return fallback


def coerce(subject: SetLike, from_: SetLike, into: SetLike) -> SymbolicString:
    """
    Return `into` if `from_` is a subtype of `subject`, else `subject`.

    Decided per member of `from_`: a member covered by `subject`
    contributes `into`, any other member contributes `subject`. Swaps a
    too-general placeholder for a concrete default:

        coerce(ANY, ANY, "Z")                  # 'Z'
        coerce("A", ANY, "Z")                  # 'A'
        coerce("A", literals("A", "B"), "Z")   # 'Z' | 'A'
    """
    subject, from_, into = as_symbolic(subject), as_symbolic(from_), as_symbolic(into)
    picked: list[Atom] = []
    for atom in from_.atoms:
        if any(candidate.covers(atom) for candidate in subject.atoms):
            picked.extend(into.atoms)
        else:
            picked.extend(subject.atoms)
    return normalize(picked)


def auto(
    thing: SetLike,
    test: SetLike,
    otherwise: Optional[SetLike] = None,
) -> SymbolicString:
    """
    Keep `thing` where it fits `test`, falling back to `otherwise`.

    Void members and members outside `test` are replaced by `otherwise`,
    which defaults to `test` itself. To fall back to Void, pass VOID
    explicitly.
    """
    thing, test = as_symbolic(thing), as_symbolic(test)
    fallback = test if otherwise is None else as_symbolic(otherwise)
    return _pick(
        thing,
        lambda atom: not atom.is_void and any(t.covers(atom) for t in test.atoms),
        fallback,
    )
