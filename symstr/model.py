"""
Symbolic Set Model — representation and normalization of string sets.

A SymbolicString denotes a set of concrete strings. It is a non-empty,
ordered, deduplicated tuple of atoms:

    Literal   — one concrete string value
    WILDCARD  — every possible string (unbounded)
    VOID      — absence of a value (never the same as "")

INVARIANT (absorption):
    A set holding the Wildcard together with any Literal normalizes to
    the Wildcard alone. The Literals are merged away and cannot be
    recovered. This happens at construction time, so every downstream
    classification sees the collapsed set.

    Absorption is lossy and kept for compatibility: `{"A", *}` and `{*}`
    are the same value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union


# =============================================================================
# ERRORS
# =============================================================================

class SymbolicStringError(Exception):
    """Base class for every error raised by symstr."""
    pass


class EmptySetError(SymbolicStringError, ValueError):
    """Raised when a SymbolicString would have no atoms."""
    pass


class NotEnumerableError(SymbolicStringError):
    """Raised when enumerating a set that is not made only of Literals."""
    pass


class UnsupportedOperandError(SymbolicStringError, TypeError):
    """Raised when a concrete-string primitive receives Wildcard or Void."""
    pass


# =============================================================================
# ATOMS
# =============================================================================

class AtomKind(Enum):
    LITERAL = "literal"
    WILDCARD = "wildcard"
    VOID = "void"


@dataclass(frozen=True)
class Atom:
    """
    Smallest unit of a SymbolicString.

    Only LITERAL atoms carry a value. Use `literal_atom()` or the
    module-level WILDCARD / VOID singletons instead of building these
    by hand.
    """
    kind: AtomKind
    value: Optional[str] = None

    def __post_init__(self):
        if self.kind is AtomKind.LITERAL:
            if not isinstance(self.value, str):
                raise TypeError(
                    f"Literal atom requires a str value, got {type(self.value).__name__}"
                )
        elif self.value is not None:
            raise ValueError(f"{self.kind.name} atom cannot carry a value")

    @property
    def is_literal(self) -> bool:
        return self.kind is AtomKind.LITERAL

    @property
    def is_wildcard(self) -> bool:
        return self.kind is AtomKind.WILDCARD

    @property
    def is_void(self) -> bool:
        return self.kind is AtomKind.VOID

    def covers(self, other: Atom) -> bool:
        """
        Atom-level subtype check: is every string of `other` also in self?

        Literal/Literal compares values. The Wildcard covers any Literal
        and itself. Void only covers Void.
        """
        if self.kind is AtomKind.WILDCARD:
            return other.kind in (AtomKind.WILDCARD, AtomKind.LITERAL)
        if self.kind is AtomKind.VOID:
            return other.kind is AtomKind.VOID
        return other.kind is AtomKind.LITERAL and other.value == self.value


WILDCARD_ATOM = Atom(AtomKind.WILDCARD)
VOID_ATOM = Atom(AtomKind.VOID)


def literal_atom(value: str) -> Atom:
    return Atom(AtomKind.LITERAL, value)


# =============================================================================
# CLASSIFICATION
# =============================================================================

class SetClass(Enum):
    """Discriminated description of a SymbolicString's shape."""
    LITERAL = "literal"
    UNION_OF_LITERALS = "union_of_literals"
    WILDCARD = "wildcard"
    VOID = "void"
    MIXED_WITH_VOID = "mixed_with_void"


# =============================================================================
# SYMBOLIC STRING
# =============================================================================

@dataclass(frozen=True, eq=False)
class SymbolicString:
    """
    An immutable, normalized set of atoms.

    Two SymbolicStrings with the same atoms are interchangeable: equality
    and hashing ignore atom order. Build them through `normalize()` or
    the constructors below; direct construction validates that the atoms
    are already normalized.
    """
    atoms: tuple[Atom, ...]

    def __post_init__(self):
        if not self.atoms:
            raise EmptySetError("a SymbolicString needs at least one atom")
        if _normalize_atoms(self.atoms) != self.atoms:
            raise ValueError(
                "atoms are not normalized; build the set with normalize()"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymbolicString):
            return NotImplemented
        return frozenset(self.atoms) == frozenset(other.atoms)

    def __hash__(self) -> int:
        return hash(frozenset(self.atoms))

    def __repr__(self) -> str:
        return f"SymbolicString({self})"

    def __iter__(self):
        return iter(self.atoms)

    def __len__(self) -> int:
        return len(self.atoms)

    def __contains__(self, atom: object) -> bool:
        return atom in self.atoms

    def __str__(self) -> str:
        from .notation import format_set
        return format_set(self)

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD_ATOM in self.atoms

    @property
    def has_void(self) -> bool:
        return VOID_ATOM in self.atoms

    def union(self, *others: SymbolicString) -> SymbolicString:
        return union(self, *others)


SetLike = Union[SymbolicString, str, None]


def _normalize_atoms(atoms: Iterable[Atom]) -> tuple[Atom, ...]:
    """Deduplicate (keeping first-seen order) and apply absorption."""
    ordered: list[Atom] = []
    for atom in atoms:
        if atom not in ordered:
            ordered.append(atom)
    if WILDCARD_ATOM in ordered:
        ordered = [a for a in ordered if not a.is_literal]
    return tuple(ordered)


def normalize(atoms: Union[Iterable[Atom], SymbolicString]) -> SymbolicString:
    """
    Build a SymbolicString from atoms, applying absorption.

    Idempotent: normalize(normalize(x)) == normalize(x).

    Raises:
        EmptySetError: If no atoms are given
    """
    if isinstance(atoms, SymbolicString):
        return atoms
    normalized = _normalize_atoms(atoms)
    if not normalized:
        raise EmptySetError("cannot normalize an empty collection of atoms")
    return SymbolicString(normalized)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def literal(value: str) -> SymbolicString:
    """The set holding exactly one concrete string."""
    return SymbolicString((literal_atom(value),))


def literals(*values: str) -> SymbolicString:
    """The finite set of the given concrete strings."""
    return normalize(literal_atom(v) for v in values)


ANY = SymbolicString((WILDCARD_ATOM,))
VOID = SymbolicString((VOID_ATOM,))


def as_symbolic(value: SetLike) -> SymbolicString:
    """
    Coerce a Python value to a SymbolicString.

    str becomes a Literal set, None becomes VOID, and a SymbolicString
    passes through unchanged.
    """
    if isinstance(value, SymbolicString):
        return value
    if value is None:
        return VOID
    if isinstance(value, str):
        return literal(value)
    raise TypeError(
        f"cannot interpret {type(value).__name__} as a symbolic string"
    )


def union(*sets: SetLike) -> SymbolicString:
    """Union of the given sets, normalized."""
    atoms: list[Atom] = []
    for s in sets:
        atoms.extend(as_symbolic(s).atoms)
    return normalize(atoms)


# =============================================================================
# DERIVED CLASSIFICATIONS
# =============================================================================

def is_union(value: SetLike) -> bool:
    """True iff the normalized set has more than one atom."""
    return len(as_symbolic(value).atoms) > 1


def is_only_literal_strings(value: SetLike) -> bool:
    """True iff every atom is a Literal (no Wildcard, no Void)."""
    return all(atom.is_literal for atom in as_symbolic(value).atoms)


def classify(value: SetLike) -> SetClass:
    """
    Describe the shape of a set so callers can choose a strategy.

    LITERAL            — exactly one Literal
    UNION_OF_LITERALS  — two or more Literals
    WILDCARD           — the Wildcard alone
    VOID               — the Void alone
    MIXED_WITH_VOID    — Void next to Literals or the Wildcard
    """
    s = as_symbolic(value)
    if s.has_void:
        return SetClass.VOID if len(s.atoms) == 1 else SetClass.MIXED_WITH_VOID
    if s.has_wildcard:
        return SetClass.WILDCARD
    return SetClass.LITERAL if len(s.atoms) == 1 else SetClass.UNION_OF_LITERALS


def enumerate_literals(value: SetLike) -> tuple[str, ...]:
    """
    List the concrete strings of a literal-only set, in set order.

    Raises:
        NotEnumerableError: If the set holds the Wildcard or Void
    """
    s = as_symbolic(value)
    if not is_only_literal_strings(s):
        raise NotEnumerableError(
            f"{s} has no finite enumeration of literal strings"
        )
    return tuple(atom.value for atom in s.atoms)


def as_literal(value: SetLike) -> str:
    """
    Unwrap a single concrete string.

    Raises:
        UnsupportedOperandError: If the value is a union, Wildcard or Void
    """
    s = as_symbolic(value)
    if classify(s) is not SetClass.LITERAL:
        raise UnsupportedOperandError(
            f"expected a single literal string, got {s}"
        )
    return s.atoms[0].value
