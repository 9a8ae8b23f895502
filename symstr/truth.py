"""
Verdict — the three-valued truth domain for symbolic string reasoning.

A Verdict is one of TRUE, FALSE or UNKNOWN. UNKNOWN is not a missing
value: it is the determinate meta-result "true for some realizations of
the inputs, false for others".

Combinators follow Kleene's strong three-valued logic and are table
driven. Verdicts refuse to be used as Python booleans so that UNKNOWN
can never be silently coerced to False.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional


class Verdict(Enum):
    """Ternary truth value."""
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    def __bool__(self) -> bool:
        raise TypeError(
            f"Verdict.{self.name} has no boolean value; "
            "use is_determinate() or to_bool() explicitly"
        )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, value: bool) -> Verdict:
        """Lift a Python bool into a determinate Verdict."""
        return cls.TRUE if value else cls.FALSE

    @classmethod
    def collect(cls, verdicts: Iterable[Verdict]) -> Verdict:
        """
        Merge per-member outcomes into a single Verdict.

        All TRUE gives TRUE, all FALSE gives FALSE, anything mixed (or any
        UNKNOWN member) gives UNKNOWN. An empty collection is FALSE.
        """
        seen = set(verdicts)
        if not seen:
            return cls.FALSE
        if len(seen) == 1:
            return seen.pop()
        return cls.UNKNOWN

    def is_determinate(self) -> bool:
        return self is not Verdict.UNKNOWN

    def to_bool(self) -> Optional[bool]:
        """Convert to True/False, or None when the verdict is UNKNOWN."""
        if self is Verdict.UNKNOWN:
            return None
        return self is Verdict.TRUE


T = Verdict.TRUE
F = Verdict.FALSE
U = Verdict.UNKNOWN


# =============================================================================
# TRUTH TABLES (Kleene logic)
# =============================================================================

_NOT = {T: F, F: T, U: U}

_AND = {
    (T, T): T, (T, F): F, (T, U): U,
    (F, T): F, (F, F): F, (F, U): F,
    (U, T): U, (U, F): F, (U, U): U,
}

_OR = {
    (T, T): T, (T, F): T, (T, U): T,
    (F, T): T, (F, F): F, (F, U): U,
    (U, T): T, (U, F): U, (U, U): U,
}

_XOR = {
    (T, T): F, (T, F): T, (T, U): U,
    (F, T): T, (F, F): F, (F, U): U,
    (U, T): U, (U, F): U, (U, U): U,
}


def not_(a: Verdict) -> Verdict:
    return _NOT[a]


def and_(a: Verdict, b: Verdict) -> Verdict:
    return _AND[(a, b)]


def or_(a: Verdict, b: Verdict) -> Verdict:
    return _OR[(a, b)]


def xor(a: Verdict, b: Verdict) -> Verdict:
    return _XOR[(a, b)]


def is_determinate(v: Verdict) -> bool:
    """True iff `v` is TRUE or FALSE."""
    return v.is_determinate()
