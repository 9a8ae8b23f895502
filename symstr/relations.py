"""
Relationship Engine — membership and equality between symbolic sets.

Every query is total and returns a Verdict. UNKNOWN is preferred over a
guess whenever the answer depends on which concrete member of a union is
chosen; the engine never picks "the common case".

Queries:
    extends            — distributive subtype check (per atom of the left set)
    is_subset          — whole-set subtype check, always determinate
    directly_includes  — does a set explicitly hold an item?
    includes           — membership query, same verdict as directly_includes
    strings_match      — equality / overlap of two sets
"""

from __future__ import annotations

import logging

from .model import (
    SetLike,
    SymbolicString,
    as_symbolic,
    is_union,
)
from .truth import Verdict, and_


logger = logging.getLogger(__name__)


# =============================================================================
# SUBTYPE CHECKS
# =============================================================================

def _covered(atom, target: SymbolicString) -> bool:
    return any(candidate.covers(atom) for candidate in target.atoms)


def extends(a: SetLike, b: SetLike) -> Verdict:
    """
    Check whether the members of `a` fall inside `b`, atom by atom.

    TRUE if every atom of `a` is covered by `b`, FALSE if none is, and
    UNKNOWN when only some are (the answer depends on the member chosen
    from `a`).
    """
    a, b = as_symbolic(a), as_symbolic(b)
    return Verdict.collect(Verdict.of(_covered(atom, b)) for atom in a.atoms)


def is_subset(a: SetLike, b: SetLike) -> bool:
    """True iff every atom of `a` is covered by some atom of `b`."""
    a, b = as_symbolic(a), as_symbolic(b)
    return all(_covered(atom, b) for atom in a.atoms)


# =============================================================================
# MEMBERSHIP
# =============================================================================

def directly_includes(container: SetLike, item: SetLike) -> Verdict:
    """
    Does `container` explicitly hold `item`?

    A union item is included iff its atoms are a subset of the container.
    A single-atom item is included iff some atom of the container covers
    it (equal Literal, or the Wildcard absorbing a Literal). The result is
    always determinate.
    """
    container, item = as_symbolic(container), as_symbolic(item)
    if is_union(item):
        verdict = Verdict.of(is_subset(item, container))
        logger.debug("directly_includes(%s, %s): union item -> %s", container, item, verdict)
        return verdict

    (atom,) = item.atoms
    verdict = Verdict.of(_covered(atom, container))
    logger.debug("directly_includes(%s, %s): atom scan -> %s", container, item, verdict)
    return verdict


def includes(container: SetLike, item: SetLike) -> Verdict:
    """
    Membership query.

    Returns the same verdict as directly_includes(). Because absorption
    has already collapsed the container at construction, the direct scan
    is decidable and always determinate, so there is nothing left to
    widen.

    Monotonic: adding atoms to `container` never turns TRUE into FALSE.
    """
    return directly_includes(container, item)


# =============================================================================
# EQUALITY / OVERLAP
# =============================================================================

def _single_literal(value: SymbolicString):
    if len(value.atoms) == 1 and value.atoms[0].is_literal:
        return value.atoms[0].value
    return None


def strings_match(a: SetLike, b: SetLike) -> Verdict:
    """
    Determine whether two sets denote the same string.

    Policy:
        both single Literals           -> TRUE iff equal, else FALSE
        both Void                      -> TRUE
        provably disjoint sets         -> FALSE (covers Void vs non-Void)
        equal sets, one a union or
        holding the Wildcard           -> UNKNOWN
        partial overlap                -> UNKNOWN

    Symmetric, and never FALSE for a value compared with itself.
    """
    a, b = as_symbolic(a), as_symbolic(b)

    literal_a, literal_b = _single_literal(a), _single_literal(b)
    if literal_a is not None and literal_b is not None:
        return Verdict.of(literal_a == literal_b)

    a_in_b = extends(a, b)
    b_in_a = extends(b, a)
    if a_in_b is Verdict.FALSE and b_in_a is Verdict.FALSE:
        logger.debug("strings_match(%s, %s): disjoint", a, b)
        return Verdict.FALSE

    mutual = and_(Verdict.of(is_subset(a, b)), Verdict.of(is_subset(b, a)))
    if mutual is Verdict.TRUE:
        multi_valued = is_union(a) or is_union(b) or a.has_wildcard or b.has_wildcard
        verdict = Verdict.UNKNOWN if multi_valued else Verdict.TRUE
        logger.debug("strings_match(%s, %s): equal sets -> %s", a, b, verdict)
        return verdict

    logger.debug("strings_match(%s, %s): overlap -> unknown", a, b)
    return Verdict.UNKNOWN
