"""
Pattern Transform Engine — substring, replace and escape.

These primitives operate on concrete literal strings only. Each accepts
either a plain `str` (and returns a `str`) or a literal-only
SymbolicString, in which case it is applied to every member and the
normalized set of results is returned. Wildcard or Void operands raise
UnsupportedOperandError.

Replace and escape scan left to right with an explicit output buffer,
one occurrence at a time. An empty `find` matches nowhere, so both are
no-ops for it.

Length is closed-form in the number of occurrences n:
    len(replace(s, t, u)) == len(s) + n * (len(u) - len(t))
    len(escape(s, t, e))  == len(s) + n * len(e)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from ..model import (
    SetLike,
    SymbolicString,
    UnsupportedOperandError,
    as_literal,
    as_symbolic,
    enumerate_literals,
    is_only_literal_strings,
    literals,
)
from ..truth import Verdict


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

DEFAULT_ESCAPE_TOKEN = "\\"


# =============================================================================
# OPERAND HANDLING
# =============================================================================

def _lift(value: SetLike, fn: Callable[[str], str]) -> Union[str, SymbolicString]:
    """Apply `fn` to a str, or member-wise to a literal-only set."""
    if isinstance(value, str):
        return fn(value)
    s = as_symbolic(value)
    if not is_only_literal_strings(s):
        raise UnsupportedOperandError(
            f"transformations need concrete literal strings, got {s}"
        )
    return literals(*(fn(member) for member in enumerate_literals(s)))


def _concrete(value: SetLike) -> str:
    if isinstance(value, str):
        return value
    return as_literal(value)


# =============================================================================
# SUBSTRING
# =============================================================================

def _substr(text: str, start: int, end: Optional[int]) -> str:
    length = len(text)
    if end is None:
        end = length
    # Out-of-range indices clamp to the string bounds
    start = max(0, min(start, length))
    end = max(0, min(end, length))
    if end <= start:
        return ""
    return text[start:end]


def substr(
    value: SetLike,
    start: int,
    end: Optional[int] = None,
) -> Union[str, SymbolicString]:
    """
    Return the characters of `value` in the half-open range [start, end).

    `end` defaults to the length of the string. `end <= start` gives "".
    Indices outside [0, len] are clamped, never wrapped: a negative index
    counts as 0, not from the end.

        substr("hello foo world", 6, 9)  # 'foo'
    """
    return _lift(value, lambda text: _substr(text, start, end))


# =============================================================================
# REPLACE / ESCAPE
# =============================================================================

def _rewrite(text: str, find: str, emit: Callable[[str], str]) -> tuple[str, int]:
    """
    Scan `text` for non-overlapping occurrences of `find`.

    Each occurrence is replaced by emit(find); the text between
    occurrences is copied unchanged. Returns (result, occurrence count).
    """
    if not find:
        return text, 0

    out = []
    count = 0
    rest = text
    while True:
        index = rest.find(find)
        if index < 0:
            out.append(rest)
            break
        out.append(rest[:index])
        out.append(emit(find))
        rest = rest[index + len(find):]
        count += 1
    return "".join(out), count


def _replace(text: str, find: str, replacement: str) -> str:
    result, count = _rewrite(text, find, lambda _: replacement)
    logger.debug("replace: %d occurrence(s) of %r", count, find)
    return result


def _escape(text: str, find: str, token: str) -> str:
    result, count = _rewrite(text, find, lambda match: token + match)
    logger.debug("escape: %d occurrence(s) of %r", count, find)
    return result


def replace(
    value: SetLike,
    find: SetLike,
    replacement: SetLike,
) -> Union[str, SymbolicString]:
    """
    Replace every occurrence of `find` with `replacement`, left to right.

        replace("cat mat flat", "at", "op")  # 'cop mop flop'
    """
    find, replacement = _concrete(find), _concrete(replacement)
    return _lift(value, lambda text: _replace(text, find, replacement))


def escape(
    value: SetLike,
    find: SetLike,
    token: SetLike = DEFAULT_ESCAPE_TOKEN,
) -> Union[str, SymbolicString]:
    """
    Prefix every occurrence of `find` with `token`, keeping `find` itself.

        escape('please "help" me', '"')  # 'please \\"help\\" me'
    """
    find, token = _concrete(find), _concrete(token)
    return _lift(value, lambda text: _escape(text, find, token))


def unescape(
    value: SetLike,
    find: SetLike,
    token: SetLike = DEFAULT_ESCAPE_TOKEN,
) -> Union[str, SymbolicString]:
    """
    Inverse of escape(): drop `token` in front of each escaped `find`.

    unescape(escape(s, t, e), t, e) == s whenever `e + t` cannot start
    inside unescaped text, which holds for a single-character token that
    does not occur in `find`.
    """
    find, token = _concrete(find), _concrete(token)
    if not find:
        return _lift(value, lambda text: text)
    return _lift(value, lambda text: _replace(text, token + find, find))


def count_occurrences(value: SetLike, find: SetLike) -> int:
    """Number of non-overlapping occurrences of `find`, scanning left to right."""
    text, find = _concrete(value), _concrete(find)
    if not find:
        return 0
    return text.count(find)


# =============================================================================
# CONTAINMENT
# =============================================================================

def str_includes(value: SetLike, search: SetLike) -> Verdict:
    """
    Does the chosen member of `value` contain `search`?

    Literals answer TRUE or FALSE. The Wildcard answers UNKNOWN, except
    that every string contains "". Void contains nothing. Members are
    combined with Verdict.collect().
    """
    s = as_symbolic(value)
    search = _concrete(search)

    def check(atom) -> Verdict:
        if atom.is_literal:
            return Verdict.of(search in atom.value)
        if atom.is_wildcard:
            return Verdict.TRUE if search == "" else Verdict.UNKNOWN
        return Verdict.FALSE

    return Verdict.collect(check(atom) for atom in s.atoms)
