"""
Text notation for symbolic string sets.

    'A' | 'B'     two literals
    "it's"        double quotes work too; backslash escapes the quote
    hello         bare words are literals, trimmed of surrounding spaces
    '  ab '       quote a literal to keep leading or trailing spaces
    *             the Wildcard (every string)
    void          the Void atom (absence of a value)
    ''            the empty string, which is not void

Used by the CLI and by SymbolicString.__str__.
"""

from __future__ import annotations

from .model import (
    Atom,
    AtomKind,
    SymbolicString,
    SymbolicStringError,
    VOID_ATOM,
    WILDCARD_ATOM,
    literal_atom,
    normalize,
)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

SEPARATOR = "|"
WILDCARD_TOKEN = "*"
VOID_TOKEN = "void"
QUOTES = ("'", '"')


class NotationError(SymbolicStringError, ValueError):
    """Raised when set notation cannot be parsed."""
    pass


# =============================================================================
# PARSING
# =============================================================================

def _read_quoted(text: str, start: int) -> tuple[str, int]:
    """Read a quoted literal starting at `start`; return (value, next index)."""
    quote = text[start]
    chars = []
    i = start + 1
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            chars.append(text[i + 1])
            i += 2
            continue
        if ch == quote:
            return "".join(chars), i + 1
        chars.append(ch)
        i += 1
    raise NotationError(f"unterminated quote starting at position {start}")


def _parse_member(text: str) -> Atom:
    member = text.strip()
    if not member:
        raise NotationError("empty member in set notation")
    if member == WILDCARD_TOKEN:
        return WILDCARD_ATOM
    if member == VOID_TOKEN:
        return VOID_ATOM
    if member[0] in QUOTES:
        value, end = _read_quoted(member, 0)
        if end != len(member):
            raise NotationError(f"unexpected text after quoted literal: {member!r}")
        return literal_atom(value)
    if any(q in member for q in QUOTES):
        raise NotationError(f"stray quote in bare literal: {member!r}")
    return literal_atom(member)


def _split_members(text: str) -> list[str]:
    """Split on separators that are not inside quotes."""
    members = []
    current = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in QUOTES:
            _, end = _read_quoted(text, i)
            current.append(text[i:end])
            i = end
            continue
        if ch == SEPARATOR:
            members.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    members.append("".join(current))
    return members


def parse_set(text: str) -> SymbolicString:
    """
    Parse set notation into a normalized SymbolicString.

    Raises:
        NotationError: If the text is empty or malformed
    """
    if not text.strip():
        raise NotationError("set notation is empty")
    return normalize(_parse_member(m) for m in _split_members(text))


# =============================================================================
# FORMATTING
# =============================================================================

def _format_atom(atom: Atom) -> str:
    if atom.kind is AtomKind.WILDCARD:
        return WILDCARD_TOKEN
    if atom.kind is AtomKind.VOID:
        return VOID_TOKEN
    escaped = atom.value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_set(value: SymbolicString) -> str:
    """Render a set in notation that parse_set() reads back."""
    return f" {SEPARATOR} ".join(_format_atom(a) for a in value.atoms)
