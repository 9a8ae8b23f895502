"""
symstr CLI — evaluate symbolic string queries from the shell.

Commands:
    symstr classify <set>                  — Describe a set's shape
    symstr match <a> <b>                   — Do two sets denote the same string?
    symstr includes <set> <item>           — Does a set hold an item?
    symstr substr <input> <from> [<to>]    — Half-open substring
    symstr replace <input> <find> <repl>   — Replace every occurrence
    symstr escape <input> <find>           — Prefix occurrences with a token
    symstr unescape <input> <find>         — Undo escape

Sets are written in notation: 'A' | 'B', * for any string, void for
absence. Bare words are trimmed; quote input whose leading or trailing
spaces matter. Transform commands take sets too, so a union input is
transformed member by member.

The CLI is read-only and deterministic: the same arguments always print
the same answer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Union

from ..model import (
    SymbolicString,
    SymbolicStringError,
    classify,
    enumerate_literals,
    is_only_literal_strings,
    is_union,
)
from ..notation import parse_set
from ..relations import includes, strings_match
from ..transform.patterns import (
    DEFAULT_ESCAPE_TOKEN,
    escape,
    replace,
    substr,
    unescape,
)
from ..truth import Verdict


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_OPERAND = 2


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_verdict(verdict: Verdict) -> str:
    return verdict.value


def format_result(result: Union[str, SymbolicString]) -> str:
    """Plain strings print raw; sets print in notation."""
    if isinstance(result, str):
        return result
    return str(result)


def format_classification(value: SymbolicString) -> str:
    """Multi-line description of a set."""
    lines = [
        f"set:      {value}",
        f"class:    {classify(value).value}",
        f"union:    {str(is_union(value)).lower()}",
        f"literals: {str(is_only_literal_strings(value)).lower()}",
    ]
    if is_only_literal_strings(value):
        lines.append(f"members:  {len(enumerate_literals(value))}")
    return "\n".join(lines)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_classify(args: argparse.Namespace) -> int:
    """Describe a set."""
    print(format_classification(parse_set(args.set)))
    return EXIT_OK


def cmd_match(args: argparse.Namespace) -> int:
    """Compare two sets."""
    print(format_verdict(strings_match(parse_set(args.a), parse_set(args.b))))
    return EXIT_OK


def cmd_includes(args: argparse.Namespace) -> int:
    """Check set membership."""
    print(format_verdict(includes(parse_set(args.set), parse_set(args.item))))
    return EXIT_OK


def cmd_substr(args: argparse.Namespace) -> int:
    """Extract a substring."""
    print(format_result(substr(parse_set(args.input), args.start, args.end)))
    return EXIT_OK


def cmd_replace(args: argparse.Namespace) -> int:
    """Replace every occurrence."""
    print(format_result(replace(parse_set(args.input), args.find, args.replacement)))
    return EXIT_OK


def cmd_escape(args: argparse.Namespace) -> int:
    """Escape every occurrence."""
    print(format_result(escape(parse_set(args.input), args.find, args.token)))
    return EXIT_OK


def cmd_unescape(args: argparse.Namespace) -> int:
    """Undo escaping."""
    print(format_result(unescape(parse_set(args.input), args.find, args.token)))
    return EXIT_OK


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="symstr",
        description="symstr — three-valued reasoning over symbolic string sets",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Describe a set")
    classify_parser.add_argument("set", help="Set in notation, e.g. \"'A' | 'B'\"")
    classify_parser.set_defaults(func=cmd_classify)

    # Match command
    match_parser = subparsers.add_parser("match", help="Compare two sets")
    match_parser.add_argument("a", help="First set")
    match_parser.add_argument("b", help="Second set")
    match_parser.set_defaults(func=cmd_match)

    # Includes command
    includes_parser = subparsers.add_parser("includes", help="Check set membership")
    includes_parser.add_argument("set", help="Containing set")
    includes_parser.add_argument("item", help="Item to look for")
    includes_parser.set_defaults(func=cmd_includes)

    # Substr command
    substr_parser = subparsers.add_parser("substr", help="Extract a substring")
    substr_parser.add_argument("input", help="Input set; quote it to keep surrounding spaces")
    substr_parser.add_argument("start", type=int, help="Start index (inclusive)")
    substr_parser.add_argument("end", type=int, nargs="?", default=None,
                               help="End index (exclusive, default: length)")
    substr_parser.set_defaults(func=cmd_substr)

    # Replace command
    replace_parser = subparsers.add_parser("replace", help="Replace every occurrence")
    replace_parser.add_argument("input", help="Input set; quote it to keep surrounding spaces")
    replace_parser.add_argument("find", help="Text to find (raw)")
    replace_parser.add_argument("replacement", help="Replacement text (raw)")
    replace_parser.set_defaults(func=cmd_replace)

    # Escape / unescape commands
    for name, func, help_text in (
        ("escape", cmd_escape, "Prefix every occurrence with a token"),
        ("unescape", cmd_unescape, "Remove escape tokens"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", help="Input set; quote it to keep surrounding spaces")
        sub.add_argument("find", help="Text to find (raw)")
        sub.add_argument("--token", default=DEFAULT_ESCAPE_TOKEN,
                         help="Escape token (default: backslash)")
        sub.set_defaults(func=func)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    try:
        return args.func(args)
    except SymbolicStringError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_INVALID_OPERAND


if __name__ == "__main__":
    sys.exit(main())
