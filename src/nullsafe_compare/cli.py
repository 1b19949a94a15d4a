"""
Command-line interface for nullsafe-compare.

Usage:
    nullsafe-compare equal ABC abc --ignore-case
    nullsafe-compare compare 0a0b 0a --type bytes
    nullsafe-compare hash foo bar
"""

import argparse
import logging
import sys

from . import __version__
from .equality import equal_str, str_equal
from .hashing import hashcode, hashcode_pair
from .ordering import compare, compare_bool, compare_bytes, compare_double, compare_long

logger = logging.getLogger(__name__)

NULL_TOKEN = "<null>"


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise ValueError(f"not a boolean: {text!r}")


# How each --type turns a command-line token into a value, and orders values
COMPARE_TYPES = {
    "natural": (str, compare),
    "int": (int, compare_long),
    "double": (float, compare_double),
    "bool": (_parse_bool, compare_bool),
    "bytes": (bytes.fromhex, compare_bytes),
}


def _nullable(text: str, null_token: str):
    return None if text == null_token else text


def _run_equal(args) -> int:
    a = _nullable(args.a, args.null_token)
    b = _nullable(args.b, args.null_token)
    case_sensitive = not args.ignore_case
    if args.null_as_empty:
        result = str_equal(a, b, case_sensitive)
    else:
        result = equal_str(a, b, case_sensitive)
    print("true" if result else "false")
    return 0 if result else 1


def _run_compare(args) -> int:
    parse, ordering = COMPARE_TYPES[args.type]
    values = []
    for token in (args.a, args.b):
        text = _nullable(token, args.null_token)
        values.append(None if text is None else parse(text))

    # Primitive orderings have no missing value
    if None in values and args.type in ("int", "double", "bool"):
        raise ValueError(f"--type {args.type} does not accept {args.null_token}")

    logger.debug("Comparing %r and %r as %s", values[0], values[1], args.type)
    print(ordering(*values))
    return 0


def _run_hash(args) -> int:
    values = [_nullable(v, args.null_token) for v in args.values]
    if len(values) == 1:
        print(hashcode(values[0]))
    else:
        print(hashcode_pair(*values))
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="nullsafe-compare",
        description="Null-safe equality, ordering and hashing of command-line values",
    )
    parser.add_argument(
        "--null-token",
        default=NULL_TOKEN,
        help=f"Argument value that stands for a missing value (default: {NULL_TOKEN})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Equal command
    equal_parser = subparsers.add_parser(
        "equal",
        help="Check two strings for equality (exit 0 if equal, 1 otherwise)",
    )
    equal_parser.add_argument("a", help="First string")
    equal_parser.add_argument("b", help="Second string")
    equal_parser.add_argument(
        "-i", "--ignore-case",
        action="store_true",
        help="Ignore case differences",
    )
    equal_parser.add_argument(
        "--null-as-empty",
        action="store_true",
        help="Treat a missing value as the empty string",
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Three-way compare two values, printing -1, 0 or 1",
    )
    compare_parser.add_argument("a", help="First value")
    compare_parser.add_argument("b", help="Second value")
    compare_parser.add_argument(
        "--type",
        choices=sorted(COMPARE_TYPES),
        default="natural",
        help="How to interpret the values; bytes are given as hex (default: natural)",
    )

    # Hash command
    hash_parser = subparsers.add_parser(
        "hash",
        help="Print the hash code of one value, or the combined hash of two "
        "(string hashes vary between runs unless PYTHONHASHSEED is set)",
    )
    hash_parser.add_argument("values", nargs="+", help="One or two values")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "hash" and len(args.values) > 2:
        parser.error("hash takes one or two values")

    handlers = {
        "equal": _run_equal,
        "compare": _run_compare,
        "hash": _run_hash,
    }
    try:
        code = handlers[args.command](args)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if code:
        sys.exit(code)


if __name__ == "__main__":
    main()
