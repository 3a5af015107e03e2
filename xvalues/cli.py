"""
XValues CLI

Usage:
    xvalues                      # table of common byte sizes
    xvalues 4k 0x1000 0b101      # one aligned line per value
    xvalues -b 0xf0              # add a binary column, clear bits as '.'
    xvalues -B 0xf0              # add a binary column, clear bits as '0'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
from typing import Sequence, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .display import DisplayConf, FLAG_ZERO_GLYPHS, render_lines
from .parsers import ParseError, parse_values
from .units import ByteScale, KB, MB, GB, TB, PB, EB, effective_scale

# @formatter:off
CONSTANTS = (
    8, 16, 64, 128, 256, 512,
    1 * KB, 4 * KB, 16 * KB, 64 * KB,
    1 * MB, 16 * MB, 64 * MB, 256 * MB, 512 * MB,
    1 * GB, 4 * GB,
    1 * TB,
    1 * PB,
    1 * EB,
)

_HELP_FLAGS = ("-h", "--help")
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def format_constants(conf: DisplayConf = DisplayConf()) -> list[str]:
    """Return the table of common byte sizes, always at the widest column width."""
    return render_lines(CONSTANTS, ByteScale.EXA, conf)


def format_values(tokens: Sequence[str], conf: DisplayConf = DisplayConf()) -> list[str]:
    """
    Parse tokens and return their lines aligned to the widest tier among them.

    Every token is parsed before anything is rendered, so a bad token yields no lines.

    Raises:
        ParseError: On the first token that fails to parse.
    """
    values = parse_values(tokens)
    return render_lines(values, effective_scale(values), conf)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xvalues",
        description="Print numbers in hex, decimal, byte-size and binary notation.",
        epilog="Values may be decimal, 0x hex, 0-prefixed octal or 0b binary, optionally "
               "followed by one of kKmMgGtTpPeE to scale by a power of 1024. "
               "With no values a table of common sizes is printed.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-b", dest="flag", action="store_const", const="-b",
        help="show binary digits with '.' for clear bits (any argument starting with -b)",
    )
    group.add_argument(
        "-B", dest="flag", action="store_const", const="-B",
        help="show binary digits with '0' for clear bits (any argument starting with -B)",
    )
    parser.add_argument("values", nargs="*", metavar="VALUE", help="number to display")
    return parser


def normalize_argv(argv: Sequence[str]) -> list[str]:
    """
    Rewrite raw arguments so that argparse sees only the leading flag as an option.

    Only the first argument may be a flag, matched on its first two characters
    (``-binary`` selects ``-b``). Everything after it is a value, even ``-1``.
    """
    argv = list(argv)
    head: list[str] = []
    if argv and argv[0][:2] in FLAG_ZERO_GLYPHS:
        head.append(argv.pop(0)[:2])
    elif argv and argv[0] in _HELP_FLAGS:
        head.append(argv.pop(0))
    return [*head, "--", *argv]


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """
    Command line entry point.

    Returns:
        int: 0 on success. Parse errors exit with status 1 and a message on stderr.
    """
    argv = sys.argv[1:] if argv is None else argv
    stdout = sys.stdout if stdout is None else stdout

    parser = build_parser()
    args = parser.parse_args(normalize_argv(argv))
    conf = DisplayConf.from_flag(args.flag)

    if not args.values:
        lines = format_constants(conf)
    else:
        try:
            lines = format_values(args.values, conf)
        except ParseError as exc:
            parser.exit(1, f"{parser.prog}: error: {exc}\n")

    for line in lines:
        print(line, file=stdout)
    return 0
