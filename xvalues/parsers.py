"""
Parse numeric tokens into unsigned 64-bit magnitudes.

Accepted forms:
    - integer literals with base auto-detection: ``4096``, ``0x1000``, ``010000`` (octal)
    - any of the above followed by one byte-scale letter: ``4k``, ``0x10M``, ``1E``
    - binary literals: ``0b1000000000000``, ``0B101``
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from enum import StrEnum, unique
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .units import MAX_UINT64, SUFFIX_SCALES


# @formatter:off
_BINARY_PREFIXES = ("0b", "0B")
_BINARY_MAX_LEN = 64 + 2

_SIGN_RE = re.compile(r"[+-]?")
_HEX_RE = re.compile(r"0[xX]([0-9a-fA-F]+)")
_OCT_RE = re.compile(r"0([0-7]*)")
_DEC_RE = re.compile(r"[0-9]+")
_DEC_MAX_DIGITS = len(str(MAX_UINT64))
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ParseErrorKind(StrEnum):
    """
    Reasons a token is rejected.

    Attributes:
        TOO_LONG (str)       : Binary literal with more than 64 digits
        INVALID_DIGIT (str)  : Binary literal with a digit other than 0 or 1
        INVALID_SUFFIX (str) : Unknown or excess characters after a numeric literal
    """
    TOO_LONG = "too_long"
    INVALID_DIGIT = "invalid_digit"
    INVALID_SUFFIX = "invalid_suffix"


class ParseError(ValueError):
    """
    Raised when a token cannot be read as a value.

    Attributes:
        kind: What went wrong.
        token: The offending token, as given.
        offset: Index of the first unconsumed character, for suffix errors only.
    """

    def __init__(self, kind: ParseErrorKind, token: str, offset: int | None = None):
        self.kind = kind
        self.token = token
        self.offset = offset
        super().__init__(self._message())

    def _message(self) -> str:
        if self.kind == ParseErrorKind.TOO_LONG:
            return f"Binary number too big, max 64 bits: {self.token!r}"
        if self.kind == ParseErrorKind.INVALID_DIGIT:
            return f"Binary numbers can only contain 0 or 1: {self.token!r}"
        return f"Error in value {self.token}:{self.offset}"


# Methods --------------------------------------------------------------------------------------------------------------

def parse_value(token: str) -> int:
    """
    Parse a single token into a magnitude in ``[0, 2**64 - 1]``.

    Tokens longer than two characters starting with ``0b``/``0B`` are binary literals.
    Everything else is scanned as a C-style integer literal (optional sign, then hex,
    octal or decimal digits) up to the first character that cannot continue it. What is
    left must be empty or a single scale letter (``kKmMgGtTpPeE``) multiplying the literal
    by the matching power of 1024.

    Overflowing literals saturate at ``2**64 - 1`` regardless of sign, other negative
    literals wrap modulo ``2**64`` and scaled results wrap modulo ``2**64``.

    Args:
        token: Text of one value, no surrounding whitespace.

    Returns:
        int: The magnitude.

    Raises:
        ParseError: If the token is not a valid value.

    Examples:
        >>> parse_value("4k")
        4096
        >>> parse_value("0x10")
        16
        >>> parse_value("0b101")
        5
    """
    if len(token) > 2 and token.startswith(_BINARY_PREFIXES):
        return parse_binary(token)

    value, end = _scan_integer(token)
    rest = token[end:]
    if not rest:
        return value
    if len(rest) == 1 and rest in SUFFIX_SCALES:
        return (value * SUFFIX_SCALES[rest].spec.divisor) & MAX_UINT64

    raise ParseError(ParseErrorKind.INVALID_SUFFIX, token, offset=end)


def parse_binary(token: str) -> int:
    """
    Parse a ``0b``-prefixed binary literal, rightmost digit being bit 0.

    The two prefix characters are never read as digits.

    Raises:
        ParseError: TOO_LONG above 64 digits, INVALID_DIGIT on anything but 0 and 1.
    """
    if len(token) > _BINARY_MAX_LEN:
        raise ParseError(ParseErrorKind.TOO_LONG, token)

    value = 0
    mask = 1
    for ch in reversed(token[2:]):
        if ch == "1":
            value |= mask
        elif ch != "0":
            raise ParseError(ParseErrorKind.INVALID_DIGIT, token)
        mask <<= 1
    return value


def parse_values(tokens: Iterable[str]) -> list[int]:
    """
    Parse every token, failing on the first invalid one.

    No partial result is ever returned.
    """
    return [parse_value(t) for t in tokens]


# Private Methods ------------------------------------------------------------------------------------------------------

def _scan_integer(token: str) -> tuple[int, int]:
    """
    Scan a leading integer literal with base auto-detection.

    Returns:
        tuple[int, int]: The value and the index just past the literal. When no digits
            are found the value is 0 and the index is 0, sign included.
    """
    pos = _SIGN_RE.match(token).end()
    negative = token[:pos] == "-"

    if m := _HEX_RE.match(token, pos):
        value, end = int(m.group(1), 16), m.end()
    elif m := _OCT_RE.match(token, pos):
        value, end = int(m.group(1) or "0", 8), m.end()
    elif m := _DEC_RE.match(token, pos):
        # More than 20 decimal digits is always above 2**64 - 1
        digits = m.group(0)
        value = MAX_UINT64 + 1 if len(digits) > _DEC_MAX_DIGITS else int(digits)
        end = m.end()
    else:
        return 0, 0

    if value > MAX_UINT64:
        return MAX_UINT64, end
    if negative:
        value = -value & MAX_UINT64
    return value, end
