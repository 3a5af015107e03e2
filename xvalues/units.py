#
# XValues Byte Scale Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Iterable

# Constants ------------------------------------------------------------------------------------------------------------

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB
PB = 1024 * TB
EB = 1024 * PB

MAX_UINT64 = 2 ** 64 - 1


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ByteScale(IntEnum):
    """
    Byte-scale tiers, ordered from the smallest to the largest.

    Ordering is meaningful: the widest tier of a value set is simply ``max()``.
    """
    BYTE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4
    PETA = 5
    EXA = 6

    @property
    def spec(self) -> "ScaleSpec":
        return SCALE_SPECS[self]


@dataclass(frozen=True)
class ScaleSpec:
    """
    Fixed display attributes of a byte-scale tier.

    Attributes:
        suffix (str)    : Single letter printed after the human-readable size
        width_hex (int) : Hex digits used when this tier sets the column width
        width_dec (int) : Decimal field width used when this tier sets the column width
        divisor (int)   : Bytes per unit of this tier, a power of 1024
    """
    suffix: str
    width_hex: int
    width_dec: int
    divisor: int


# @formatter:off
SCALE_SPECS: dict[ByteScale, ScaleSpec] = {
    ByteScale.BYTE: ScaleSpec(suffix="b", width_hex=4,  width_dec=4,  divisor=1),
    ByteScale.KILO: ScaleSpec(suffix="K", width_hex=8,  width_dec=7,  divisor=KB),
    ByteScale.MEGA: ScaleSpec(suffix="M", width_hex=8,  width_dec=10, divisor=MB),
    ByteScale.GIGA: ScaleSpec(suffix="G", width_hex=12, width_dec=13, divisor=GB),
    ByteScale.TERA: ScaleSpec(suffix="T", width_hex=16, width_dec=16, divisor=TB),
    ByteScale.PETA: ScaleSpec(suffix="P", width_hex=16, width_dec=19, divisor=PB),
    ByteScale.EXA:  ScaleSpec(suffix="E", width_hex=16, width_dec=20, divisor=EB),
}

# Multiplier letters accepted after a numeric literal, both cases
SUFFIX_SCALES: dict[str, ByteScale] = {
    "k": ByteScale.KILO, "K": ByteScale.KILO,
    "m": ByteScale.MEGA, "M": ByteScale.MEGA,
    "g": ByteScale.GIGA, "G": ByteScale.GIGA,
    "t": ByteScale.TERA, "T": ByteScale.TERA,
    "p": ByteScale.PETA, "P": ByteScale.PETA,
    "e": ByteScale.EXA,  "E": ByteScale.EXA,
}
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def classify(value: int) -> ByteScale:
    """
    Return the natural byte-scale tier of a value.

    The value falls into the first tier whose upper bound (the next power of 1024)
    exceeds it; anything at or above 1 EiB is EXA.

    Examples:
        >>> classify(1023)
        <ByteScale.BYTE: 0>
        >>> classify(1024)
        <ByteScale.KILO: 1>
    """
    if value < KB:
        return ByteScale.BYTE
    elif value < MB:
        return ByteScale.KILO
    elif value < GB:
        return ByteScale.MEGA
    elif value < TB:
        return ByteScale.GIGA
    elif value < PB:
        return ByteScale.TERA
    elif value < EB:
        return ByteScale.PETA
    else:
        return ByteScale.EXA


def effective_scale(values: Iterable[int]) -> ByteScale:
    """
    Return the widest natural tier among values, used to align hex and decimal columns.

    An empty input yields EXA so that a constants table always renders at full width.
    """
    scales = [classify(v) for v in values]
    if not scales:
        return ByteScale.EXA
    return max(scales)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Column widths must never shrink towards higher tiers.
_ordered_specs = [SCALE_SPECS[s] for s in ByteScale]
if any(lo.width_hex > hi.width_hex or lo.width_dec > hi.width_dec
       for lo, hi in zip(_ordered_specs, _ordered_specs[1:])):
    raise AssertionError(
        "Configuration Error: hex and decimal widths in SCALE_SPECS must be non-decreasing by tier."
    )
