"""
Render magnitudes as aligned hex, decimal, byte-size and binary columns
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Iterable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .units import ByteScale, classify


# @formatter:off
BINARY_WIDTHS = (4, 8, 16, 32, 64)

FLAG_ZERO_GLYPHS = {
    "-b": ".",
    "-B": "0",
}
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class DisplayConf:
    """
    Display options shared by every line of one run.

    Attributes:
        show_binary (bool) : Append the binary digit string to each line
        zero_glyph (str)   : Single character printed for clear bits
    """
    show_binary: bool = False
    zero_glyph: str = " "

    def __post_init__(self):
        if not isinstance(self.zero_glyph, str) or len(self.zero_glyph) != 1:
            raise ValueError(f"zero_glyph must be a single character, but found {self.zero_glyph!r}")

    @classmethod
    def from_flag(cls, flag: str | None) -> Self:
        """
        Create from a binary display flag.

        ``-b`` shows clear bits as ``.``, ``-B`` as ``0``; None disables binary display.
        """
        if flag is None:
            return cls()
        if flag not in FLAG_ZERO_GLYPHS:
            raise ValueError(f"unknown binary display flag {flag!r}, expected one of {list(FLAG_ZERO_GLYPHS)}")
        return cls(show_binary=True, zero_glyph=FLAG_ZERO_GLYPHS[flag])


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_hex(value: int, scale: ByteScale) -> str:
    """Return ``0x`` and lowercase hex digits zero-padded to the tier's hex width."""
    return f"0x{value:0{scale.spec.width_hex}x}"


def fmt_dec(value: int, scale: ByteScale) -> str:
    """Return decimal digits right-justified to the tier's decimal width."""
    return f"{value:{scale.spec.width_dec}d}"


def fmt_size(value: int) -> str:
    """
    Return the human-readable byte size in the value's own tier.

    Always uses the natural tier of ``value``, never a wider column tier.

    Examples:
        >>> fmt_size(1024)
        '   1.0K'
        >>> fmt_size(1536 * 1024)
        '   1.5M'
    """
    spec = classify(value).spec
    return f"{value / spec.divisor:6.1f}{spec.suffix}"


def binary_width(value: int) -> int:
    """Return the smallest of 4, 8, 16, 32 or 64 bits holding the highest set bit."""
    bits = value.bit_length()
    for width in BINARY_WIDTHS:
        if bits <= width:
            return width
    return BINARY_WIDTHS[-1]


def fmt_binary(value: int, zero_glyph: str) -> str:
    """
    Return the binary digit string, most significant bit first.

    Examples:
        >>> fmt_binary(5, zero_glyph=".")
        '.1.1'
        >>> fmt_binary(0x100, zero_glyph="0")
        '0000000100000000'
    """
    digits = f"{value:0{binary_width(value)}b}"
    return digits.replace("0", zero_glyph)


def render(value: int, scale: ByteScale, conf: DisplayConf = DisplayConf()) -> str:
    """
    Render one output line for a value, without the trailing newline.

    Hex and decimal fields use the widths of ``scale``, which may be wider than the
    value's own tier when aligning several values. The size field uses the value's own tier.

    Args:
        value: Magnitude to render.
        scale: Tier whose widths apply to the hex and decimal fields.
        conf: Binary display options.

    Returns:
        str: Space-separated fields, plus two spaces and the binary string if enabled.

    Examples:
        >>> render(5, ByteScale.BYTE)
        '0x0005    5    5.0b'
    """
    line = f"{fmt_hex(value, scale)} {fmt_dec(value, scale)} {fmt_size(value)}"
    if conf.show_binary:
        line += f"  {fmt_binary(value, conf.zero_glyph)}"
    return line


def render_lines(values: Iterable[int], scale: ByteScale, conf: DisplayConf = DisplayConf()) -> list[str]:
    return [render(v, scale, conf) for v in values]
