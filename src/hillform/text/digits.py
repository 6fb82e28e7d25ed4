"""
Digit classification across the normal, subscript and superscript planes.

Lookup tables are built once at import and never written afterwards.
"""

__all__ = [
    "Plane",
    "classify_digit",
    "to_glyph",
    "is_superscript_sign",
    "to_subscript",
    "to_superscript",
    "SUPERSCRIPT_PLUS",
    "SUPERSCRIPT_MINUS",
]

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Optional, Tuple, Union

from hillform.config import DEFAULT_CONFIG, FormatConfig

Number = Union[int, float, Decimal, Fraction]


class Plane(Enum):
    """Typographic plane a digit glyph lives in."""

    NORMAL = "normal"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"


SUPERSCRIPT_PLUS = "⁺"
SUPERSCRIPT_MINUS = "⁻"

_NORMAL_GLYPHS = "0123456789+-"
_SUBSCRIPT_GLYPHS = "₀₁₂₃₄₅₆₇₈₉₊₋"
_SUPERSCRIPT_GLYPHS = "⁰¹²³⁴⁵⁶⁷⁸⁹" + SUPERSCRIPT_PLUS + SUPERSCRIPT_MINUS

_GLYPHS = MappingProxyType(
    {
        Plane.NORMAL: _NORMAL_GLYPHS,
        Plane.SUBSCRIPT: _SUBSCRIPT_GLYPHS,
        Plane.SUPERSCRIPT: _SUPERSCRIPT_GLYPHS,
    }
)

# glyph -> (digit value, plane), digits only
_DIGITS = MappingProxyType(
    {
        glyphs[value]: (value, plane)
        for plane, glyphs in _GLYPHS.items()
        for value in range(10)
    }
)


def classify_digit(char: str) -> Optional[Tuple[int, Plane]]:
    """
    Classify a single character as a decimal digit.

    Args:
        char: Character to inspect

    Returns:
        Tuple of (value, plane), or None if the character is not a digit
        in any plane

    Example:
        >>> classify_digit("₂")
        (2, <Plane.SUBSCRIPT: 'subscript'>)
        >>> classify_digit("x") is None
        True
    """
    return _DIGITS.get(char)


def to_glyph(symbol: Union[int, str], plane: Plane) -> str:
    """
    Map a digit value (0-9) or a sign (``+``/``-``) to its glyph in a plane.

    Example:
        >>> to_glyph(3, Plane.SUPERSCRIPT)
        '³'
        >>> to_glyph("-", Plane.SUBSCRIPT)
        '₋'
    """
    glyphs = _GLYPHS[plane]
    if symbol == "+":
        return glyphs[10]
    if symbol == "-":
        return glyphs[11]
    if isinstance(symbol, int) and 0 <= symbol <= 9:
        return glyphs[symbol]
    raise ValueError(f"No glyph for {symbol!r}")


def is_superscript_sign(char: str) -> bool:
    """Check if a character is a superscript plus or minus sign."""
    return char in (SUPERSCRIPT_PLUS, SUPERSCRIPT_MINUS)


def _integral_digits(value: Number, config: FormatConfig) -> str:
    """Digits of ``abs(value)`` up to the decimal separator."""
    if isinstance(value, Fraction):
        value = float(value)
    text = str(abs(value))
    if "e" in text.lower():
        text = format(abs(value), "f")
    if config.decimal_separator != ".":
        text = text.replace(".", config.decimal_separator)
    return text.split(config.decimal_separator, 1)[0]


def to_subscript(value: Number, config: Optional[FormatConfig] = None) -> str:
    """
    Render the integral part of a number in subscript digits.

    Example:
        >>> to_subscript(12)
        '₁₂'
        >>> to_subscript(-3)
        '₋₃'
    """
    config = config or DEFAULT_CONFIG
    digits = "".join(
        to_glyph(int(c), Plane.SUBSCRIPT)
        for c in _integral_digits(value, config)
        if c.isdigit()
    )
    if value < 0:
        digits = to_glyph("-", Plane.SUBSCRIPT) + digits
    return digits


def to_superscript(
    value: Number,
    config: Optional[FormatConfig] = None,
    positive_sign: bool = False,
    postfix_sign: bool = False,
) -> str:
    """
    Render the integral part of a number in superscript digits.

    Args:
        value: Number to render
        config: Glyph configuration (decimal separator)
        positive_sign: Show ``⁺`` for positive values
        postfix_sign: Place the sign after the digits instead of before

    Returns:
        Superscript string

    Example:
        >>> to_superscript(2, positive_sign=True, postfix_sign=True)
        '²⁺'
        >>> to_superscript(-1, postfix_sign=True)
        '¹⁻'
        >>> to_superscript(18)
        '¹⁸'
    """
    config = config or DEFAULT_CONFIG
    digits = "".join(
        to_glyph(int(c), Plane.SUPERSCRIPT)
        for c in _integral_digits(value, config)
        if c.isdigit()
    )
    if value < 0:
        sign = SUPERSCRIPT_MINUS
    elif value > 0 and positive_sign:
        sign = SUPERSCRIPT_PLUS
    else:
        return digits
    return digits + sign if postfix_sign else sign + digits
