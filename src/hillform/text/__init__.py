"""
Text scanning utilities for formula strings.

Digit classification across planes, signed number scanning and element
symbol scanning.
"""

from hillform.text.digits import (
    Plane,
    classify_digit,
    to_glyph,
    is_superscript_sign,
    to_subscript,
    to_superscript,
)

from hillform.text.numbers import (
    NumberScan,
    scan_number,
)

from hillform.text.symbols import scan_symbol

__all__ = [
    # digits
    "Plane",
    "classify_digit",
    "to_glyph",
    "is_superscript_sign",
    "to_subscript",
    "to_superscript",
    # numbers
    "NumberScan",
    "scan_number",
    # symbols
    "scan_symbol",
]
