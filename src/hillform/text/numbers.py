"""
Scan signed numbers written in a single digit plane.

A run of digits never mixes planes: ``2²`` scans as ``2`` and leaves the
superscript digit for the next read.
"""

__all__ = ["NumberScan", "scan_number"]

from dataclasses import dataclass
from typing import Optional

from hillform.config import DEFAULT_CONFIG, FormatConfig
from hillform.text.digits import (
    SUPERSCRIPT_MINUS,
    SUPERSCRIPT_PLUS,
    Plane,
    classify_digit,
)


@dataclass(frozen=True)
class NumberScan:
    """Result of a successful number scan."""

    value: int
    plane: Plane
    charge: bool
    start: int
    end: int

    @property
    def consumed(self) -> int:
        """Number of characters read."""
        return self.end - self.start

    @property
    def superscript(self) -> bool:
        return self.plane is Plane.SUPERSCRIPT

    @property
    def subscript(self) -> bool:
        return self.plane is Plane.SUBSCRIPT


def scan_number(
    text: str,
    start: int,
    config: Optional[FormatConfig] = None,
) -> Optional[NumberScan]:
    """
    Read the longest signed number starting at ``start``.

    A leading sign is one of the configured ASCII signs or a superscript
    sign. A trailing superscript sign is read only after superscript digits
    with no leading sign. A sign without digits stands for a magnitude of 1.

    Args:
        text: Text to scan
        start: Index of the first character to read
        config: Sign glyph configuration

    Returns:
        NumberScan, or None if nothing was consumed

    Example:
        >>> scan = scan_number("SO4²⁻", 3)
        >>> scan.value, scan.plane, scan.charge
        (4, <Plane.NORMAL: 'normal'>, False)
        >>> scan = scan_number("SO4²⁻", 4)
        >>> scan.value, scan.plane, scan.charge
        (-2, <Plane.SUPERSCRIPT: 'superscript'>, True)
    """
    config = config or DEFAULT_CONFIG
    index = start
    length = len(text)
    plane: Optional[Plane] = None
    charge = False
    negative = False
    leading_sign = False

    if index < length:
        if text.startswith(config.positive_sign, index):
            plane, charge, leading_sign = Plane.NORMAL, True, True
            index += len(config.positive_sign)
        elif text.startswith(config.negative_sign, index):
            plane, charge, leading_sign, negative = Plane.NORMAL, True, True, True
            index += len(config.negative_sign)
        elif text[index] == SUPERSCRIPT_PLUS:
            plane, charge, leading_sign = Plane.SUPERSCRIPT, True, True
            index += 1
        elif text[index] == SUPERSCRIPT_MINUS:
            plane, charge, leading_sign, negative = Plane.SUPERSCRIPT, True, True, True
            index += 1

    value = 0
    digits = 0
    while index < length:
        digit = classify_digit(text[index])
        if digit is None:
            break
        digit_value, digit_plane = digit
        if plane is not None and digit_plane is not plane:
            break
        plane = digit_plane
        value = value * 10 + digit_value
        digits += 1
        index += 1

    if index == start:
        return None

    if digits == 0:
        value = 1
    if negative:
        value = -value
    elif plane is Plane.SUPERSCRIPT and not leading_sign and index < length:
        if text[index] == SUPERSCRIPT_PLUS:
            charge = True
            index += 1
        elif text[index] == SUPERSCRIPT_MINUS:
            charge = True
            value = -value
            index += 1

    return NumberScan(
        value=value,
        plane=plane or Plane.NORMAL,
        charge=charge,
        start=start,
        end=index,
    )
