"""Scan element symbols."""

__all__ = ["scan_symbol"]

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from hillform.elements.isotope import Element
    from hillform.elements.periodic_table import PeriodicTable


def scan_symbol(
    text: str,
    start: int,
    table: "PeriodicTable",
) -> Optional[Tuple["Element", int]]:
    """
    Read an element symbol: one uppercase letter, optionally one lowercase.

    Args:
        text: Text to scan
        start: Index of the first character to read
        table: Registry used to resolve the symbol

    Returns:
        Tuple of (element, end index), or None if no element matches
    """
    if start >= len(text) or not text[start].isupper():
        return None
    end = start + 1
    if end < len(text) and text[end].islower():
        end += 1
    element = table.resolve_symbol(text[start:end])
    if element is None:
        return None
    return element, end
