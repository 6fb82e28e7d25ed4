"""Element and isotope records, and the canonical isotope key."""

__all__ = ["Element", "Isotope", "isotope_key", "split_isotope_key"]

from dataclasses import dataclass, field
from typing import Optional, Tuple

from hillform.text.digits import to_superscript

_KEY_SEPARATOR = ":"


@dataclass(frozen=True)
class Element:
    """A chemical element."""

    atomic_number: int
    symbol: str
    name: str = field(default="", compare=False)
    average_mass: float = field(default=0.0, compare=False)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Isotope:
    """
    A nuclide: one element at one mass number.

    Two isotopes are equal when their element and mass number match;
    masses and abundances are informational.
    """

    element: Element
    mass_number: int
    atomic_mass: float = field(default=0.0, compare=False)
    abundance: float = field(default=0.0, compare=False)
    common: bool = field(default=False, compare=False)

    @property
    def symbol(self) -> str:
        return self.element.symbol

    @property
    def atomic_number(self) -> int:
        return self.element.atomic_number

    @property
    def neutrons(self) -> int:
        return self.mass_number - self.element.atomic_number

    @property
    def key(self) -> str:
        """Canonical key used in formula nuclide maps."""
        return isotope_key(self)

    def __str__(self) -> str:
        if self.common:
            return self.symbol
        return to_superscript(self.mass_number) + self.symbol


def isotope_key(isotope: Isotope) -> str:
    """
    Encode an isotope as its canonical key.

    Example:
        >>> isotope_key(Isotope(Element(1, "H"), 2))
        'H:2'
    """
    return f"{isotope.symbol}{_KEY_SEPARATOR}{isotope.mass_number}"


def split_isotope_key(key: str) -> Optional[Tuple[str, int]]:
    """
    Split a key into (symbol, mass number), or None if it is malformed.

    Example:
        >>> split_isotope_key("C:13")
        ('C', 13)
        >>> split_isotope_key("C13") is None
        True
    """
    if not key:
        return None
    symbol, sep, mass = key.partition(_KEY_SEPARATOR)
    if not sep or not symbol or not mass.isascii() or not mass.isdigit():
        return None
    return symbol, int(mass)
