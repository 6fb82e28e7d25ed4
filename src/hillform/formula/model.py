"""
The Formula value.

A formula records only how many of each nuclide it holds plus a net ionic
charge, which is the information content of Hill notation. Nuclides are
keyed by their canonical isotope key (``"H:2"``), never by registry object
identity. Formulas are immutable; every editing operation returns a new
value.
"""

__all__ = ["Formula"]

import operator
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    FrozenSet,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from hillform.config import MAX_CHARGE, MAX_COUNT, MIN_CHARGE
from hillform.elements.isotope import Element, Isotope, split_isotope_key
from hillform.elements.periodic_table import PeriodicTable, default_table
from hillform.errors import FormulaDomainError, FormulaOverflowError

if TYPE_CHECKING:
    from hillform.config import FormatConfig


def _symbol_of(key: str) -> Optional[str]:
    parts = split_isotope_key(key)
    return parts[0] if parts else None


@dataclass(frozen=True, init=False, eq=False)
class Formula:
    """
    The chemical formula of a substance.

    Args:
        nuclides: Mapping of isotope key to count; zero counts are dropped
        charge: Net ionic charge in units of the elementary charge

    Raises:
        FormulaOverflowError: A count is outside 0..65535 or the charge is
            outside the signed 16-bit range

    Example:
        >>> water = Formula({"H:1": 2, "O:16": 1})
        >>> water.number_of_atoms
        3
        >>> Formula({"H:1": 0}) == Formula.EMPTY
        True
    """

    _counts: Mapping[str, int]
    charge: int

    EMPTY = None  # type: Formula

    def __init__(self, nuclides: Optional[Mapping[str, int]] = None, charge: int = 0):
        counts = {}
        for key, count in (nuclides or {}).items():
            count = operator.index(count)
            if count == 0:
                continue
            if not 0 < count <= MAX_COUNT:
                raise FormulaOverflowError(
                    f"Count {count} for {key!r} is outside 1..{MAX_COUNT}"
                )
            counts[key] = count
        charge = operator.index(charge)
        if not MIN_CHARGE <= charge <= MAX_CHARGE:
            raise FormulaOverflowError(
                f"Charge {charge} is outside {MIN_CHARGE}..{MAX_CHARGE}"
            )
        object.__setattr__(self, "_counts", MappingProxyType(dict(sorted(counts.items()))))
        object.__setattr__(self, "charge", charge)

    @classmethod
    def from_isotopes(
        cls,
        isotopes: Union[Mapping[Isotope, int], Iterable[Tuple[Isotope, int]]],
        charge: int = 0,
    ) -> "Formula":
        """
        Build a formula from isotope records. Repeated isotopes are summed.

        Example:
            >>> h = Isotope(Element(1, "H"), 1)
            >>> Formula.from_isotopes([(h, 1), (h, 1)]).nuclides["H:1"]
            2
        """
        pairs = isotopes.items() if isinstance(isotopes, Mapping) else isotopes
        counts: dict = {}
        for isotope, count in pairs:
            counts[isotope.key] = counts.get(isotope.key, 0) + count
        return cls(counts, charge)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def nuclides(self) -> Mapping[str, int]:
        """Read-only mapping of isotope key to count."""
        return self._counts

    @property
    def is_empty(self) -> bool:
        """True for the formula with no nuclides and no charge."""
        return not self._counts and self.charge == 0

    @property
    def number_of_atoms(self) -> int:
        return sum(self._counts.values())

    def count_element(self, symbol: str) -> int:
        """Count all isotopes of the element with the given symbol."""
        return sum(
            count for key, count in self._counts.items() if _symbol_of(key) == symbol
        )

    def nuclide_items(self, table: Optional[PeriodicTable] = None) -> List[Tuple[Isotope, int]]:
        """Resolve every nuclide key to its isotope record, with its count."""
        table = table or default_table()
        return [(table.isotope_from_key(key), count) for key, count in self._counts.items()]

    def isotopes(self, table: Optional[PeriodicTable] = None) -> FrozenSet[Isotope]:
        return frozenset(isotope for isotope, _ in self.nuclide_items(table))

    def elements(self, table: Optional[PeriodicTable] = None) -> FrozenSet[Element]:
        return frozenset(isotope.element for isotope, _ in self.nuclide_items(table))

    def average_mass(self, table: Optional[PeriodicTable] = None) -> float:
        """Mass using each element's average atomic weight."""
        return sum(
            isotope.element.average_mass * count
            for isotope, count in self.nuclide_items(table)
        )

    def monoisotopic_mass(self, table: Optional[PeriodicTable] = None) -> float:
        """Mass using each nuclide's exact atomic mass."""
        return sum(isotope.atomic_mass * count for isotope, count in self.nuclide_items(table))

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def contains(self, other: Union["Formula", Isotope, Element]) -> bool:
        """
        Check whether this formula holds ``other``.

        For a formula, every nuclide of ``other`` must be present in equal or
        greater amount, which guarantees that subtracting it truncates
        nothing.
        """
        if isinstance(other, Formula):
            from hillform.formula.arithmetic import contains

            return contains(self, other)
        if isinstance(other, Isotope):
            return other.key in self._counts
        if isinstance(other, Element):
            return self.count_element(other.symbol) > 0
        raise TypeError(f"Cannot check containment of {type(other).__name__}")

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def add_isotope(self, isotope: Isotope, amount: int = 1) -> "Formula":
        """Formula with ``amount`` more of the given isotope."""
        if amount < 0:
            raise FormulaDomainError(f"amount must not be negative, got {amount}")
        counts = dict(self._counts)
        counts[isotope.key] = counts.get(isotope.key, 0) + amount
        return Formula(counts, self.charge)

    def subtract_isotope(self, isotope: Isotope, amount: int = 1) -> "Formula":
        """Formula with ``amount`` less of the given isotope, dropped at zero."""
        if amount < 0:
            raise FormulaDomainError(f"amount must not be negative, got {amount}")
        counts = dict(self._counts)
        if isotope.key in counts:
            counts[isotope.key] = max(counts[isotope.key] - amount, 0)
        return Formula(counts, self.charge)

    def remove_isotope(self, isotope: Isotope) -> "Formula":
        return self.remove_all([isotope])

    def remove_element(self, element: Element) -> "Formula":
        return self.remove_all([element])

    def remove_all(self, items: Iterable[Union[Isotope, Element]]) -> "Formula":
        """Formula without the given isotopes and every isotope of the given elements."""
        keys = set()
        symbols = set()
        for item in items:
            if isinstance(item, Isotope):
                keys.add(item.key)
            else:
                symbols.add(item.symbol)
        counts = {
            key: count
            for key, count in self._counts.items()
            if key not in keys and _symbol_of(key) not in symbols
        }
        return Formula(counts, self.charge)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Formula":
        if not isinstance(other, Formula):
            return NotImplemented
        from hillform.formula.arithmetic import add

        return add(self, other)

    def __sub__(self, other: object) -> "Formula":
        if not isinstance(other, Formula):
            return NotImplemented
        from hillform.formula.arithmetic import subtract

        return subtract(self, other)

    def __mul__(self, factor) -> "Formula":
        from hillform.formula.arithmetic import multiply

        return multiply(self, factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor) -> "Formula":
        from hillform.formula.arithmetic import divide

        return divide(self, divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Formula):
            return NotImplemented
        return self._counts == other._counts and self.charge == other.charge

    def __hash__(self) -> int:
        return hash((frozenset(self._counts.items()), self.charge))

    def __repr__(self) -> str:
        return f"Formula({dict(self._counts)!r}, charge={self.charge})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(
        self,
        table: Optional[PeriodicTable] = None,
        config: Optional["FormatConfig"] = None,
    ) -> str:
        """Hill notation for this formula."""
        from hillform.formula.render import render

        return render(self, table, config)


Formula.EMPTY = Formula()
