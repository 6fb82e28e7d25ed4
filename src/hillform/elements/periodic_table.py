"""
Periodic table registry.

Resolves element symbols and mass numbers to concrete isotope records.
The table is read-only once built; ``default_table`` loads it from RDKit's
periodic table the first time it is needed.
"""

__all__ = ["PeriodicTable", "default_table"]

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from hillform.elements.isotope import Element, Isotope, split_isotope_key
from hillform.errors import UnknownIsotopeError

# Highest atomic number known to RDKit's table
_MAX_ATOMIC_NUMBER = 118
# Upper bound when probing RDKit for isotope mass numbers
_MAX_MASS_NUMBER = 320

# symbol -> {mass number: (atomic mass, abundance)}
IsotopeData = Mapping[int, Tuple[float, float]]


class PeriodicTable:
    """
    Read-only lookup of elements and their isotopes.

    Args:
        elements: Elements in the table
        isotopes: Per element symbol, a mapping of mass number to
            (atomic mass, natural abundance)
        common: Optional per-symbol override of the common mass number;
            otherwise the most abundant isotope is the common one

    Example:
        >>> table = PeriodicTable(
        ...     [Element(1, "H", "Hydrogen", 1.008)],
        ...     {"H": {1: (1.00783, 0.99988), 2: (2.01410, 0.00012)}},
        ... )
        >>> str(table.common_isotope(table.resolve_symbol("H")))
        'H'
        >>> str(table.isotope_by_mass(table.resolve_symbol("H"), 2))
        '²H'
    """

    def __init__(
        self,
        elements: Iterable[Element],
        isotopes: Mapping[str, IsotopeData],
        common: Optional[Mapping[str, int]] = None,
    ) -> None:
        common = common or {}
        self._by_symbol: Dict[str, Element] = {}
        self._by_number: Dict[int, Element] = {}
        self._isotopes: Dict[str, Mapping[int, Isotope]] = {}
        self._common: Dict[str, Isotope] = {}

        for element in elements:
            self._by_symbol[element.symbol] = element
            self._by_number[element.atomic_number] = element

            data = isotopes.get(element.symbol, {})
            common_mass = common.get(element.symbol)
            if common_mass not in data and data:
                common_mass = max(data, key=lambda a: (data[a][1], -a))

            records = {
                mass_number: Isotope(
                    element=element,
                    mass_number=mass_number,
                    atomic_mass=atomic_mass,
                    abundance=abundance,
                    common=mass_number == common_mass,
                )
                for mass_number, (atomic_mass, abundance) in sorted(data.items())
            }
            self._isotopes[element.symbol] = MappingProxyType(records)
            if common_mass in records:
                self._common[element.symbol] = records[common_mass]

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._by_symbol

    def resolve_symbol(self, symbol: str) -> Optional[Element]:
        """Case-sensitive element lookup by symbol."""
        return self._by_symbol.get(symbol)

    def element(self, atomic_number: int) -> Optional[Element]:
        """Element lookup by atomic number."""
        return self._by_number.get(atomic_number)

    def common_isotope(self, element: Element) -> Optional[Isotope]:
        """The isotope assumed when no mass number is given."""
        return self._common.get(element.symbol)

    def isotope_by_mass(self, element: Element, mass_number: int) -> Optional[Isotope]:
        """Exact isotope lookup, or None if the element has no such isotope."""
        return self._isotopes.get(element.symbol, {}).get(mass_number)

    def isotopes_of(self, element: Element) -> List[Isotope]:
        """All known isotopes of an element, by ascending mass number."""
        return list(self._isotopes.get(element.symbol, {}).values())

    def try_isotope_from_key(self, key: str) -> Optional[Isotope]:
        """Decode an isotope key, or None if it names no known isotope."""
        parts = split_isotope_key(key)
        if parts is None:
            return None
        symbol, mass_number = parts
        element = self.resolve_symbol(symbol)
        if element is None:
            return None
        return self.isotope_by_mass(element, mass_number)

    def isotope_from_key(self, key: str) -> Isotope:
        """
        Decode an isotope key.

        Raises:
            UnknownIsotopeError: The key is malformed or names no known isotope
        """
        isotope = self.try_isotope_from_key(key)
        if isotope is None:
            raise UnknownIsotopeError(f"Unknown isotope key {key!r}")
        return isotope

    @classmethod
    def from_rdkit(cls) -> "PeriodicTable":
        """Build the table from RDKit's periodic table."""
        from rdkit.Chem import GetPeriodicTable

        rdkit_table = GetPeriodicTable()
        elements = []
        isotopes: Dict[str, Dict[int, Tuple[float, float]]] = {}
        common: Dict[str, int] = {}

        for z in range(1, _MAX_ATOMIC_NUMBER + 1):
            symbol = rdkit_table.GetElementSymbol(z)
            elements.append(
                Element(
                    atomic_number=z,
                    symbol=symbol,
                    name=rdkit_table.GetElementName(z),
                    average_mass=rdkit_table.GetAtomicWeight(z),
                )
            )
            data = {}
            for mass_number in range(z, _MAX_MASS_NUMBER + 1):
                mass = rdkit_table.GetMassForIsotope(z, mass_number)
                if mass > 0:
                    abundance = rdkit_table.GetAbundanceForIsotope(z, mass_number)
                    data[mass_number] = (mass, abundance)
            isotopes[symbol] = data
            common[symbol] = rdkit_table.GetMostCommonIsotope(z)

        logger.debug(
            f"Loaded {len(elements)} elements and "
            f"{sum(len(d) for d in isotopes.values())} isotopes from RDKit"
        )
        return cls(elements, isotopes, common)


@lru_cache(maxsize=1)
def default_table() -> PeriodicTable:
    """Process-wide periodic table backed by RDKit."""
    return PeriodicTable.from_rdkit()
