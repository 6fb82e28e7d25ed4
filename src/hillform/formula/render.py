"""Hill-notation rendering."""

__all__ = ["render", "CARBON", "HYDROGEN"]

from typing import List, Optional, Tuple

from hillform.config import DEFAULT_CONFIG, EMPTY_TOKEN, FormatConfig
from hillform.elements.isotope import Isotope
from hillform.elements.periodic_table import PeriodicTable, default_table
from hillform.formula.model import Formula
from hillform.text.digits import to_subscript, to_superscript

CARBON = 6
HYDROGEN = 1


def _term(isotope: Isotope, count: int, config: FormatConfig) -> str:
    if count > 1:
        return str(isotope) + to_subscript(count, config)
    return str(isotope)


def render(
    formula: Formula,
    table: Optional[PeriodicTable] = None,
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Render a formula in Hill notation.

    Carbon comes first, then hydrogen if any carbon was written, then every
    other element by symbol. Isotopes of one element are ordered by
    descending mass number. Counts above one are subscript; a non-zero
    charge is appended as a superscript number with a trailing sign.

    Example:
        >>> from hillform.formula.parse import parse
        >>> render(parse("OHC2H5"))
        'C₂H₆O'
        >>> render(parse("SO4-2"))
        'O₄S²⁻'
        >>> render(Formula.EMPTY)
        '<empty>'
    """
    if formula.is_empty:
        return EMPTY_TOKEN
    config = config or DEFAULT_CONFIG
    items = formula.nuclide_items(table or default_table())

    def by_mass(item: Tuple[Isotope, int]) -> int:
        return -item[0].mass_number

    carbons = sorted((i for i in items if i[0].atomic_number == CARBON), key=by_mass)
    hydrogens: List[Tuple[Isotope, int]] = []
    if carbons:
        hydrogens = sorted((i for i in items if i[0].atomic_number == HYDROGEN), key=by_mass)
    leading = {CARBON, HYDROGEN} if carbons else {CARBON}
    rest = sorted(
        (i for i in items if i[0].atomic_number not in leading),
        key=lambda i: (i[0].symbol, -i[0].mass_number),
    )

    text = "".join(_term(isotope, count, config) for isotope, count in carbons + hydrogens + rest)
    if formula.charge:
        text += to_superscript(formula.charge, config, positive_sign=True, postfix_sign=True)
    return text
