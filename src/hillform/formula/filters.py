"""Element-count filters over parsed formulas."""

__all__ = ["ElementRange", "FormulaFilters", "match_filters"]

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Union

from hillform.elements.periodic_table import PeriodicTable
from hillform.formula.model import Formula
from hillform.formula.parse import try_parse


@dataclass(frozen=True)
class ElementRange:
    """Range for element count in a formula."""

    min_val: Optional[int] = None
    max_val: Optional[int] = None

    def is_active(self) -> bool:
        """Check if range filter is active."""
        return self.min_val is not None or self.max_val is not None

    def matches(self, count: int) -> bool:
        """Check if count is within range."""
        if self.min_val is not None and count < self.min_val:
            return False
        if self.max_val is not None and count > self.max_val:
            return False
        return True


@dataclass(frozen=True)
class FormulaFilters:
    """
    Formula filtering criteria.

    Args:
        exact_formula: Formula text the candidate must equal (after parsing)
        ranges: Element symbol to allowed count range
        required: Symbols that must be present
        excluded: Symbols that must be absent
        charge: Exact charge the candidate must carry
    """

    exact_formula: Optional[str] = None
    ranges: Mapping[str, ElementRange] = field(default_factory=dict, hash=False)
    required: FrozenSet[str] = frozenset()
    excluded: FrozenSet[str] = frozenset()
    charge: Optional[int] = None

    def is_active(self) -> bool:
        """Check if any filter is active."""
        if self.exact_formula and self.exact_formula.strip():
            return True
        if any(r.is_active() for r in self.ranges.values()):
            return True
        return bool(self.required or self.excluded) or self.charge is not None


def match_filters(
    formula: Union[Formula, str],
    filters: FormulaFilters,
    table: Optional[PeriodicTable] = None,
) -> bool:
    """
    Check if a formula matches all filter criteria.

    Formula text that does not parse never matches; empty text always does.

    Example:
        >>> filters = FormulaFilters(ranges={"C": ElementRange(1, 6)}, excluded=frozenset({"Cl"}))
        >>> match_filters("C6H12O6", filters)
        True
        >>> match_filters("C6H5Cl", filters)
        False
    """
    if isinstance(formula, str):
        if not formula.strip():
            return True
        parsed = try_parse(formula, table)
        if parsed is None:
            return False
        formula = parsed

    if filters.exact_formula and filters.exact_formula.strip():
        return formula == try_parse(filters.exact_formula.strip(), table)

    if filters.charge is not None and formula.charge != filters.charge:
        return False
    if any(formula.count_element(symbol) == 0 for symbol in filters.required):
        return False
    if any(formula.count_element(symbol) > 0 for symbol in filters.excluded):
        return False
    return all(
        element_range.matches(formula.count_element(symbol))
        for symbol, element_range in filters.ranges.items()
    )
