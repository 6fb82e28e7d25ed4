"""
Arithmetic over formulas.

All operations are pure and return new Formula values. Scaling converts
the factor to an exact ``Fraction`` once and rounds every scaled count and
the charge independently with round-half-to-even (Python's ``round``).
Counts that round to zero are dropped.
"""

__all__ = ["add", "subtract", "multiply", "divide", "contains"]

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Union

from hillform.errors import FormulaDomainError, FormulaOverflowError
from hillform.formula.model import Formula

Factor = Union[int, float, Decimal, Fraction]


def add(first: Formula, second: Formula) -> Formula:
    """
    Sum the nuclide counts and charges of two formulas.

    No chemical check is made; this is not a reaction.

    Raises:
        FormulaOverflowError: A summed count exceeds 65535 or the summed
            charge leaves the signed 16-bit range

    Example:
        >>> add(Formula({"H:1": 2}), Formula({"H:1": 1, "O:16": 1}))
        Formula({'H:1': 3, 'O:16': 1}, charge=0)
    """
    counts = dict(first.nuclides)
    for key, count in second.nuclides.items():
        counts[key] = counts.get(key, 0) + count
    return Formula(counts, first.charge + second.charge)


def subtract(first: Formula, second: Formula) -> Formula:
    """
    Remove the nuclides of ``second`` from ``first``.

    Nuclides reduced to zero or below are dropped rather than going
    negative, while the charge is subtracted as is. When a count was
    truncated the resulting charge may not match the remaining nuclides;
    check ``contains(first, second)`` first when that matters.

    Example:
        >>> subtract(Formula({"H:1": 2, "O:16": 1}), Formula({"H:1": 3}))
        Formula({'O:16': 1}, charge=0)
    """
    counts = dict(first.nuclides)
    for key, count in second.nuclides.items():
        if key in counts:
            counts[key] = max(counts[key] - count, 0)
    return Formula(counts, first.charge - second.charge)


def contains(first: Formula, second: Formula) -> bool:
    """Check that ``first`` holds every nuclide of ``second`` in equal or greater amount."""
    return all(first.nuclides.get(key, 0) >= count for key, count in second.nuclides.items())


def _as_fraction(value: Factor, name: str) -> Fraction:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    try:
        return Fraction(value)
    except (ValueError, OverflowError) as e:
        raise FormulaDomainError(f"{name} must be finite, got {value!r}") from e


def _scale(formula: Formula, factor: Fraction) -> Formula:
    counts = {key: round(count * factor) for key, count in formula.nuclides.items()}
    charge = round(formula.charge * factor)
    try:
        return Formula(counts, charge)
    except FormulaOverflowError as e:
        raise FormulaOverflowError(f"Scaling by {factor} overflows: {e}") from e


def multiply(formula: Formula, factor: Factor) -> Formula:
    """
    Scale every count and the charge by ``factor``, rounding each to the nearest integer.

    Args:
        formula: Formula to scale
        factor: Non-negative real number

    Raises:
        FormulaDomainError: ``factor`` is negative or not finite
        FormulaOverflowError: A scaled count or the charge is out of range

    Example:
        >>> multiply(Formula({"H:1": 3}), 0.5)
        Formula({'H:1': 2}, charge=0)
    """
    fraction = _as_fraction(factor, "factor")
    if fraction < 0:
        raise FormulaDomainError(f"factor must not be negative, got {factor!r}")
    return _scale(formula, fraction)


def divide(formula: Formula, divisor: Factor) -> Formula:
    """
    Divide every count and the charge by ``divisor``, rounding each to the nearest integer.

    Raises:
        FormulaDomainError: ``divisor`` is zero, negative or not finite
        FormulaOverflowError: A scaled count or the charge is out of range

    Example:
        >>> divide(Formula({"C:12": 6, "H:1": 12}), 6)
        Formula({'C:12': 1, 'H:1': 2}, charge=0)
    """
    fraction = _as_fraction(divisor, "divisor")
    if fraction <= 0:
        raise FormulaDomainError(f"divisor must be greater than zero, got {divisor!r}")
    return _scale(formula, 1 / fraction)
