"""Exceptions raised by the formula engine."""

__all__ = [
    "FormulaError",
    "FormulaParseError",
    "FormulaDomainError",
    "FormulaOverflowError",
    "UnknownIsotopeError",
]

from typing import Optional


class FormulaError(Exception):
    """Base class for all formula engine errors."""


class FormulaParseError(FormulaError, ValueError):
    """Formula text could not be parsed."""

    def __init__(self, text: Optional[str], position: Optional[int] = None):
        self.text = text
        self.position = position
        message = f"Could not parse formula {text!r}"
        if position is not None:
            message += f" (at position {position})"
        super().__init__(message)


class FormulaDomainError(FormulaError, ValueError):
    """Invalid scalar argument to a formula operation."""


class FormulaOverflowError(FormulaError, OverflowError):
    """A nuclide count or charge left its representable range."""


class UnknownIsotopeError(FormulaError, KeyError):
    """An isotope key does not name an isotope in the periodic table."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
