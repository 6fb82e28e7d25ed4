"""
Command line interface.

    python -m hillform parse "CuSO4.5H2O"
    python -m hillform mass "C6H12O6"
    python -m hillform add "H2O" "H+"
    python -m hillform multiply "C6H12O6" 0.5
    python -m hillform parse "{2}H2O" --verbose
"""

__all__ = ["FormulaCLI", "main"]

import sys
from typing import Dict, List, Optional

import fire
from loguru import logger

from hillform.config import FormatConfig
from hillform.errors import FormulaError
from hillform.formula import arithmetic
from hillform.formula.model import Formula
from hillform.formula.parse import parse
from hillform.formula.render import render


def configure_logging(verbose: bool = False) -> None:
    """Send hillform log records to stderr, at DEBUG when verbose."""
    logger.remove()
    logger.enable("hillform")
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


class FormulaCLI:
    """Parse, render and combine chemical formulas."""

    def __init__(self, verbose: bool = False):
        configure_logging(verbose)
        self._config = FormatConfig.from_env()

    def _read(self, text) -> Formula:
        # fire converts numeric-looking arguments, formulas are always text
        return parse(str(text), config=self._config)

    def _show(self, formula: Formula) -> str:
        return render(formula, config=self._config)

    def parse(self, text: str) -> str:
        """Print a formula in Hill notation."""
        return self._show(self._read(text))

    def mass(self, text: str) -> Dict[str, float]:
        """Print the average and monoisotopic mass of a formula."""
        formula = self._read(text)
        return {
            "average": round(formula.average_mass(), 6),
            "monoisotopic": round(formula.monoisotopic_mass(), 6),
        }

    def add(self, first: str, second: str) -> str:
        """Print the sum of two formulas."""
        return self._show(arithmetic.add(self._read(first), self._read(second)))

    def subtract(self, first: str, second: str) -> str:
        """Print the difference of two formulas."""
        minuend, subtrahend = self._read(first), self._read(second)
        if not arithmetic.contains(minuend, subtrahend):
            logger.warning(f"{first} does not contain {second}; counts were truncated")
        return self._show(arithmetic.subtract(minuend, subtrahend))

    def multiply(self, text: str, factor: float) -> str:
        """Print a formula scaled by a factor."""
        return self._show(arithmetic.multiply(self._read(text), float(factor)))

    def divide(self, text: str, divisor: float) -> str:
        """Print a formula divided by a divisor."""
        return self._show(arithmetic.divide(self._read(text), float(divisor)))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI, returning a process exit status."""
    try:
        fire.Fire(FormulaCLI, command=argv, name="hillform")
    except (FormulaError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0
