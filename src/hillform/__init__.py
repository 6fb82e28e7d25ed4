"""
hillform - Chemical formula parsing, arithmetic and Hill-notation rendering.

This package is organized into focused subpackages:

- text/      Formula text scanning (no dependencies)
             - digits: classify_digit, to_subscript, to_superscript
             - numbers: scan_number
             - symbols: scan_symbol

- elements/  Isotope records and periodic table (requires rdkit)
             - isotope: Element, Isotope, isotope_key
             - periodic_table: PeriodicTable, default_table

- formula/   The Formula value
             - model: Formula
             - parse: parse, try_parse, parse_cached
             - arithmetic: add, subtract, multiply, divide, contains
             - render: render
             - filters: ElementRange, FormulaFilters, match_filters

- df/        DataFrame utilities (requires polars)
             - composition: composition_frame, filter_formula

The library logs through loguru and is disabled by default; enable it
with ``logger.enable("hillform")``.

Usage:
    from hillform import parse, render
    water = parse("H2O")
    render(water * 2)  # 'H₄O₂'
"""

__version__ = "0.1.0"

from loguru import logger

# records stay silent until an application calls logger.enable("hillform")
logger.disable("hillform")

from hillform.config import (
    FormatConfig,
    DEFAULT_CONFIG,
)

from hillform.errors import (
    FormulaError,
    FormulaParseError,
    FormulaDomainError,
    FormulaOverflowError,
    UnknownIsotopeError,
)

from hillform.elements import (
    Element,
    Isotope,
    PeriodicTable,
    default_table,
)

from hillform.formula import (
    Formula,
    parse,
    try_parse,
    parse_cached,
    add,
    subtract,
    multiply,
    divide,
    contains,
    render,
    ElementRange,
    FormulaFilters,
    match_filters,
)

__all__ = [
    "__version__",
    # config
    "FormatConfig",
    "DEFAULT_CONFIG",
    # errors
    "FormulaError",
    "FormulaParseError",
    "FormulaDomainError",
    "FormulaOverflowError",
    "UnknownIsotopeError",
    # elements
    "Element",
    "Isotope",
    "PeriodicTable",
    "default_table",
    # formula
    "Formula",
    "parse",
    "try_parse",
    "parse_cached",
    "add",
    "subtract",
    "multiply",
    "divide",
    "contains",
    "render",
    "ElementRange",
    "FormulaFilters",
    "match_filters",
]
