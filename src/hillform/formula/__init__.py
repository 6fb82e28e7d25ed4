"""
Formula subpackage - the Formula value and its operations.

- model:        Formula (immutable nuclide counts plus charge)
- parse:        parse, try_parse
- parse_cached: parse_cached
- arithmetic:   add, subtract, multiply, divide, contains
- render:       render (Hill notation)
- filters:      ElementRange, FormulaFilters, match_filters
"""

from hillform.formula.model import Formula

from hillform.formula.parse import (
    parse,
    try_parse,
)

from hillform.formula.parse_cached import parse_cached

from hillform.formula.arithmetic import (
    add,
    subtract,
    multiply,
    divide,
    contains,
)

from hillform.formula.render import render

from hillform.formula.filters import (
    ElementRange,
    FormulaFilters,
    match_filters,
)

__all__ = [
    # model
    "Formula",
    # parse
    "parse",
    "try_parse",
    "parse_cached",
    # arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "contains",
    # render
    "render",
    # filters
    "ElementRange",
    "FormulaFilters",
    "match_filters",
]
