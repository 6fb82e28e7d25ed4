"""
DataFrame utilities subpackage - requires polars.
"""

from hillform.df.composition import (
    composition_frame,
    filter_formula,
    DEFAULT_FORMULA_COLUMN,
)

__all__ = [
    "composition_frame",
    "filter_formula",
    "DEFAULT_FORMULA_COLUMN",
]
