"""
DataFrame helpers for formula columns - requires polars.
"""

__all__ = [
    "composition_frame",
    "filter_formula",
    "DEFAULT_FORMULA_COLUMN",
]

from typing import Iterable, Optional

import polars as pl

from hillform.elements.periodic_table import PeriodicTable, default_table
from hillform.formula.filters import FormulaFilters, match_filters
from hillform.formula.parse import try_parse
from hillform.formula.render import render

DEFAULT_FORMULA_COLUMN: str = "mf"

COMPOSITION_SCHEMA = {
    "formula": pl.Utf8,
    "hill": pl.Utf8,
    "atoms": pl.Int64,
    "charge": pl.Int64,
    "average_mass": pl.Float64,
    "monoisotopic_mass": pl.Float64,
    "valid": pl.Boolean,
}


def composition_frame(
    formulas: Iterable[Optional[str]],
    table: Optional[PeriodicTable] = None,
) -> pl.DataFrame:
    """
    Tabulate formula strings, one row per input.

    Args:
        formulas: Formula texts; entries that do not parse get null values
            and ``valid`` set to False
        table: Periodic table (default: RDKit-backed)

    Returns:
        DataFrame with columns formula, hill, atoms, charge, average_mass,
        monoisotopic_mass, valid

    Example:
        >>> composition_frame(["H2O", "Xx"]).get_column("valid").to_list()
        [True, False]
    """
    table = table or default_table()
    columns: dict = {name: [] for name in COMPOSITION_SCHEMA}
    for text in formulas:
        parsed = try_parse(text, table)
        columns["formula"].append(text)
        columns["valid"].append(parsed is not None)
        if parsed is None:
            for name in ("hill", "atoms", "charge", "average_mass", "monoisotopic_mass"):
                columns[name].append(None)
            continue
        columns["hill"].append(render(parsed, table))
        columns["atoms"].append(parsed.number_of_atoms)
        columns["charge"].append(parsed.charge)
        columns["average_mass"].append(parsed.average_mass(table))
        columns["monoisotopic_mass"].append(parsed.monoisotopic_mass(table))
    return pl.DataFrame(columns, schema=COMPOSITION_SCHEMA)


def filter_formula(
    df: pl.DataFrame,
    filters: FormulaFilters,
    column: str = DEFAULT_FORMULA_COLUMN,
    table: Optional[PeriodicTable] = None,
) -> pl.DataFrame:
    """Filter DataFrame rows by formula criteria on ``column``."""
    if column not in df.columns:
        return df
    if not filters.is_active():
        return df

    mask = [
        match_filters(value or "", filters, table)
        for value in df.get_column(column).to_list()
    ]
    return df.filter(pl.Series(mask, dtype=pl.Boolean))
