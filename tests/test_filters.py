"""Tests for formula filtering."""

import pytest

from hillform.formula import ElementRange, FormulaFilters, match_filters
from hillform.formula.parse_cached import parse_cached


class TestElementRange:
    def test_inactive(self):
        assert not ElementRange().is_active()
        assert ElementRange().matches(1000)

    @pytest.mark.parametrize(
        "element_range, count, expected",
        [
            (ElementRange(1, 6), 0, False),
            (ElementRange(1, 6), 1, True),
            (ElementRange(1, 6), 6, True),
            (ElementRange(1, 6), 7, False),
            (ElementRange(min_val=2), 100, True),
            (ElementRange(max_val=2), 3, False),
        ],
    )
    def test_matches(self, element_range, count, expected):
        assert element_range.is_active()
        assert element_range.matches(count) is expected


class TestFormulaFilters:
    def test_inactive_by_default(self):
        assert not FormulaFilters().is_active()
        assert not FormulaFilters(exact_formula="  ").is_active()
        assert not FormulaFilters(ranges={"C": ElementRange()}).is_active()

    @pytest.mark.parametrize(
        "filters",
        [
            FormulaFilters(exact_formula="H2O"),
            FormulaFilters(ranges={"C": ElementRange(1, 2)}),
            FormulaFilters(required=frozenset({"N"})),
            FormulaFilters(excluded=frozenset({"Cl"})),
            FormulaFilters(charge=0),
        ],
    )
    def test_active(self, filters):
        assert filters.is_active()


class TestMatchFilters:
    def test_ranges(self, table):
        filters = FormulaFilters(ranges={"C": ElementRange(1, 6), "H": ElementRange(max_val=12)})
        assert match_filters("C6H12O6", filters, table)
        assert not match_filters("C7H8", filters, table)
        assert not match_filters("H2O", filters, table)

    def test_range_counts_all_isotopes(self, table):
        filters = FormulaFilters(ranges={"H": ElementRange(min_val=3)})
        assert match_filters("{2}HH2O", filters, table)

    def test_required_and_excluded(self, table):
        filters = FormulaFilters(required=frozenset({"N"}), excluded=frozenset({"Cl"}))
        assert match_filters("NH3", filters, table)
        assert not match_filters("NH4Cl", filters, table)
        assert not match_filters("CH4", filters, table)

    def test_charge(self, p, table):
        filters = FormulaFilters(charge=-2)
        assert match_filters(p("SO4-2"), filters, table)
        assert not match_filters(p("SO4"), filters, table)

    def test_exact_formula_ignores_notation(self, table):
        filters = FormulaFilters(exact_formula="OHC2H5")
        assert match_filters("C2H6O", filters, table)
        assert match_filters("C₂H₆O", filters, table)
        assert not match_filters("C2H6O+", filters, table)

    def test_empty_text_matches(self, table):
        assert match_filters("", FormulaFilters(charge=3), table)

    def test_unparseable_text_never_matches(self, table):
        assert not match_filters("Xx", FormulaFilters(), table)


def test_parse_cached():
    assert parse_cached("") is None
    assert parse_cached("Xq") is None
    first = parse_cached("H2O")
    assert first is parse_cached("H2O")
    assert first.nuclides["H:1"] == 2
