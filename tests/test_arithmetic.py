"""Tests for formula arithmetic."""

from decimal import Decimal
from fractions import Fraction

import pytest

from hillform.errors import FormulaDomainError, FormulaOverflowError
from hillform.formula import Formula, add, contains, divide, multiply, subtract


class TestAdd:
    def test_counts_and_charge_sum(self, p):
        assert add(p("H2O"), p("H+")) == p("H3O+")
        assert p("Na+") + p("Cl-") == p("NaCl")

    def test_empty_is_identity(self, p):
        assert add(p("H2O"), Formula.EMPTY) == p("H2O")

    def test_commutative(self, p):
        assert add(p("H2O"), p("CO2")) == add(p("CO2"), p("H2O"))

    def test_count_overflow(self):
        with pytest.raises(FormulaOverflowError):
            add(Formula({"H:1": 65535}), Formula({"H:1": 1}))

    def test_charge_overflow(self):
        with pytest.raises(FormulaOverflowError):
            add(Formula(charge=32767), Formula(charge=1))

    def test_rejects_non_formula(self, p):
        with pytest.raises(TypeError):
            p("H2O") + 1


class TestSubtract:
    def test_inverse_of_add(self, p):
        water, co2 = p("H2O"), p("CO2")
        assert subtract(add(water, co2), co2) == water
        assert (water + co2) - co2 == water

    def test_truncates_at_zero(self, p):
        assert subtract(p("H2O"), p("H3")) == p("O")
        assert subtract(p("H2O"), p("N")) == p("H2O")

    def test_charge_subtracted(self, p):
        assert subtract(p("H3O+"), p("H+")) == p("H2O")
        assert subtract(p("H2O"), p("H+")) == p("HO-")


class TestContains:
    def test_contains(self, p):
        assert contains(p("C6H12O6"), p("CH2O"))
        assert contains(p("H2O"), Formula.EMPTY)
        assert not contains(p("H2O"), p("H2O2"))
        assert not contains(p("H2O"), p("{2}H"))


class TestScale:
    def test_multiply_integer(self, p):
        assert multiply(p("CH2O"), 6) == p("C6H12O6")
        assert p("H2O") * 2 == p("H4O2")
        assert 2 * p("H2O") == p("H4O2")

    def test_multiply_by_one_and_zero(self, p):
        assert multiply(p("SO4-2"), 1) == p("SO4-2")
        assert multiply(p("SO4-2"), 0) == Formula.EMPTY

    def test_multiply_scales_charge(self, p):
        assert multiply(p("SO4-2"), 2).charge == -4

    @pytest.mark.parametrize(
        "factor", [0.5, Decimal("0.5"), Fraction(1, 2)], ids=["float", "decimal", "fraction"]
    )
    def test_multiply_exact_factor_types(self, factor):
        assert multiply(Formula({"H:1": 3, "O:16": 4}), factor) == Formula({"H:1": 2, "O:16": 2})

    def test_round_half_to_even(self):
        assert divide(Formula({"H:1": 5}), 2) == Formula({"H:1": 2})
        assert divide(Formula({"H:1": 7}), 2) == Formula({"H:1": 4})
        assert divide(Formula(charge=-2), 4) == Formula.EMPTY

    def test_counts_rounding_to_zero_are_dropped(self):
        assert Formula({"H:1": 1, "O:16": 4}) / 4 == Formula({"O:16": 1})

    def test_divide_inverts_multiply(self, p):
        assert divide(multiply(p("C6H12O6"), 3), 3) == p("C6H12O6")
        assert divide(p("C6H12O6"), 6) == p("CH2O")

    @pytest.mark.parametrize("factor", [-1, -0.5, float("nan"), float("inf"), Decimal("NaN")])
    def test_multiply_domain(self, p, factor):
        with pytest.raises(FormulaDomainError):
            multiply(p("H2O"), factor)

    @pytest.mark.parametrize("divisor", [0, -2, 0.0, float("nan")])
    def test_divide_domain(self, p, divisor):
        with pytest.raises(FormulaDomainError):
            divide(p("H2O"), divisor)

    @pytest.mark.parametrize("factor", ["2", None, True, 1j])
    def test_non_real_factor(self, p, factor):
        with pytest.raises(TypeError):
            multiply(p("H2O"), factor)

    def test_multiply_overflow(self):
        with pytest.raises(FormulaOverflowError):
            multiply(Formula({"H:1": 40000}), 2)
        with pytest.raises(FormulaOverflowError):
            multiply(Formula(charge=-20000), 2)

    def test_domain_error_is_not_overflow(self, p):
        with pytest.raises(FormulaDomainError) as excinfo:
            multiply(p("H2O"), -1)
        assert not isinstance(excinfo.value, OverflowError)
