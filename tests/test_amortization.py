"""
Tests for mortgage amortization calculations.

This module tests the closed-form payment and remaining principal formulas
and the yearly schedule built from them.
"""

import pytest

from planner.models.amortization import (
    AmortizationSchedule,
    MortgageCalculator,
    YearlyAmortization,
)


def iterate_balance(principal, annual_rate, term_years, months):
    """Reference balance from month-by-month interest and payment."""
    monthly_rate = annual_rate / 100 / 12
    payment = MortgageCalculator.calculate_monthly_payment(
        principal, annual_rate, term_years
    )
    balance = principal
    for _ in range(months):
        balance = balance * (1 + monthly_rate) - payment
    return balance


class TestMortgageCalculator:
    """Test cases for MortgageCalculator class."""

    def test_calculate_monthly_payment_basic(self):
        """Standard 30-year mortgage: $300,000 at 6% interest."""
        payment = MortgageCalculator.calculate_monthly_payment(
            principal=300000, annual_rate=6, term_years=30
        )

        assert abs(payment - 1798.65) < 0.01

    def test_monthly_payment_is_not_rounded(self):
        payment = MortgageCalculator.calculate_monthly_payment(300000, 6, 30)
        assert payment != round(payment, 2)

    def test_calculate_annual_payment(self):
        monthly = MortgageCalculator.calculate_monthly_payment(250000, 5.5, 20)
        annual = MortgageCalculator.calculate_annual_payment(250000, 5.5, 20)

        assert annual == pytest.approx(monthly * 12)

    def test_zero_interest_makes_no_payment(self):
        """A zero rate produces no payment at all."""
        assert MortgageCalculator.calculate_monthly_payment(300000, 0, 30) == 0.0
        assert MortgageCalculator.calculate_annual_payment(300000, 0, 30) == 0.0

    def test_zero_term_makes_no_payment(self):
        assert MortgageCalculator.calculate_monthly_payment(300000, 6, 0) == 0.0

    def test_zero_principal(self):
        assert MortgageCalculator.calculate_monthly_payment(0, 6, 30) == 0.0

    def test_monthly_rate(self):
        assert MortgageCalculator.monthly_rate(6) == pytest.approx(0.005)


class TestRemainingPrincipal:
    """Test the closed-form remaining principal."""

    def test_no_months_elapsed(self):
        assert (
            MortgageCalculator.calculate_remaining_principal(300000, 6, 30, 0)
            == 300000
        )

    @pytest.mark.parametrize("months", [1, 12, 60, 180, 300, 359])
    def test_matches_month_by_month_iteration(self, months):
        remaining = MortgageCalculator.calculate_remaining_principal(
            300000, 6, 30, months
        )
        expected = iterate_balance(300000, 6, 30, months)

        assert remaining == pytest.approx(expected, rel=1e-9, abs=1e-6)

    def test_zero_at_term_end(self):
        assert MortgageCalculator.calculate_remaining_principal(300000, 6, 30, 360) == 0
        assert MortgageCalculator.calculate_remaining_principal(300000, 6, 30, 400) == 0

    def test_declines_monotonically(self):
        balances = [
            MortgageCalculator.calculate_remaining_principal(200000, 4.5, 15, months)
            for months in range(0, 181, 12)
        ]
        assert balances == sorted(balances, reverse=True)
        assert balances[-1] == 0

    def test_zero_rate_never_decreases(self):
        for months in (0, 12, 120, 360, 1000):
            assert (
                MortgageCalculator.calculate_remaining_principal(
                    160000, 0, 30, months
                )
                == 160000
            )

    def test_floored_at_zero(self):
        remaining = MortgageCalculator.calculate_remaining_principal(
            -10000, 5, 10, 24
        )
        assert remaining == 0.0


class TestEquity:
    """Test equity calculation."""

    def test_positive_equity(self):
        assert MortgageCalculator.calculate_equity(500000, 300000) == 200000

    def test_underwater_equity_is_negative(self):
        assert MortgageCalculator.calculate_equity(250000, 300000) == -50000


class TestYearlySchedule:
    """Test cases for yearly schedule generation."""

    def test_schedule_basic(self):
        schedule = MortgageCalculator.generate_yearly_schedule(100000, 5, 30)

        assert isinstance(schedule, AmortizationSchedule)
        assert len(schedule.years) == 30
        assert all(isinstance(row, YearlyAmortization) for row in schedule.years)
        assert [row.loan_year for row in schedule.years] == list(range(1, 31))
        assert schedule.years[-1].remaining_principal == 0

    def test_principal_paid_sums_to_principal(self):
        schedule = MortgageCalculator.generate_yearly_schedule(100000, 5, 30)

        total_principal = sum(row.principal_paid for row in schedule.years)

        assert total_principal == pytest.approx(100000)
        assert schedule.total_interest == pytest.approx(
            schedule.total_paid - 100000
        )
        assert schedule.total_interest > 0

    def test_interest_share_declines(self):
        schedule = MortgageCalculator.generate_yearly_schedule(100000, 5, 30)
        interest = [row.interest for row in schedule.years]

        assert interest == sorted(interest, reverse=True)

    def test_rows_chain(self):
        schedule = MortgageCalculator.generate_yearly_schedule(250000, 6.5, 15)

        previous = schedule.principal
        for row in schedule.years:
            assert previous - row.principal_paid == pytest.approx(
                row.remaining_principal, abs=1e-6
            )
            assert row.payment == pytest.approx(schedule.monthly_payment * 12)
            previous = row.remaining_principal

    def test_zero_rate_schedule(self):
        schedule = MortgageCalculator.generate_yearly_schedule(120000, 0, 10)

        assert schedule.monthly_payment == 0
        assert all(row.payment == 0 for row in schedule.years)
        assert all(row.remaining_principal == 120000 for row in schedule.years)

    def test_zero_term_schedule(self):
        schedule = MortgageCalculator.generate_yearly_schedule(120000, 5, 0)

        assert schedule.years == []
        assert schedule.total_paid == 0
