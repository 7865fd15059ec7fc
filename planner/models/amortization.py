"""
Mortgage amortization calculations for net worth projections.

Payments and balances come from the closed-form annuity formulas, so the
remaining principal for any elapsed month count is exact and independent of
how many years were simulated before it. Rates are annual percentages.
"""

from typing import List

from pydantic import BaseModel, Field


class YearlyAmortization(BaseModel):
    """Totals for one loan year."""

    loan_year: int = Field(..., ge=1, description="Loan year (1-based)")
    payment: float = Field(..., description="Total paid during the year")
    interest: float = Field(..., description="Interest portion of the payments")
    principal_paid: float = Field(..., description="Principal repaid during the year")
    remaining_principal: float = Field(
        ..., description="Principal outstanding at year end"
    )


class AmortizationSchedule(BaseModel):
    """Year-by-year schedule for a fixed-rate mortgage."""

    principal: float = Field(..., description="Amount borrowed")
    interest_rate: float = Field(..., description="Annual interest rate (percent)")
    term_years: int = Field(..., description="Loan term in years")
    monthly_payment: float = Field(..., description="Fixed monthly payment")
    years: List[YearlyAmortization] = Field(
        default_factory=list, description="One row per loan year"
    )

    @property
    def total_paid(self) -> float:
        return sum(row.payment for row in self.years)

    @property
    def total_interest(self) -> float:
        return sum(row.interest for row in self.years)


class MortgageCalculator:
    """Calculator for fixed-payment mortgage cash flows."""

    @staticmethod
    def monthly_rate(annual_rate: float) -> float:
        """Convert an annual percentage rate to a monthly decimal rate."""
        return annual_rate / 100 / 12

    @staticmethod
    def calculate_monthly_payment(
        principal: float, annual_rate: float, term_years: int
    ) -> float:
        """
        Calculate the fixed monthly payment using the annuity formula.

        Args:
            principal: Loan principal amount
            annual_rate: Annual interest rate as a percentage (6.5 for 6.5%)
            term_years: Loan term in years

        Returns:
            Monthly payment amount. Zero when the rate or the term is zero.
        """
        monthly_rate = MortgageCalculator.monthly_rate(annual_rate)
        # A zero rate makes no payments at all; the principal stays outstanding.
        if monthly_rate == 0 or term_years <= 0:
            return 0.0

        num_payments = term_years * 12
        growth = (1 + monthly_rate) ** num_payments
        return principal * monthly_rate * growth / (growth - 1)

    @staticmethod
    def calculate_annual_payment(
        principal: float, annual_rate: float, term_years: int
    ) -> float:
        """Total of twelve monthly payments."""
        return (
            MortgageCalculator.calculate_monthly_payment(
                principal, annual_rate, term_years
            )
            * 12
        )

    @staticmethod
    def calculate_remaining_principal(
        principal: float, annual_rate: float, term_years: int, months_elapsed: int
    ) -> float:
        """
        Calculate the principal outstanding after a number of monthly payments.

        Args:
            principal: Loan principal amount
            annual_rate: Annual interest rate as a percentage
            term_years: Loan term in years
            months_elapsed: Number of payments already made

        Returns:
            Remaining principal, floored at zero
        """
        monthly_rate = MortgageCalculator.monthly_rate(annual_rate)
        if monthly_rate == 0 or term_years <= 0:
            return principal
        if months_elapsed <= 0:
            return principal

        num_payments = term_years * 12
        if months_elapsed >= num_payments:
            return 0.0

        growth_n = (1 + monthly_rate) ** num_payments
        growth_k = (1 + monthly_rate) ** months_elapsed
        remaining = principal * (growth_n - growth_k) / (growth_n - 1)
        return max(0.0, remaining)

    @staticmethod
    def calculate_equity(home_value: float, remaining_principal: float) -> float:
        """Home value minus outstanding principal. Negative when underwater."""
        return home_value - remaining_principal

    @staticmethod
    def generate_yearly_schedule(
        principal: float, annual_rate: float, term_years: int
    ) -> AmortizationSchedule:
        """
        Generate a year-by-year amortization schedule.

        Args:
            principal: Loan principal amount
            annual_rate: Annual interest rate as a percentage
            term_years: Loan term in years

        Returns:
            Schedule with one row per loan year
        """
        monthly_payment = MortgageCalculator.calculate_monthly_payment(
            principal, annual_rate, term_years
        )
        annual_payment = monthly_payment * 12

        rows = []
        balance = principal
        for loan_year in range(1, term_years + 1):
            remaining = MortgageCalculator.calculate_remaining_principal(
                principal, annual_rate, term_years, loan_year * 12
            )
            principal_paid = balance - remaining
            rows.append(
                YearlyAmortization(
                    loan_year=loan_year,
                    payment=annual_payment,
                    interest=annual_payment - principal_paid,
                    principal_paid=principal_paid,
                    remaining_principal=remaining,
                )
            )
            balance = remaining

        return AmortizationSchedule(
            principal=principal,
            interest_rate=annual_rate,
            term_years=term_years,
            monthly_payment=monthly_payment,
            years=rows,
        )
