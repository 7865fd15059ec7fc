"""
Display formatting for currency amounts and percentages.

Used for the human-readable event annotations of a trajectory and for the
compact millions display of the projection matrix.
"""

from typing import Optional

from pydantic import BaseModel, Field


class CurrencyFormatter(BaseModel):
    """Formats currency and percentage values for display."""

    currency_symbol: str = Field(default="$", description="Currency symbol")
    decimal_places: int = Field(
        default=2, ge=0, le=10, description="Maximum number of decimal places"
    )
    thousands_separator: str = Field(default=",", description="Thousands separator")
    show_currency_symbol: bool = Field(
        default=True, description="Whether to show currency symbol"
    )

    def format_number(self, value: float) -> str:
        """
        Format a number with thousands separators.

        Whole values are shown without decimals; fractional values keep up to
        ``decimal_places`` digits with trailing zeros removed.
        """
        rounded = round(value, self.decimal_places)
        if float(rounded).is_integer():
            formatted = f"{int(rounded):,}"
        else:
            formatted = f"{rounded:,.{self.decimal_places}f}".rstrip("0").rstrip(".")

        if self.thousands_separator != ",":
            formatted = formatted.replace(",", self.thousands_separator)
        return formatted

    def format_currency(self, amount: float, show_symbol: Optional[bool] = None) -> str:
        """
        Format a currency amount for display.

        Args:
            amount: The amount to format
            show_symbol: Override the default symbol display setting

        Returns:
            Formatted currency string, e.g. ``$50,000`` or ``-$1,250.5``
        """
        show_symbol = (
            show_symbol if show_symbol is not None else self.show_currency_symbol
        )
        sign = "-" if amount < 0 else ""
        formatted = self.format_number(abs(amount))
        if show_symbol:
            return f"{sign}{self.currency_symbol}{formatted}"
        return f"{sign}{formatted}"

    def format_percentage(self, rate: float) -> str:
        """Format a percentage given in percent units (7.5 -> ``7.5%``)."""
        return f"{self.format_number(rate)}%"

    def format_millions(self, amount: float) -> str:
        """Format an amount in millions with two decimals (``$1.23M``)."""
        return f"{self.currency_symbol}{amount / 1_000_000:.2f}M"
