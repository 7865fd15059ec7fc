"""
Projection matrix of terminal balances by return rate and horizon.

Rows are return rates, columns are horizons in years. Each cell is an
independent ``project_balance`` query, tagged with a display tier so that
balances above the configured thresholds can be highlighted.
"""

from typing import Any, Dict, List, Literal, Optional, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .formatting import CurrencyFormatter
from .profile import Profile
from .projection import project_balance

BalanceTier = Literal["green", "yellow", "neutral"]

DEFAULT_GREEN_THRESHOLD = 2_000_000.0
DEFAULT_YELLOW_THRESHOLD = 1_000_000.0


def classify_balance(
    balance: float,
    green_threshold: float = DEFAULT_GREEN_THRESHOLD,
    yellow_threshold: float = DEFAULT_YELLOW_THRESHOLD,
) -> BalanceTier:
    """Tier a balance against the highlight thresholds (strictly above)."""
    if balance > green_threshold:
        return "green"
    if balance > yellow_threshold:
        return "yellow"
    return "neutral"


class ProjectionMatrix(BaseModel):
    """Terminal balances for every (return rate, years) pair."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    year_options: List[int] = Field(..., description="Horizons (columns)")
    return_rate_options: List[float] = Field(..., description="Return rates (rows)")
    # Shape (len(return_rate_options), len(year_options))
    balances: np.ndarray = Field(..., description="Terminal balances")
    green_threshold: float = Field(default=DEFAULT_GREEN_THRESHOLD)
    yellow_threshold: float = Field(default=DEFAULT_YELLOW_THRESHOLD)

    @model_validator(mode="after")
    def validate_shape(self):
        expected = (len(self.return_rate_options), len(self.year_options))
        if self.balances.shape != expected:
            raise ValueError(
                f"Balances shape {self.balances.shape} does not match {expected}"
            )
        return self

    def cell(self, years: int, return_rate: float) -> int:
        """Terminal balance for one horizon and return rate."""
        try:
            row = self.return_rate_options.index(return_rate)
            column = self.year_options.index(years)
        except ValueError:
            raise KeyError(f"No cell for {years} years at {return_rate}%") from None
        return int(self.balances[row, column])

    def tier(self, years: int, return_rate: float) -> BalanceTier:
        return classify_balance(
            self.cell(years, return_rate), self.green_threshold, self.yellow_threshold
        )

    def to_rows(
        self, formatter: Optional[CurrencyFormatter] = None
    ) -> List[Dict[str, Any]]:
        """Serialize to one JSON-friendly row per return rate."""
        formatter = formatter or CurrencyFormatter()
        rows = []
        for row_index, rate in enumerate(self.return_rate_options):
            cells = []
            for column_index, years in enumerate(self.year_options):
                balance = int(self.balances[row_index, column_index])
                cells.append(
                    {
                        "years": years,
                        "balance": balance,
                        "display": formatter.format_millions(balance),
                        "tier": classify_balance(
                            balance, self.green_threshold, self.yellow_threshold
                        ),
                    }
                )
            rows.append({"returnRate": rate, "cells": cells})
        return rows


def build_projection_matrix(
    profile: Profile,
    year_options: Sequence[int],
    return_rate_options: Sequence[float],
    green_threshold: float = DEFAULT_GREEN_THRESHOLD,
    yellow_threshold: float = DEFAULT_YELLOW_THRESHOLD,
) -> ProjectionMatrix:
    """
    Compute terminal balances for every horizon and return rate.

    Args:
        profile: Profile to project
        year_options: Horizons in years (columns)
        return_rate_options: Annual returns as percentages (rows)
        green_threshold: Balance above which a cell is tiered green
        yellow_threshold: Balance above which a cell is tiered yellow

    Returns:
        ProjectionMatrix with a balance array of Python ints
    """
    # Object dtype keeps the exact Python ints; large balances overflow int64.
    balances = np.zeros((len(return_rate_options), len(year_options)), dtype=object)
    for row, rate in enumerate(return_rate_options):
        for column, years in enumerate(year_options):
            balances[row, column] = project_balance(profile, years, rate)

    return ProjectionMatrix(
        year_options=list(year_options),
        return_rate_options=list(return_rate_options),
        balances=balances,
        green_threshold=green_threshold,
        yellow_threshold=yellow_threshold,
    )
