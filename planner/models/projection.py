"""
Net worth projection engine.

This module advances a liquid balance year by year under compounding growth,
level contributions, carry-forward income and savings rate overrides, one-time
purchases and amortizing mortgages. The equity of every mortgaged home is
merged with the liquid balance into the headline net worth.

Each year is applied in a fixed order: growth, overrides, contribution,
events, then net worth. All arithmetic runs on unrounded floats; amounts are
rounded to whole currency units only when a record or balance is emitted.
"""

import logging
import math
from typing import Dict, Iterator, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .amortization import MortgageCalculator
from .formatting import CurrencyFormatter
from .profile import EventId, MortgageEvent, OneTimeEvent, Profile

logger = logging.getLogger(__name__)

_LABELS = CurrencyFormatter()


def round_currency(amount: float) -> int:
    """Round half-up to a whole currency unit."""
    return int(math.floor(amount + 0.5))


class EventAnnotation(BaseModel):
    """Human-readable note about something that happened in a year."""

    type: Literal["income", "savings", "purchase", "mortgage_down", "mortgage_payment"]
    label: str


class MortgageEquity(BaseModel):
    """Emitted equity breakdown for one mortgage, in whole currency units."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    home_value: int = Field(..., alias="homeValue")
    remaining_principal: int = Field(..., alias="remainingPrincipal")
    equity: int


class YearRecord(BaseModel):
    """Projected position at the end of one year."""

    model_config = ConfigDict(populate_by_name=True)

    year: int = Field(..., ge=0, description="Projection year, 0 is the start")
    balance: int = Field(..., description="Liquid balance plus total equity")
    liquid_balance: int = Field(..., alias="liquidBalance")
    total_equity: int = Field(default=0, alias="totalEquity")
    mortgage_equities: Dict[EventId, MortgageEquity] = Field(
        default_factory=dict, alias="mortgageEquities"
    )
    events: List[EventAnnotation] = Field(default_factory=list)


class MortgageEquityState(BaseModel):
    """Running home value and outstanding principal of one mortgage."""

    description: str
    home_value: float
    remaining_principal: float

    @property
    def equity(self) -> float:
        return MortgageCalculator.calculate_equity(
            self.home_value, self.remaining_principal
        )


class ProjectionState(BaseModel):
    """Mutable state threaded through the year loop of a single query."""

    liquid_balance: float
    current_income: float
    current_savings_rate: float
    equities: Dict[EventId, MortgageEquityState] = Field(default_factory=dict)

    @classmethod
    def initial(cls, profile: Profile) -> "ProjectionState":
        return cls(
            liquid_balance=profile.initial_savings,
            current_income=profile.annual_income,
            current_savings_rate=profile.savings_rate,
        )

    @property
    def total_equity(self) -> float:
        return sum(state.equity for state in self.equities.values())

    @property
    def net_worth(self) -> float:
        return self.liquid_balance + self.total_equity


def _apply_growth(state: ProjectionState, return_rate: float) -> None:
    # Non-positive balances are left alone rather than compounded.
    if state.liquid_balance > 0:
        state.liquid_balance *= 1 + return_rate / 100


def _apply_adjustments(
    profile: Profile, state: ProjectionState, year: int
) -> List[EventAnnotation]:
    annotations = []
    adjustment = profile.yearly_adjustments.get(year)
    if adjustment is None:
        return annotations

    if adjustment.income is not None:
        state.current_income = adjustment.income
        annotations.append(
            EventAnnotation(
                type="income",
                label=f"Income: {_LABELS.format_currency(adjustment.income)}",
            )
        )
    if adjustment.savings_rate is not None:
        state.current_savings_rate = adjustment.savings_rate
        annotations.append(
            EventAnnotation(
                type="savings",
                label=f"Savings Rate: {_LABELS.format_percentage(adjustment.savings_rate)}",
            )
        )
    return annotations


def _apply_contribution(state: ProjectionState) -> None:
    state.liquid_balance += state.current_income * state.current_savings_rate / 100


def _apply_purchase(
    event: OneTimeEvent, state: ProjectionState, year: int
) -> List[EventAnnotation]:
    if event.year != year:
        return []
    state.liquid_balance -= event.amount
    name = event.description or "Purchase"
    return [
        EventAnnotation(
            type="purchase",
            label=f"{name}: -{_LABELS.format_currency(event.amount)}",
        )
    ]


def _apply_mortgage(
    event: MortgageEvent, state: ProjectionState, year: int
) -> List[EventAnnotation]:
    annotations = []
    name = event.description or "Mortgage"

    if event.year == year:
        state.liquid_balance -= event.down_payment
        state.equities[event.id] = MortgageEquityState(
            description=name,
            home_value=event.house_cost,
            remaining_principal=event.principal,
        )
        annotations.append(
            EventAnnotation(
                type="mortgage_down",
                label=f"{name}: down payment -{_LABELS.format_currency(event.down_payment)}",
            )
        )

    equity_state = state.equities.get(event.id)
    if equity_state is None or not event.is_active(year):
        return annotations

    annual_payment = MortgageCalculator.calculate_annual_payment(
        event.principal, event.interest_rate, event.mortgage_term
    )
    if annual_payment == 0:
        # Zero-rate loans are never paid down.
        logger.debug(f"Mortgage {event.id!r} has no payment due in year {year}")
        return annotations

    state.liquid_balance -= annual_payment
    months_elapsed = (year - event.year + 1) * 12
    equity_state.remaining_principal = MortgageCalculator.calculate_remaining_principal(
        event.principal, event.interest_rate, event.mortgage_term, months_elapsed
    )
    annotations.append(
        EventAnnotation(
            type="mortgage_payment",
            label=(
                f"{name} payment: "
                f"-{_LABELS.format_currency(round_currency(annual_payment))}/yr"
            ),
        )
    )
    return annotations


def _appreciate_homes(state: ProjectionState, return_rate: float) -> None:
    for equity_state in state.equities.values():
        equity_state.home_value *= 1 + return_rate / 100


def advance_year(
    profile: Profile, state: ProjectionState, year: int, return_rate: float
) -> List[EventAnnotation]:
    """
    Apply one year of growth, overrides, contribution and events to ``state``.

    Args:
        profile: Profile being projected
        state: Running state, updated in place
        year: Year being simulated (1-based)
        return_rate: Annual return as a percentage

    Returns:
        Annotations describing the overrides and events applied this year
    """
    annotations: List[EventAnnotation] = []

    _apply_growth(state, return_rate)

    if profile.advanced_mode:
        annotations.extend(_apply_adjustments(profile, state, year))

    _apply_contribution(state)

    if profile.advanced_mode:
        for event in profile.events:
            if isinstance(event, OneTimeEvent):
                annotations.extend(_apply_purchase(event, state, year))
            elif isinstance(event, MortgageEvent):
                annotations.extend(_apply_mortgage(event, state, year))
        _appreciate_homes(state, return_rate)

    return annotations


def _simulate(
    profile: Profile, years: int, return_rate: float
) -> Iterator[Tuple[int, ProjectionState, List[EventAnnotation]]]:
    if years < 0:
        raise ValueError(f"years must be >= 0, got {years}")

    logger.debug(
        f"Projecting {years} years at {return_rate}% "
        f"(advanced_mode={profile.advanced_mode})"
    )
    state = ProjectionState.initial(profile)
    yield 0, state, []
    for year in range(1, years + 1):
        annotations = advance_year(profile, state, year, return_rate)
        yield year, state, annotations


def _to_record(
    year: int, state: ProjectionState, annotations: List[EventAnnotation]
) -> YearRecord:
    mortgage_equities = {
        event_id: MortgageEquity(
            description=equity_state.description,
            home_value=round_currency(equity_state.home_value),
            remaining_principal=round_currency(equity_state.remaining_principal),
            equity=round_currency(equity_state.equity),
        )
        for event_id, equity_state in state.equities.items()
    }
    return YearRecord(
        year=year,
        balance=round_currency(state.net_worth),
        liquid_balance=round_currency(state.liquid_balance),
        total_equity=round_currency(state.total_equity),
        mortgage_equities=mortgage_equities,
        events=annotations,
    )


def project_balance(profile: Profile, years: int, return_rate: float) -> int:
    """
    Project the net worth at the end of ``years``.

    Args:
        profile: Profile to project
        years: Horizon in years (0 returns the rounded initial savings)
        return_rate: Annual return as a percentage

    Returns:
        Liquid balance plus mortgage equity, rounded to a whole unit

    Raises:
        ValueError: If ``years`` is negative
    """
    net_worth = profile.initial_savings
    for _, state, _ in _simulate(profile, years, return_rate):
        net_worth = state.net_worth
    return round_currency(net_worth)


def project_trajectory(
    profile: Profile, years: int, return_rate: float
) -> List[YearRecord]:
    """
    Project the year-by-year trajectory from year 0 to ``years`` inclusive.

    Args:
        profile: Profile to project
        years: Horizon in years
        return_rate: Annual return as a percentage

    Returns:
        ``years + 1`` records with balances, equity breakdown and annotations

    Raises:
        ValueError: If ``years`` is negative
    """
    return [
        _to_record(year, state, annotations)
        for year, state, annotations in _simulate(profile, years, return_rate)
    ]
