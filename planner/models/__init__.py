"""Net worth projection models and engine."""

from .amortization import AmortizationSchedule, MortgageCalculator, YearlyAmortization
from .formatting import CurrencyFormatter
from .matrix import ProjectionMatrix, build_projection_matrix, classify_balance
from .profile import Event, MortgageEvent, OneTimeEvent, Profile, YearlyAdjustment
from .projection import (
    EventAnnotation,
    MortgageEquity,
    YearRecord,
    project_balance,
    project_trajectory,
    round_currency,
)
from .resolver import (
    preview_contribution,
    resolve_effective_value,
    savings_rate_exceeds_income,
)

__all__ = [
    "Profile",
    "YearlyAdjustment",
    "Event",
    "OneTimeEvent",
    "MortgageEvent",
    "AmortizationSchedule",
    "MortgageCalculator",
    "YearlyAmortization",
    "CurrencyFormatter",
    "EventAnnotation",
    "MortgageEquity",
    "YearRecord",
    "project_balance",
    "project_trajectory",
    "round_currency",
    "ProjectionMatrix",
    "build_projection_matrix",
    "classify_balance",
    "resolve_effective_value",
    "preview_contribution",
    "savings_rate_exceeds_income",
]
