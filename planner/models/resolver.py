"""
Effective income and savings rate lookup for a given year.

Yearly adjustments are sparse carry-forward overrides: a value set in year 3
stays in effect until a later year overrides it again. These helpers replay
that rule from the profile alone, independently of any running simulation,
so they can preview what applies to a year that has no override of its own.
"""

from .profile import Profile

_FIELD_NAMES = {
    "income": "income",
    "savings_rate": "savings_rate",
    "savingsRate": "savings_rate",
}


def _normalize_field(field: str) -> str:
    try:
        return _FIELD_NAMES[field]
    except KeyError:
        raise ValueError(
            f"Unknown adjustable field {field!r}, expected 'income' or 'savings_rate'"
        ) from None


def _base_value(profile: Profile, attribute: str) -> float:
    if attribute == "income":
        return profile.annual_income
    return profile.savings_rate


def resolve_effective_value(profile: Profile, year: int, field: str) -> float:
    """
    Resolve the income or savings rate in effect for ``year``.

    Args:
        profile: Profile holding the base values and yearly adjustments
        year: Projection year (1-based)
        field: ``"income"`` or ``"savings_rate"`` (``"savingsRate"`` accepted)

    Returns:
        The year's own override if set, otherwise the most recent earlier
        override, otherwise the profile's base value. Year 0 and earlier
        always resolve to the base value.
    """
    attribute = _normalize_field(field)

    for candidate in range(year, 0, -1):
        adjustment = profile.yearly_adjustments.get(candidate)
        if adjustment is None:
            continue
        value = getattr(adjustment, attribute)
        if value is not None:
            return value

    return _base_value(profile, attribute)


def preview_contribution(profile: Profile, year: int) -> float:
    """Contribution that the effective income and savings rate yield in ``year``."""
    income = resolve_effective_value(profile, year, "income")
    savings_rate = resolve_effective_value(profile, year, "savings_rate")
    return income * savings_rate / 100


def savings_rate_exceeds_income(profile: Profile, year: int) -> bool:
    """Whether the effective savings rate in ``year`` is above 100%."""
    return resolve_effective_value(profile, year, "savings_rate") > 100
