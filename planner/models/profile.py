"""
Pydantic models for net worth planning profiles.

A profile is the complete input snapshot for one projection query: the base
income, savings and savings rate, plus the sparse per-year overrides and the
discrete events that are applied when advanced mode is switched on. The same
models define the serialized schema used for persistence and share links, so
every field carries the camelCase alias used on the wire.
"""

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

EventId = Union[int, str]


class YearlyAdjustment(BaseModel):
    """Income and/or savings rate override that takes effect in one year."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    income: Optional[float] = Field(
        default=None, description="New annual income from this year onwards"
    )
    savings_rate: Optional[float] = Field(
        default=None,
        alias="savingsRate",
        description="New savings rate (percent) from this year onwards",
    )


class OneTimeEvent(BaseModel):
    """One-shot purchase deducted from the liquid balance."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["one_time"] = Field(default="one_time", description="Event type")
    id: EventId = Field(..., description="Unique event identifier")
    year: int = Field(..., description="Year the purchase happens (1-based)")
    amount: float = Field(..., description="Amount deducted from the balance")
    description: str = Field(default="", description="Purchase description")


class MortgageEvent(BaseModel):
    """Home purchase financed with a fixed-rate amortizing mortgage.

    Missing numeric sub-fields default to zero. A zero term never produces
    payments and a zero rate never reduces the principal.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: Literal["mortgage"] = Field(default="mortgage", description="Event type")
    id: EventId = Field(..., description="Unique event identifier")
    year: int = Field(..., description="Origination year (1-based)")
    house_cost: float = Field(default=0, alias="houseCost", description="House price")
    down_payment: float = Field(
        default=0, alias="downPayment", description="Cash paid at origination"
    )
    interest_rate: float = Field(
        default=0, alias="interestRate", description="Annual interest rate (percent)"
    )
    mortgage_term: int = Field(
        default=0, alias="mortgageTerm", description="Loan term in years"
    )
    description: str = Field(default="", description="Mortgage description")

    @property
    def principal(self) -> float:
        """Amount borrowed at origination."""
        return self.house_cost - self.down_payment

    @property
    def final_payment_year(self) -> int:
        """Last year in which a payment is due."""
        return self.year + self.mortgage_term - 1

    def is_active(self, year: int) -> bool:
        """Whether a payment falls due in ``year``."""
        return self.year <= year < self.year + self.mortgage_term


Event = Annotated[Union[OneTimeEvent, MortgageEvent], Field(discriminator="type")]


class Profile(BaseModel):
    """Complete, immutable input snapshot for a projection query."""

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "annualIncome": 100000,
                "initialSavings": 10000,
                "savingsRate": 20,
                "advancedMode": True,
                "yearlyAdjustments": {"3": {"savingsRate": 30}},
                "events": [
                    {
                        "type": "one_time",
                        "id": 1,
                        "year": 5,
                        "amount": 50000,
                        "description": "Car",
                    },
                    {
                        "type": "mortgage",
                        "id": 2,
                        "year": 8,
                        "houseCost": 500000,
                        "downPayment": 100000,
                        "interestRate": 6.5,
                        "mortgageTerm": 30,
                        "description": "House",
                    },
                ],
            }
        },
    )

    annual_income: float = Field(..., alias="annualIncome", description="Base income")
    initial_savings: float = Field(
        ..., alias="initialSavings", description="Liquid balance at year 0"
    )
    savings_rate: float = Field(
        ..., alias="savingsRate", description="Base savings rate (percent)"
    )
    advanced_mode: bool = Field(
        default=False,
        alias="advancedMode",
        description="Apply yearly adjustments and events",
    )
    yearly_adjustments: Dict[int, YearlyAdjustment] = Field(
        default_factory=dict,
        alias="yearlyAdjustments",
        description="Sparse carry-forward overrides keyed by year",
    )
    events: List[Event] = Field(
        default_factory=list, description="Purchases and mortgages in apply order"
    )

    @model_validator(mode="after")
    def validate_unique_event_ids(self):
        # Ids are JSON object keys in trajectory output, so 1 and "1" collide.
        seen = set()
        for event in self.events:
            key = str(event.id)
            if key in seen:
                raise ValueError(f"Duplicate event id: {event.id!r}")
            seen.add(key)
        return self

    @property
    def mortgages(self) -> List[MortgageEvent]:
        """Mortgage events in list order."""
        return [event for event in self.events if isinstance(event, MortgageEvent)]

    def events_in_year(self, year: int) -> List[Union[OneTimeEvent, MortgageEvent]]:
        """Events originating in ``year``, in list order."""
        return [event for event in self.events if event.year == year]
