"""Data contracts for compound-interest schedules."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RateUnit(str, Enum):
    ANNUAL = "annual"
    MONTHLY = "monthly"


class PeriodUnit(str, Enum):
    YEARS = "years"
    MONTHS = "months"


class AmortizationRequest(BaseModel):
    """Inputs required to compute a compound-interest schedule."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(0.0, ge=0, description="Initial deposit at month 0.")
    monthly_contribution: float = Field(
        0.0,
        ge=0,
        description="Amount added to the balance after interest every month.",
    )
    rate: float = Field(
        ...,
        description="Interest rate as a percentage (e.g. 12 for 12%), unit given by rate_unit.",
    )
    rate_unit: RateUnit = RateUnit.ANNUAL
    periods: int = Field(..., description="Duration, unit given by period_unit.")
    period_unit: PeriodUnit = PeriodUnit.YEARS


class ScheduleRow(BaseModel):
    """Single month of a compound-interest schedule."""

    month: int = Field(..., ge=0)
    interest_this_month: float
    # value before this month's contribution is added
    cumulative_invested: float
    cumulative_interest: float
    balance_after_interest: float
    invested_plus_interest: float


class Summary(BaseModel):
    final_value: float
    total_invested: float
    total_interest: float


class AmortizationResponse(BaseModel):
    """Projected schedule plus the totals shown next to it."""

    rows: List[ScheduleRow]
    summary: Summary
    monthly_rate: float
    total_months: int = Field(..., ge=1)
