"""Compound-interest schedule calculation logic."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple, Union

from simulator.schemas.amortization import (
    AmortizationRequest,
    AmortizationResponse,
    PeriodUnit,
    RateUnit,
    ScheduleRow,
    Summary,
)

logger = logging.getLogger(__name__)

FILL_IN_MESSAGE = "Fill in all fields correctly before calculating."


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def normalize_rate(rate: float, rate_unit: RateUnit) -> float:
    """Convert a percentage rate into a per-month decimal fraction.

    Annual rates use the geometric conversion, so twelve months at the
    returned rate compound back to exactly the stated annual rate.
    """
    if rate_unit == RateUnit.ANNUAL:
        return (1 + rate / 100) ** (1 / 12) - 1
    return rate / 100


def normalize_periods(periods: int, period_unit: PeriodUnit) -> int:
    if period_unit == PeriodUnit.YEARS:
        return periods * 12
    return periods


def _coerce_unit(value: Union[str, RateUnit, PeriodUnit], enum_cls, label: str, errors: List[str]):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        errors.append(f"{label} must be one of: {allowed}")
        return None


def _validate(
    principal: float,
    monthly_contribution: float,
    rate: float,
    periods: Union[int, float],
) -> List[str]:
    errors: List[str] = []

    for label, value in (
        ("principal", principal),
        ("monthly_contribution", monthly_contribution),
        ("rate", rate),
        ("periods", periods),
    ):
        if not math.isfinite(value):
            errors.append(f"{label} must be a finite number")

    if math.isfinite(rate) and rate <= 0:
        errors.append("rate must be greater than zero")

    if math.isfinite(periods):
        if periods != int(periods):
            errors.append("periods must be a whole number")
        elif periods <= 0:
            errors.append("periods must be greater than zero")

    return errors


def compute_schedule(
    principal: float,
    monthly_contribution: float,
    rate: float,
    rate_unit: Union[str, RateUnit],
    periods: int,
    period_unit: Union[str, PeriodUnit],
) -> Tuple[List[ScheduleRow], Summary]:
    """
    Project a compound-interest investment month by month.

    Order of operations (per month, 0..total_months inclusive):
      1) Apply interest to the running balance.
      2) Record the row; cumulative_invested is the value BEFORE this month's contribution.
      3) Add the monthly contribution to the balance.
      4) Count the contribution as invested, except in the last month.

    The last month's contribution reaches the running balance but is left out of
    total_invested, matching the figures the calculator has always reported.
    """
    errors = _validate(principal, monthly_contribution, rate, periods)
    rate_unit = _coerce_unit(rate_unit, RateUnit, "rate_unit", errors)
    period_unit = _coerce_unit(period_unit, PeriodUnit, "period_unit", errors)
    if errors:
        raise InvalidInputError(errors)

    monthly_rate = normalize_rate(rate, rate_unit)
    total_months = normalize_periods(int(periods), period_unit)
    if total_months <= 0:
        raise InvalidInputError(["duration must cover at least one month"])

    current_value = float(principal)
    total_invested = float(principal)
    total_interest = 0.0

    rows: List[ScheduleRow] = []
    for month in range(total_months + 1):
        interest = current_value * monthly_rate
        total_interest += interest

        rows.append(
            ScheduleRow(
                month=month,
                interest_this_month=interest,
                cumulative_invested=total_invested,
                cumulative_interest=total_interest,
                balance_after_interest=current_value + interest,
                invested_plus_interest=total_invested + total_interest,
            )
        )

        current_value = current_value + interest + monthly_contribution
        if month < total_months:
            total_invested += monthly_contribution

    final_value = rows[total_months].balance_after_interest
    if not all(math.isfinite(value) for value in (final_value, total_invested, total_interest)):
        raise InvalidInputError(["result exceeds representable range"])

    summary = Summary(
        final_value=final_value,
        total_invested=total_invested,
        total_interest=total_interest,
    )

    logger.debug(
        "computed %d months at monthly rate %.10f: final=%.2f invested=%.2f interest=%.2f",
        total_months,
        monthly_rate,
        summary.final_value,
        summary.total_invested,
        summary.total_interest,
    )
    return rows, summary


def closed_form_final_value(
    principal: float,
    monthly_contribution: float,
    monthly_rate: float,
    total_months: int,
) -> float:
    """Final balance of compute_schedule without building the schedule.

    Interest is applied in every one of the total_months + 1 rows while each
    contribution lands after that month's interest, so the annuity term is
    shifted by one compounding step.
    """
    if monthly_rate == 0:
        return principal + monthly_contribution * total_months

    growth = (1 + monthly_rate) ** total_months
    return (
        principal * growth * (1 + monthly_rate)
        + monthly_contribution * (1 + monthly_rate) * (growth - 1) / monthly_rate
    )


def calculate_amortization_schedule(request: AmortizationRequest) -> AmortizationResponse:
    """Compute the schedule for a validated API request."""
    rows, summary = compute_schedule(
        principal=request.principal,
        monthly_contribution=request.monthly_contribution,
        rate=request.rate,
        rate_unit=request.rate_unit,
        periods=request.periods,
        period_unit=request.period_unit,
    )
    return AmortizationResponse(
        rows=rows,
        summary=summary,
        monthly_rate=normalize_rate(request.rate, request.rate_unit),
        total_months=len(rows) - 1,
    )
