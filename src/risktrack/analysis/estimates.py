"""PERT cost and schedule estimation."""

from __future__ import annotations

from risktrack.models import CostEstimate, Risk, ScheduleEstimate
from risktrack.numeric import round_to

SHARED_CONTINGENCY = 1.1
BUSINESS_DAYS_PER_CALENDAR_DAY = 5 / 7


def pert_expected(optimistic: float, most_likely: float, pessimistic: float) -> float:
    return (optimistic + 4 * most_likely + pessimistic) / 6


def pert_standard_deviation(optimistic: float, pessimistic: float) -> float:
    return (pessimistic - optimistic) / 6


def pert_variance(optimistic: float, pessimistic: float) -> float:
    return pert_standard_deviation(optimistic, pessimistic) ** 2


def expected_monetary_value(expected_cost: float, probability: float) -> float:
    return round_to(expected_cost * probability, 2)


def recommended_budget(
    expected_cost: float,
    pessimistic: float,
    allocation_model: str | None = None,
    contract_cap: float | None = None,
) -> float:
    """Budget to hold against a risk under its contract allocation model.

    ``internal`` risks budget at the pessimistic value, ``fixedCap`` at the
    agreed cap, and ``shared`` at expected cost plus 10% contingency but never
    above pessimistic. Unknown models fall back to pessimistic.
    """
    if allocation_model == "fixedCap":
        return contract_cap if contract_cap else pessimistic
    if allocation_model == "shared":
        return round_to(min(expected_cost * SHARED_CONTINGENCY, pessimistic), 2)
    return pessimistic


def exposure(risk_rating: float, cost_impact: float) -> float:
    """Cost exposure with the rating read on a 25-point scale."""
    return risk_rating / 25 * cost_impact


def estimate_cost(risk: Risk) -> CostEstimate | None:
    if not risk.has_cost_estimate:
        return None
    o = risk.optimistic_cost or 0.0
    m = risk.most_likely_cost or 0.0
    p = risk.pessimistic_cost or 0.0
    expected = pert_expected(o, m, p)
    return CostEstimate(
        expected=round_to(expected, 2),
        variance=pert_variance(o, p),
        standard_deviation=pert_standard_deviation(o, p),
        emv=expected_monetary_value(expected, risk.probability),
        recommended_budget=recommended_budget(
            expected, p, risk.cost_allocation_model, risk.contract_cap
        ),
    )


def estimate_schedule(risk: Risk) -> ScheduleEstimate | None:
    if risk.most_likely_duration is None:
        return None
    expected = pert_expected(
        risk.optimistic_duration or 0.0,
        risk.most_likely_duration,
        risk.pessimistic_duration or 0.0,
    )
    day_type = (risk.day_type or "calendar").strip().lower()
    estimate = ScheduleEstimate(
        expected_duration=round_to(expected, 1),
        day_type=day_type,
        probability_adjusted_duration=round_to(expected * risk.probability, 1),
    )
    if day_type == "calendar":
        estimate.business_days = round_to(expected * BUSINESS_DAYS_PER_CALENDAR_DAY, 1)
    else:
        estimate.calendar_days = round_to(expected / BUSINESS_DAYS_PER_CALENDAR_DAY, 1)
    return estimate
