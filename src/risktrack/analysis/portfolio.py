"""Portfolio aggregation: mitigated/unmitigated scores and level counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from risktrack.analysis.adjustments import (
    resolve_response_multiplier,
    resolve_status_multiplier,
)
from risktrack.analysis.categories import classify_board_approved
from risktrack.analysis.scorer import compute_residual_risk
from risktrack.models import DEFAULT_RISK_LEVELS, Category, LevelCounts, Risk, RiskLevel
from risktrack.numeric import round_half_up

MAX_SCORE = 100.0
HIGH_RISKS_FOR_OVERRIDE = 2


def _is_active(risk: Risk) -> bool:
    # Override rules only consider risks marked Active or left blank; Open does not count.
    return (risk.risk_status or "").strip().lower() in ("", "active")


def _rating(risk: Risk) -> float:
    return risk.risk_rating if risk.risk_rating is not None else 0.0


def compute_portfolio_mitigated_score(risks: Sequence[Risk]) -> float:
    """Category-weighted portfolio score with executive override rules applied.

    Fully avoided, closed, or eventuated risks carry no weight. Each remaining
    risk contributes the weight of its board-approved category. Any active
    Extreme risk sets the result to the Extreme weight; failing that,
    two or more active High risks lift it to at least the High weight.
    """
    weighted_sum = 0.0
    counted = 0
    extreme_active = 0
    high_active = 0

    for risk in risks:
        response_adj = resolve_response_multiplier(risk.response_type)
        status_adj = resolve_status_multiplier(risk.risk_status)
        if response_adj * status_adj == 0:
            continue

        category = classify_board_approved(_rating(risk) * response_adj * status_adj)
        weighted_sum += category.weight
        counted += 1

        if _is_active(risk):
            if category is Category.EXTREME:
                extreme_active += 1
            elif category is Category.HIGH:
                high_active += 1

    overall = round_half_up(weighted_sum / counted) if counted else 0.0

    if extreme_active:
        # The average of category weights tops out at the Extreme weight; only
        # half-up rounding can push it past, so the override pins it there.
        overall = Category.EXTREME.weight
    elif high_active >= HIGH_RISKS_FOR_OVERRIDE:
        overall = max(overall, Category.HIGH.weight)

    return min(overall, MAX_SCORE)


def compute_portfolio_unmitigated_score(risks: Sequence[Risk]) -> float:
    """Plain mean of stored ratings across every risk, capped at 100."""
    if not risks:
        return 0.0
    mean = sum(_rating(r) for r in risks) / len(risks)
    return min(round_half_up(mean), MAX_SCORE)


def risk_level_for(rating: float, levels: Sequence[RiskLevel] | None = None) -> RiskLevel:
    """Row of the level table containing ``rating``; the Low row if none does."""
    table = levels or DEFAULT_RISK_LEVELS
    for level in table:
        if level.contains(rating):
            return level
    return next((lv for lv in table if lv.name.lower() == "low"), table[-1])


def count_by_level(
    risks: Iterable[Risk],
    mitigated: bool = False,
    levels: Sequence[RiskLevel] | None = None,
) -> LevelCounts:
    """Bucket every risk by the level table, optionally after adjustment."""
    counts: dict[str, int] = {}
    total = 0
    for risk in risks:
        rating = _rating(risk)
        if mitigated:
            rating = compute_residual_risk(rating, risk.response_type, risk.risk_status)
        name = risk_level_for(rating, levels).name.lower()
        counts[name] = counts.get(name, 0) + 1
        total += 1
    return LevelCounts(
        extreme=counts.get("extreme", 0),
        high=counts.get("high", 0),
        moderate=counts.get("moderate", 0),
        low=counts.get("low", 0),
        total=total,
    )


def count_risks_by_level(
    risks: Iterable[Risk], levels: Sequence[RiskLevel] | None = None
) -> LevelCounts:
    return count_by_level(risks, mitigated=False, levels=levels)


def count_mitigated_risks_by_level(
    risks: Iterable[Risk], levels: Sequence[RiskLevel] | None = None
) -> LevelCounts:
    return count_by_level(risks, mitigated=True, levels=levels)
