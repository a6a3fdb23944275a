"""Single-risk rating and residual scoring."""

from __future__ import annotations

from risktrack.analysis.adjustments import combined_multiplier
from risktrack.models import AdjustedRating
from risktrack.numeric import round_half_up

# (minimum adjusted score, rank), checked top-down
PRIORITY_TIERS: tuple[tuple[float, int], ...] = (
    (64, 1),  # Extreme
    (36, 5),  # High
    (16, 10),  # Moderate
)
LOWEST_PRIORITY_RANK = 20


def calculate_risk_rating(probability: float, impact: float) -> float:
    """Integer-shaped base rating, as stored on a register entry."""
    return round_half_up(probability * impact)


def compute_rating_from_scratch(
    probability: float,
    impact: float,
    response_type: str | None = None,
    risk_status: str | None = None,
) -> float:
    """Adjusted score computed from probability and impact, unrounded."""
    return probability * impact * combined_multiplier(response_type, risk_status)


def adjust_existing_rating(
    risk_rating: float,
    response_type: str | None = None,
    risk_status: str | None = None,
) -> float:
    """Adjusted score for a stored rating, unrounded.

    Exploit responses make the result negative; that value is returned as is.
    """
    return risk_rating * combined_multiplier(response_type, risk_status)


def compute_residual_risk(
    risk_rating: float,
    response_type: str | None,
    risk_status: str | None,
) -> float:
    """Residual rating after mitigation, rounded like a stored rating."""
    return round_half_up(adjust_existing_rating(risk_rating, response_type, risk_status))


def priority_rank_for(adjusted_score: float) -> int:
    """Map an adjusted score to its 1/5/10/20 priority tier."""
    for threshold, rank in PRIORITY_TIERS:
        if adjusted_score >= threshold:
            return rank
    return LOWEST_PRIORITY_RANK


def compute_adjusted_rating(
    probability: float,
    impact: float,
    response_type: str | None,
    risk_status: str | None,
) -> AdjustedRating:
    raw = compute_rating_from_scratch(probability, impact, response_type, risk_status)
    return AdjustedRating(
        adjusted_score=round_half_up(raw),
        priority_rank=priority_rank_for(raw),
    )
