"""Risk scoring engine. Every function here is pure and never raises."""

from risktrack.analysis.adjustments import (
    resolve_response_multiplier,
    resolve_status_multiplier,
)
from risktrack.analysis.categories import (
    classify_board_approved,
    classify_category_weight,
    color_for,
)
from risktrack.analysis.portfolio import (
    compute_portfolio_mitigated_score,
    compute_portfolio_unmitigated_score,
    count_by_level,
)
from risktrack.analysis.scorer import (
    adjust_existing_rating,
    compute_adjusted_rating,
    compute_rating_from_scratch,
    compute_residual_risk,
)

__all__ = [
    "adjust_existing_rating",
    "classify_board_approved",
    "classify_category_weight",
    "color_for",
    "compute_adjusted_rating",
    "compute_portfolio_mitigated_score",
    "compute_portfolio_unmitigated_score",
    "compute_rating_from_scratch",
    "compute_residual_risk",
    "count_by_level",
    "resolve_response_multiplier",
    "resolve_status_multiplier",
]
