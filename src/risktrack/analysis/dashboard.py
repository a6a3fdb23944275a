"""Assemble a PortfolioReport from a list of risks."""

from __future__ import annotations

from collections.abc import Sequence

from risktrack.analysis.categories import display_category
from risktrack.analysis.estimates import estimate_cost, estimate_schedule
from risktrack.analysis.portfolio import (
    compute_portfolio_mitigated_score,
    compute_portfolio_unmitigated_score,
    count_by_level,
    risk_level_for,
)
from risktrack.analysis.scorer import (
    adjust_existing_rating,
    compute_residual_risk,
    priority_rank_for,
)
from risktrack.models import PortfolioReport, Risk, RiskLevel, ScoredRisk


def score_risk(risk: Risk, levels: Sequence[RiskLevel] | None = None) -> ScoredRisk:
    rating = risk.risk_rating if risk.risk_rating is not None else 0.0
    adjusted = adjust_existing_rating(rating, risk.response_type, risk.risk_status)
    residual = compute_residual_risk(rating, risk.response_type, risk.risk_status)
    category = display_category(residual)
    return ScoredRisk(
        risk=risk,
        residual_rating=residual,
        adjusted_score=adjusted,
        priority_rank=priority_rank_for(adjusted),
        category=category,
        color=category.color,
        level=risk_level_for(residual, levels).name,
        cost=estimate_cost(risk),
        schedule=estimate_schedule(risk),
    )


def build_report(
    risks: Sequence[Risk],
    project_name: str = "",
    source: str = "",
    levels: Sequence[RiskLevel] | None = None,
) -> PortfolioReport:
    """Score every risk and the portfolio as a whole."""
    scored = [score_risk(r, levels) for r in risks]
    mitigated = compute_portfolio_mitigated_score(risks)
    unmitigated = compute_portfolio_unmitigated_score(risks)
    costs = [s.cost for s in scored if s.cost is not None]

    return PortfolioReport(
        project_name=project_name,
        source=source,
        risks=scored,
        mitigated_score=mitigated,
        mitigated_category=display_category(mitigated),
        unmitigated_score=unmitigated,
        unmitigated_category=display_category(unmitigated),
        level_counts=count_by_level(risks, mitigated=False, levels=levels),
        mitigated_level_counts=count_by_level(risks, mitigated=True, levels=levels),
        total_expected_cost=sum(c.expected for c in costs),
        total_emv=sum(c.emv for c in costs),
    )
