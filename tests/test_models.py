"""Tests for Pydantic models."""

import math

from risktrack.models import Category, PortfolioReport, Risk, ScoredRisk


def test_category_lookup_is_case_insensitive():
    assert Category("extreme") is Category.EXTREME
    assert Category(" HIGH ") is Category.HIGH


def test_risk_derives_missing_rating():
    r = Risk(probability=0.55, impact=50)
    # 27.5 rounds half up
    assert r.risk_rating == 28


def test_risk_trusts_stored_rating():
    r = Risk(probability=5, impact=5, risk_rating=70)
    assert r.risk_rating == 70


def test_risk_accepts_camel_case():
    r = Risk.model_validate({
        "riskId": "R-007",
        "priorityRank": 3,
        "riskEvent": "Builder insolvency",
        "probability": 0.6,
        "impact": 80,
        "riskRating": 48,
        "responseType": "Transfer",
        "riskStatus": "Monitoring",
        "mostLikelyCost": 25000,
        "projectId": 12,
    })
    assert r.risk_id == "R-007"
    assert r.priority_rank == 3
    assert r.response_type == "Transfer"
    assert r.risk_status == "Monitoring"
    assert r.has_cost_estimate is True


def test_risk_defaults():
    r = Risk()
    assert r.risk_rating == 0
    assert r.response_type is None
    assert r.risk_status is None
    assert r.has_cost_estimate is False


def test_risk_accepts_nan():
    r = Risk(probability=float("nan"), impact=10)
    assert math.isnan(r.risk_rating)


def _scored(risk_id: str, rank: int, adjusted: float) -> ScoredRisk:
    return ScoredRisk(
        risk=Risk(risk_id=risk_id),
        residual_rating=adjusted,
        adjusted_score=adjusted,
        priority_rank=rank,
        category=Category.LOW,
        color=Category.LOW.color,
        level="Low",
    )


def test_sorted_risks():
    report = PortfolioReport(risks=[
        _scored("c", 10, 20),
        _scored("a", 1, 70),
        _scored("b", 1, 90),
    ])
    assert [s.risk.risk_id for s in report.sorted_risks()] == ["b", "a", "c"]
