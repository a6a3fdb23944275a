"""Tests for single-risk rating and residual scoring."""

import math

import pytest

from risktrack.analysis.scorer import (
    adjust_existing_rating,
    calculate_risk_rating,
    compute_adjusted_rating,
    compute_rating_from_scratch,
    compute_residual_risk,
    priority_rank_for,
)
from risktrack.models import AdjustedRating


def test_boundary_at_top_tier():
    result = compute_adjusted_rating(0.8, 80, "Accept", "Open")
    assert result == AdjustedRating(adjusted_score=64, priority_rank=1)


@pytest.mark.parametrize(
    "probability,impact",
    [(0, 0), (1, 1), (3, 7), (0.55, 50), (0.35, 90), (10, 10), (2.5, 0.5)],
)
def test_accept_open_is_rounded_base(probability, impact):
    result = compute_adjusted_rating(probability, impact, "Accept", "Open")
    assert result.adjusted_score == math.floor(probability * impact + 0.5)


@pytest.mark.parametrize("status", ["Active", "Monitoring", "Closed", None, "whatever"])
def test_avoid_zeroes_everything(status):
    assert compute_adjusted_rating(9, 95, "Avoid", status).adjusted_score == 0


def test_priority_tiers():
    assert priority_rank_for(100) == 1
    assert priority_rank_for(64) == 1
    assert priority_rank_for(63.9) == 5
    assert priority_rank_for(36) == 5
    assert priority_rank_for(35.9) == 10
    assert priority_rank_for(16) == 10
    assert priority_rank_for(15.9) == 20
    assert priority_rank_for(-27) == 20


def test_rank_uses_unrounded_score():
    # 7.95 * 8 = 63.6 rounds to 64 but ranks as High
    result = compute_adjusted_rating(7.95, 8, None, None)
    assert result.adjusted_score == 64
    assert result.priority_rank == 5


def test_mitigate_monitoring():
    # 50 * 0.6 * 0.8 = 24
    assert compute_residual_risk(50, "Mitigate", "Monitoring") == 24
    assert compute_adjusted_rating(5, 10, "Mitigate", "Monitoring").priority_rank == 10


def test_residual_keeps_exploit_negative():
    assert compute_residual_risk(50, "Exploit", "Active") == -15
    assert adjust_existing_rating(50, "exploit", None) == pytest.approx(-15.0)


def test_residual_defaults():
    assert compute_residual_risk(42, None, None) == 42


def test_two_entry_points_agree_on_consistent_rating():
    from_scratch = compute_rating_from_scratch(6, 8, "Transfer", "In Progress")
    existing = adjust_existing_rating(48, "Transfer", "In Progress")
    assert from_scratch == pytest.approx(existing)


def test_existing_rating_is_trusted():
    # Stored rating 70 disagrees with 5 * 5; the stored value wins.
    assert adjust_existing_rating(70, "Accept", "Active") == 70
    assert compute_rating_from_scratch(5, 5, "Accept", "Active") == 25


def test_calculate_risk_rating_rounds_half_up():
    assert calculate_risk_rating(0.5, 5) == 3
    assert calculate_risk_rating(4, 9) == 36


def test_nan_propagates():
    result = compute_adjusted_rating(float("nan"), 50, "Accept", "Open")
    assert math.isnan(result.adjusted_score)
    assert result.priority_rank == 20
    assert math.isnan(compute_residual_risk(float("nan"), "Mitigate", None))
