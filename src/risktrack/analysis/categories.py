"""Score-to-category classifiers and display colors.

Two threshold schemes are in use and they intentionally disagree:

* board-approved (80/60/40) drives the portfolio override rules;
* category-weight (75/50/25) drives per-risk cards and dashboard bands.

A score of 79 is ``High`` under the first and ``Extreme`` under the second.
"""

from __future__ import annotations

from risktrack.models import Category

BOARD_APPROVED_THRESHOLDS: tuple[tuple[float, Category], ...] = (
    (80, Category.EXTREME),
    (60, Category.HIGH),
    (40, Category.MODERATE),
)

# Lower edge of each category's 25-point band
CATEGORY_WEIGHT_THRESHOLDS: tuple[tuple[float, Category], ...] = tuple(
    (c.weight - 12.5, c) for c in (Category.EXTREME, Category.HIGH, Category.MODERATE)
)


def _classify(score: float, thresholds: tuple[tuple[float, Category], ...]) -> Category:
    for threshold, category in thresholds:
        if score >= threshold:
            return category
    return Category.LOW


def classify_board_approved(score: float) -> Category:
    return _classify(score, BOARD_APPROVED_THRESHOLDS)


def classify_category_weight(score: float) -> Category:
    return _classify(score, CATEGORY_WEIGHT_THRESHOLDS)


# Mitigated and unmitigated scores share the category-weight scheme; only the
# score that is fed in differs.
classify_mitigated = classify_category_weight
classify_unmitigated = classify_category_weight


def color_for(category: Category | str) -> str:
    """Hex color for a category name."""
    return Category(category).color


def board_approved_color(score: float) -> str:
    return color_for(classify_board_approved(score))


def category_weight_color(score: float) -> str:
    return color_for(classify_category_weight(score))


def display_category(score: float) -> Category:
    """Category-weight classification for display, with negative scores floored at 0."""
    return classify_category_weight(max(score, 0.0))


def display_color(score: float) -> str:
    return color_for(display_category(score))
