"""Unified data models for risk records and portfolio reports."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from risktrack.numeric import round_half_up


class Category(StrEnum):
    EXTREME = "Extreme"
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"

    @classmethod
    def _missing_(cls, value: object) -> Category | None:
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None

    @property
    def color(self) -> str:
        return {
            Category.EXTREME: "#DC3545",
            Category.HIGH: "#FD7E14",
            Category.MODERATE: "#FFC107",
            Category.LOW: "#28A745",
        }[self]

    @property
    def weight(self) -> float:
        """Midpoint of the category's 25-point band."""
        return {
            Category.EXTREME: 87.5,
            Category.HIGH: 62.5,
            Category.MODERATE: 37.5,
            Category.LOW: 12.5,
        }[self]


class RiskLevel(BaseModel):
    """One row of the risk-rating level table."""

    name: str
    min_rating: float
    max_rating: float
    color: str

    def contains(self, rating: float) -> bool:
        return self.min_rating <= rating <= self.max_rating


DEFAULT_RISK_LEVELS: tuple[RiskLevel, ...] = (
    RiskLevel(name="Extreme", min_rating=64, max_rating=100, color="#DC3545"),
    RiskLevel(name="High", min_rating=36, max_rating=63, color="#FD7E14"),
    RiskLevel(name="Moderate", min_rating=16, max_rating=35, color="#FFC107"),
    RiskLevel(name="Low", min_rating=0, max_rating=15, color="#28A745"),
)


class Risk(BaseModel):
    """A single risk register entry.

    Field names follow Python conventions but the camelCase names used by the
    register REST API are accepted as aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    risk_id: str = ""
    priority_rank: int | None = None
    risk_event: str = ""
    risk_category: str = ""
    owned_by: str = ""
    probability: float = 0.0
    impact: float = 0.0
    risk_rating: float | None = None
    response_type: str | None = None
    risk_status: str | None = None

    # PERT cost estimation
    optimistic_cost: float | None = None
    most_likely_cost: float | None = None
    pessimistic_cost: float | None = None
    cost_allocation_model: str | None = None
    contract_cap: float | None = None

    # PERT schedule estimation
    day_type: str | None = None
    optimistic_duration: float | None = None
    most_likely_duration: float | None = None
    pessimistic_duration: float | None = None

    @model_validator(mode="after")
    def derive_rating(self) -> Risk:
        # Stored ratings are trusted; only fill in the ones the register omitted.
        if self.risk_rating is None:
            self.risk_rating = round_half_up(self.probability * self.impact)
        return self

    @property
    def has_cost_estimate(self) -> bool:
        return self.most_likely_cost is not None


class AdjustedRating(BaseModel):
    """Adjusted score and its priority tier for one risk."""

    adjusted_score: float
    priority_rank: int


class LevelCounts(BaseModel):
    """Risk counts per level of the risk-rating table."""

    extreme: int = 0
    high: int = 0
    moderate: int = 0
    low: int = 0
    total: int = 0


class CostEstimate(BaseModel):
    """PERT cost figures for a single risk."""

    expected: float
    variance: float
    standard_deviation: float
    emv: float
    recommended_budget: float


class ScheduleEstimate(BaseModel):
    """PERT schedule figures for a single risk."""

    expected_duration: float
    day_type: str = "calendar"
    business_days: float | None = None
    calendar_days: float | None = None
    probability_adjusted_duration: float


class ScoredRisk(BaseModel):
    """A risk together with every figure derived from it."""

    risk: Risk
    residual_rating: float
    adjusted_score: float
    priority_rank: int
    category: Category
    color: str
    level: str
    cost: CostEstimate | None = None
    schedule: ScheduleEstimate | None = None


class PortfolioReport(BaseModel):
    """Complete result of scoring one risk register."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    project_name: str = ""
    source: str = ""
    risks: list[ScoredRisk] = Field(default_factory=list)
    mitigated_score: float = 0
    mitigated_category: Category = Category.LOW
    unmitigated_score: float = 0
    unmitigated_category: Category = Category.LOW
    level_counts: LevelCounts = Field(default_factory=LevelCounts)
    mitigated_level_counts: LevelCounts = Field(default_factory=LevelCounts)
    total_expected_cost: float = 0.0
    total_emv: float = 0.0

    def sorted_risks(self) -> list[ScoredRisk]:
        """Return risks by priority tier, highest adjusted score first within a tier."""
        return sorted(self.risks, key=lambda r: (r.priority_rank, -r.adjusted_score))
