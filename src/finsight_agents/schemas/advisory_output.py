"""
Portfolio Advisor — Output Schema
FinSight Advisor

Output contract for one advisory pipeline run. Bundles the allocation plan,
its metrics and projection with the dashboard content derived from the
profile (summary cards, alerts, key insights) and the issues recovered along
the way.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from finsight_agents.exceptions import PipelineIssue
from finsight_agents.schemas.allocation_output import (
    AllocationPlan,
    AssetDollarAllocation,
    Tier,
)
from finsight_agents.schemas.metrics_output import PortfolioMetrics, ProjectionResult
from finsight_agents.schemas.profile_input import FinancialProfile


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STANDARD_CAVEATS: list[str] = [
    "Return and risk figures are static long-run assumptions, not forecasts",
    "Portfolio risk assumes zero correlation between asset classes",
    "Projections compound a fixed annual rate and ignore fees, taxes and inflation",
    "Past performance does not predict future results",
]


# ---------------------------------------------------------------------------
# Supporting Models
# ---------------------------------------------------------------------------

class SummaryCard(BaseModel):
    """One headline figure on the results page."""

    title: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)


class Alert(BaseModel):
    """Actionable notice derived from the profile."""

    kind: Literal["info", "warning", "success"]
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=10)


class KeyInsight(BaseModel):
    """Plain-language takeaway from the analysis."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=30)
    impact: Literal["High", "Medium", "Low"]


# ---------------------------------------------------------------------------
# Top-Level Output
# ---------------------------------------------------------------------------

class AdvisoryReport(BaseModel):
    """Everything the host needs to render one profile's recommendation."""

    profile: FinancialProfile
    risk_score_input: int = Field(..., description="Risk tolerance as submitted")
    risk_score_used: int = Field(..., ge=1, le=10, description="Risk tolerance after clamping")
    tier: Tier
    plan: AllocationPlan
    dollar_allocation: List[AssetDollarAllocation] = Field(..., min_length=1)
    metrics: PortfolioMetrics
    projection: ProjectionResult
    investment_to_income_pct: Optional[float] = Field(
        None, description="Investment amount as % of annual income; None when income is 0"
    )
    summary_cards: List[SummaryCard] = Field(..., min_length=4, max_length=4)
    alerts: List[Alert] = Field(default_factory=list)
    key_insights: List[KeyInsight] = Field(default_factory=list)
    issues: List[PipelineIssue] = Field(default_factory=list)
    caveats: List[str] = Field(default_factory=lambda: list(STANDARD_CAVEATS))
    analysis_date: str = Field(..., description="ISO date of the analysis")
    summary: str = Field(..., min_length=30)

    @field_validator("dollar_allocation")
    @classmethod
    def validate_dollar_allocation_weights(
        cls, v: List[AssetDollarAllocation]
    ) -> List[AssetDollarAllocation]:
        total = sum(a.weight_pct for a in v)
        if total != 100:
            raise ValueError(f"dollar_allocation weights sum to {total}%, expected 100%")
        return v

    @property
    def has_warnings(self) -> bool:
        return any(i.severity.value in ("critical", "warning") for i in self.issues)
