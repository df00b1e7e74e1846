"""
CrewAI Tool Wrappers
FinSight Advisor

Exposes the deterministic advisory functions as CrewAI tools so a host crew
can call them. Every tool returns JSON text. Requires the ``agents`` extra
(crewai).
"""

from __future__ import annotations

import json

from crewai.tools import BaseTool
from pydantic import BaseModel, Field

from finsight_agents.config.constants import (
    DEFAULT_HORIZON_YEARS,
    DEFAULT_RISK_FREE_RATE,
)
from finsight_agents.schemas.allocation_output import Tier
from finsight_agents.tools.allocation_selector import select_allocation
from finsight_agents.tools.intent_responder import match_intent, respond_to_message
from finsight_agents.tools.metrics_calculator import compute_metrics
from finsight_agents.tools.projection_calculator import project_value
from finsight_agents.tools.risk_classifier import classify_risk, clamp_risk_score


# ---------------------------------------------------------------------------
# Risk Tier Classifier
# ---------------------------------------------------------------------------

class RiskClassifierInput(BaseModel):
    score: int = Field(..., description="Risk tolerance score, 1-10 (clamped)")


class RiskClassifierTool(BaseTool):
    """Classify a risk tolerance score into a tier."""

    name: str = "risk_tier_classifier"
    description: str = (
        "Map a 1-10 risk tolerance score to Conservative (<=3), Moderate (4-7) "
        "or Aggressive (>=8). Out-of-range scores are clamped."
    )
    args_schema: type[BaseModel] = RiskClassifierInput

    def _run(self, score: int) -> str:
        clamped, was_clamped = clamp_risk_score(score)
        return json.dumps({
            "score": score,
            "score_used": clamped,
            "clamped": was_clamped,
            "tier": classify_risk(score).value,
        })


# ---------------------------------------------------------------------------
# Allocation Selector + Metrics
# ---------------------------------------------------------------------------

class AllocationInput(BaseModel):
    tier: str = Field(..., description="Conservative, Moderate or Aggressive")
    risk_free_rate: float = Field(
        DEFAULT_RISK_FREE_RATE, description="Annual risk-free rate % for Sharpe"
    )


class AllocationSelectorTool(BaseTool):
    """Return the fixed asset allocation and its metrics for a tier."""

    name: str = "allocation_selector"
    description: str = (
        "Return the fixed 5-asset allocation (US Stocks, International Stocks, "
        "Bonds, Real Estate, Commodities) for a tier, with expected return %, "
        "uncorrelated risk % and Sharpe ratio."
    )
    args_schema: type[BaseModel] = AllocationInput

    def _run(self, tier: str, risk_free_rate: float = DEFAULT_RISK_FREE_RATE) -> str:
        plan = select_allocation(Tier(tier))
        metrics = compute_metrics(plan, risk_free_rate)
        return json.dumps({
            "tier": plan.tier.value,
            "weights": plan.weights,
            "expected_return_pct": metrics.display_expected_return,
            "risk_pct": metrics.display_risk,
            "sharpe_ratio": metrics.display_sharpe,
        })


# ---------------------------------------------------------------------------
# Projection Calculator
# ---------------------------------------------------------------------------

class ProjectionInput(BaseModel):
    amount: float = Field(..., ge=0.0, description="Investment amount (USD)")
    expected_return_pct: float = Field(..., description="Annual return %")
    years: int = Field(DEFAULT_HORIZON_YEARS, ge=0, description="Horizon in years")


class ProjectionTool(BaseTool):
    """Compound an investment amount at a fixed annual return."""

    name: str = "projection_calculator"
    description: str = (
        "Project the future value of an investment compounded annually at "
        "the given expected return over a number of years."
    )
    args_schema: type[BaseModel] = ProjectionInput

    def _run(
        self,
        amount: float,
        expected_return_pct: float,
        years: int = DEFAULT_HORIZON_YEARS,
    ) -> str:
        value = project_value(amount, expected_return_pct, years)
        return json.dumps({
            "amount": amount,
            "expected_return_pct": expected_return_pct,
            "years": years,
            "projected_value": round(value, 2) if value is not None else None,
        })


# ---------------------------------------------------------------------------
# Intent Responder
# ---------------------------------------------------------------------------

class IntentResponderInput(BaseModel):
    utterance: str = Field(..., description="User's chat message")


class IntentResponderTool(BaseTool):
    """Answer a chat message from the keyword rule table."""

    name: str = "intent_responder"
    description: str = (
        "Reply to a user's financial question with the canned advisory "
        "response of the first matching keyword rule, or a fallback."
    )
    args_schema: type[BaseModel] = IntentResponderInput

    def _run(self, utterance: str) -> str:
        rule = match_intent(utterance)
        return json.dumps({
            "intent": rule.name if rule is not None else None,
            "response": respond_to_message(utterance),
        })
