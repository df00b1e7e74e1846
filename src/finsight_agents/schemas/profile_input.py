"""
Financial Profile — Input Schema
FinSight Advisor

Input contract for one profile submission. The host form collects these
fields; the advisory pipeline consumes the profile once and never mutates it.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TIME_HORIZONS: tuple[str, ...] = ("short", "medium", "long")
EXPERIENCE_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")
EMERGENCY_FUND_STATUSES: tuple[str, ...] = ("none", "partial", "adequate", "excellent")
DEBT_STATUSES: tuple[str, ...] = ("none", "low", "moderate", "high")

# Numeric fields the form must supply before any computation runs
REQUIRED_NUMERIC_FIELDS: tuple[str, ...] = ("age", "annual_income", "investment_amount")

TimeHorizon = Literal["short", "medium", "long"]
Experience = Literal["beginner", "intermediate", "advanced"]
EmergencyFundStatus = Literal["none", "partial", "adequate", "excellent"]
DebtStatus = Literal["none", "low", "moderate", "high"]


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

class FinancialProfile(BaseModel):
    """Self-reported financial profile. Immutable once submitted."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., ge=0, description="Age in years")
    annual_income: float = Field(..., ge=0.0, description="Annual income (USD)")
    investment_amount: float = Field(..., ge=0.0, description="Amount to invest (USD)")
    time_horizon: TimeHorizon = Field(..., description="Categorical time horizon")
    risk_tolerance: int = Field(
        ..., description="Risk tolerance score; intended domain 1-10, clamped downstream"
    )
    goals: str = Field("", description="Free-text investment goals, comma separated")
    experience: Experience = Field("beginner")
    emergency_fund: EmergencyFundStatus = Field("none")
    debt_status: DebtStatus = Field("none")
    current_portfolio: str = Field("", description="Free-text description of current holdings")

    @field_validator("goals", "current_portfolio")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()
