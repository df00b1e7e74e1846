"""
Portfolio Metrics & Projection — Output Schema
FinSight Advisor

Output contract for the metrics calculator and the projection calculator.
Values are stored at full precision; rounding happens only in the display
helpers so projection inputs never carry rounding error.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from finsight_agents.config.constants import (
    RETURN_DISPLAY_DECIMALS,
    SHARPE_DISPLAY_DECIMALS,
)
from finsight_agents.exceptions import ComputationError


class PortfolioMetrics(BaseModel):
    """Expected return, risk and Sharpe ratio derived from one AllocationPlan."""

    model_config = ConfigDict(frozen=True)

    expected_return_pct: float = Field(..., description="Weighted annual return %")
    risk_pct: float = Field(..., ge=0.0, description="Uncorrelated volatility estimate %")
    sharpe_ratio: Optional[float] = Field(
        None, description="None when risk is zero or the ratio is non-finite"
    )
    risk_free_rate: float = Field(..., description="Risk-free rate % used for Sharpe")

    @property
    def display_expected_return(self) -> float:
        return round(self.expected_return_pct, RETURN_DISPLAY_DECIMALS)

    @property
    def display_risk(self) -> float:
        return round(self.risk_pct, RETURN_DISPLAY_DECIMALS)

    @property
    def display_sharpe(self) -> Optional[float]:
        if self.sharpe_ratio is None:
            return None
        return round(self.sharpe_ratio, SHARPE_DISPLAY_DECIMALS)

    def require_sharpe(self) -> float:
        """Return the Sharpe ratio or raise ComputationError when undefined."""
        if self.sharpe_ratio is None:
            raise ComputationError(
                f"Sharpe ratio undefined for risk={self.risk_pct}%"
            )
        return self.sharpe_ratio


class ProjectionResult(BaseModel):
    """Compounded value of an investment over a horizon."""

    model_config = ConfigDict(frozen=True)

    investment_amount: float = Field(..., ge=0.0)
    expected_return_pct: float
    horizon_years: int = Field(..., ge=0)
    projected_value: Optional[float] = Field(
        None, description="None when the compounded value is non-finite"
    )

    @property
    def projected_gain(self) -> Optional[float]:
        if self.projected_value is None:
            return None
        return self.projected_value - self.investment_amount
