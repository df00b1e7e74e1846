"""
Portfolio Advisor Tool: Portfolio Metrics Calculator
FinSight Advisor

Pure functions for:
- Weighted expected return of an allocation
- Portfolio risk under a zero-correlation assumption
- Sharpe ratio against a configurable risk-free rate

The risk figure is sqrt(sum((w_i * sigma_i)^2)). It ignores covariance between
asset classes and therefore understates risk for correlated holdings; it is a
simplification, not a covariance model.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from finsight_agents.config.constants import DEFAULT_RISK_FREE_RATE
from finsight_agents.schemas.allocation_output import AllocationPlan
from finsight_agents.schemas.metrics_output import PortfolioMetrics

logger = logging.getLogger(__name__)


def compute_expected_return(plan: AllocationPlan) -> float:
    """
    Weighted annual return % of the plan.

    Returns:
        sum(weight_i / 100 * expected_return_i), full precision.
    """
    return sum(
        e.weight_pct / 100.0 * e.asset.expected_return_pct
        for e in plan.entries
    )


def compute_portfolio_risk(plan: AllocationPlan) -> float:
    """
    Portfolio volatility % assuming zero pairwise correlation.

    Returns:
        sqrt(sum((weight_i / 100)^2 * risk_i^2)), full precision.
    """
    variance = sum(
        (e.weight_pct / 100.0) ** 2 * e.asset.risk_pct ** 2
        for e in plan.entries
    )
    return math.sqrt(variance)


def compute_sharpe_ratio(
    expected_return: float,
    risk: float,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> Optional[float]:
    """
    Sharpe ratio (expected_return - risk_free_rate) / risk.

    Returns:
        The ratio, or None when risk is zero or the result is non-finite.
    """
    if risk == 0:
        logger.warning("Sharpe ratio undefined: portfolio risk is 0")
        return None
    sharpe = (expected_return - risk_free_rate) / risk
    if not math.isfinite(sharpe):
        logger.warning(f"Sharpe ratio non-finite ({sharpe}); returning None")
        return None
    return sharpe


def compute_metrics(
    plan: AllocationPlan,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> PortfolioMetrics:
    """
    Derive PortfolioMetrics from an allocation plan.

    Args:
        plan: allocation to evaluate.
        risk_free_rate: annual risk-free rate % (default 2.5).

    Returns:
        PortfolioMetrics at full precision; sharpe_ratio is None when undefined.
    """
    expected_return = compute_expected_return(plan)
    risk = compute_portfolio_risk(plan)
    sharpe = compute_sharpe_ratio(expected_return, risk, risk_free_rate)
    return PortfolioMetrics(
        expected_return_pct=expected_return,
        risk_pct=risk,
        sharpe_ratio=sharpe,
        risk_free_rate=risk_free_rate,
    )
