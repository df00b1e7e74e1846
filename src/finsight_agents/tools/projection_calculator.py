"""
Portfolio Advisor Tool: Projection Calculator
FinSight Advisor

Pure functions for compounding an investment at a fixed annual return.
The horizon here is the numeric slider value in years; it is independent of
the categorical time horizon on the profile.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from finsight_agents.exceptions import ProfileValidationError
from finsight_agents.schemas.metrics_output import ProjectionResult

logger = logging.getLogger(__name__)


def _validate_inputs(amount: float, years: int) -> None:
    if amount < 0:
        raise ProfileValidationError(
            f"investment_amount must be non-negative, got {amount}",
            field="investment_amount",
        )
    if years < 0:
        raise ProfileValidationError(
            f"horizon_years must be non-negative, got {years}",
            field="horizon_years",
        )


def project_value(
    amount: float,
    expected_return_pct: float,
    years: int,
) -> Optional[float]:
    """
    Compound an amount at a fixed annual return.

    Args:
        amount: starting investment (USD, >= 0).
        expected_return_pct: annual return % (e.g. 7.5 for 7.5%).
        years: number of whole years (>= 0).

    Returns:
        amount * (1 + r/100) ** years; exactly amount when years == 0;
        None when the result overflows or is otherwise non-finite.

    Raises:
        ProfileValidationError: amount or years is negative.
    """
    _validate_inputs(amount, years)
    if years == 0:
        return amount
    try:
        value = amount * math.pow(1.0 + expected_return_pct / 100.0, years)
    except (OverflowError, ValueError) as e:
        logger.warning(f"Projection failed for r={expected_return_pct}%, years={years}: {e}")
        return None
    if not math.isfinite(value):
        logger.warning(f"Projection non-finite for r={expected_return_pct}%, years={years}")
        return None
    return value


def project_schedule(
    amount: float,
    expected_return_pct: float,
    years: int,
) -> list[Optional[float]]:
    """
    Year-by-year projected values.

    Returns:
        [value at year 0, year 1, ..., year `years`].
    """
    _validate_inputs(amount, years)
    return [project_value(amount, expected_return_pct, y) for y in range(years + 1)]


def build_projection(
    amount: float,
    expected_return_pct: float,
    years: int,
) -> ProjectionResult:
    """Wrap project_value in a ProjectionResult."""
    return ProjectionResult(
        investment_amount=amount,
        expected_return_pct=expected_return_pct,
        horizon_years=years,
        projected_value=project_value(amount, expected_return_pct, years),
    )
