"""
Portfolio Advisor Tool: Risk Tier Classifier
FinSight Advisor

Pure functions for:
- Clamping a risk tolerance score into the 1-10 domain
- Mapping the clamped score to Conservative / Moderate / Aggressive

No LLM, no file I/O.
"""

from __future__ import annotations

import logging

from finsight_agents.config.constants import (
    CONSERVATIVE_MAX_SCORE,
    MODERATE_MAX_SCORE,
    RISK_SCORE_MAX,
    RISK_SCORE_MIN,
)
from finsight_agents.schemas.allocation_output import Tier

logger = logging.getLogger(__name__)


def clamp_risk_score(score: int) -> tuple[int, bool]:
    """
    Clamp a risk tolerance score to [RISK_SCORE_MIN, RISK_SCORE_MAX].

    Args:
        score: raw risk tolerance as submitted.

    Returns:
        (clamped_score, was_clamped)
    """
    clamped = max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, int(score)))
    return clamped, clamped != score


def tier_for_score(score: int) -> Tier:
    """Map an in-range score to its tier. Callers must clamp first."""
    if score <= CONSERVATIVE_MAX_SCORE:
        return Tier.CONSERVATIVE
    if score <= MODERATE_MAX_SCORE:
        return Tier.MODERATE
    return Tier.AGGRESSIVE


def classify_risk(score: int) -> Tier:
    """
    Classify a risk tolerance score into a tier.

    Out-of-range scores are clamped to the nearest bound and a warning is
    logged; classification never fails.

    Args:
        score: risk tolerance, intended domain 1-10.

    Returns:
        Tier.CONSERVATIVE for <=3, Tier.MODERATE for 4-7, Tier.AGGRESSIVE for >=8.
    """
    clamped, was_clamped = clamp_risk_score(score)
    if was_clamped:
        logger.warning(
            f"Risk tolerance {score} outside [{RISK_SCORE_MIN}, {RISK_SCORE_MAX}]; "
            f"clamped to {clamped}"
        )
    return tier_for_score(clamped)
