"""
Centralized configuration for the FinSight Advisor

This module defines the thresholds and default values used throughout the
advisory pipeline. Centralizing these values makes it easier to tune the
system and understand decision boundaries.
"""

from typing import Optional

# ============================================================================
# RISK TOLERANCE SCORE
# ============================================================================
# Self-reported risk tolerance is a 1-10 slider value.
RISK_SCORE_MIN = 1
"""Lowest accepted risk tolerance score; lower values are clamped up"""

RISK_SCORE_MAX = 10
"""Highest accepted risk tolerance score; higher values are clamped down"""

DEFAULT_RISK_TOLERANCE = 5
"""Slider position before the user touches it"""

# ============================================================================
# TIER CUT-OFFS
# ============================================================================
# score <= 3 -> Conservative, 4..7 -> Moderate, >= 8 -> Aggressive
CONSERVATIVE_MAX_SCORE = 3
"""Highest score classified as Conservative"""

MODERATE_MAX_SCORE = 7
"""Highest score classified as Moderate"""

# ============================================================================
# PORTFOLIO METRICS
# ============================================================================
DEFAULT_RISK_FREE_RATE = 2.5
"""Annual risk-free rate (%) used for the Sharpe ratio"""

RISK_FREE_RATE_ENV_VAR = "FINSIGHT_RISK_FREE_RATE"
"""Environment variable read by the CLI to override the risk-free rate"""

RETURN_DISPLAY_DECIMALS = 1
"""Decimals shown for expected return and risk percentages"""

SHARPE_DISPLAY_DECIMALS = 2
"""Decimals shown for the Sharpe ratio"""

# ============================================================================
# PROJECTION HORIZON
# ============================================================================
HORIZON_YEARS_MIN = 1
"""Lowest value offered by the horizon slider"""

HORIZON_YEARS_MAX = 30
"""Highest value offered by the horizon slider"""

DEFAULT_HORIZON_YEARS = 10
"""Horizon slider position before the user touches it"""

# Year range implied by each categorical time horizon (max None = open ended).
# Used only to flag disagreement with the numeric slider, never to override it.
HORIZON_CATEGORY_YEARS: dict[str, tuple[int, Optional[int]]] = {
    "short": (1, 3),
    "medium": (3, 7),
    "long": (7, None),
}

HORIZON_CATEGORY_LABELS: dict[str, str] = {
    "short": "Short-term (1-3 years)",
    "medium": "Medium-term (3-7 years)",
    "long": "Long-term (7+ years)",
}

# ============================================================================
# REPORT PRESENTATION DEFAULTS
# ============================================================================
DEFAULT_PRIMARY_GOAL = "Wealth Building"
"""Summary card value when the goals field is empty"""

PRIMARY_GOAL_MAX_CHARS = 20
"""Primary goal is truncated to this many characters on the summary card"""
