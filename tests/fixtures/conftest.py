"""
Shared test fixtures for the FinSight Advisor tests.
Provides sample profiles as the host form submits them and as validated models.
"""

from __future__ import annotations

from typing import Any

from finsight_agents.schemas.profile_input import FinancialProfile


# Host form submission (camelCase keys, string numbers, slider as a list)
SAMPLE_FORM_DATA: dict[str, Any] = {
    "age": "34",
    "income": "85000",
    "investmentAmount": "50000",
    "timeHorizon": "long",
    "riskTolerance": [6],
    "goals": "Retirement savings, house down payment",
    "experience": "intermediate",
    "currentPortfolio": "401k target-date fund",
    "emergencyFund": "adequate",
    "debtStatus": "low",
}

# Validated profile fields keyed by schema name
SAMPLE_PROFILE_FIELDS: dict[str, Any] = {
    "age": 34,
    "annual_income": 85_000.0,
    "investment_amount": 50_000.0,
    "time_horizon": "long",
    "risk_tolerance": 6,
    "goals": "Retirement savings, house down payment",
    "experience": "intermediate",
    "emergency_fund": "adequate",
    "debt_status": "low",
    "current_portfolio": "401k target-date fund",
}

# Expected full-precision metrics per tier for the fixed catalog
EXPECTED_TIER_METRICS: dict[str, dict[str, float]] = {
    "Conservative": {"expected_return": 6.365, "risk": 20.94 ** 0.5},
    "Moderate": {"expected_return": 8.184, "risk": 54.446 ** 0.5},
    "Aggressive": {"expected_return": 9.409, "risk": 94.716 ** 0.5},
}


def make_profile(**overrides: Any) -> FinancialProfile:
    """Build a FinancialProfile from SAMPLE_PROFILE_FIELDS with overrides."""
    fields = dict(SAMPLE_PROFILE_FIELDS)
    fields.update(overrides)
    return FinancialProfile(**fields)
