"""
Portfolio Advisor Tool: Profile Validator
FinSight Advisor

Turns raw form input into a FinancialProfile. Required numeric fields that
are missing, blank or non-numeric are rejected with the offending field
named; nothing is coerced to zero.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from finsight_agents.config.constants import DEFAULT_RISK_TOLERANCE
from finsight_agents.exceptions import ProfileValidationError, SchemaValidationError
from finsight_agents.schemas.profile_input import (
    DEBT_STATUSES,
    EMERGENCY_FUND_STATUSES,
    EXPERIENCE_LEVELS,
    REQUIRED_NUMERIC_FIELDS,
    TIME_HORIZONS,
    FinancialProfile,
)

logger = logging.getLogger(__name__)

# Field names used by the host form, mapped to profile field names
FORM_FIELD_ALIASES: dict[str, str] = {
    "income": "annual_income",
    "annualIncome": "annual_income",
    "investmentAmount": "investment_amount",
    "timeHorizon": "time_horizon",
    "riskTolerance": "risk_tolerance",
    "emergencyFund": "emergency_fund",
    "debtStatus": "debt_status",
    "currentPortfolio": "current_portfolio",
}

# Choice fields checked before schema validation so errors name the field
CHOICE_FIELDS: dict[str, tuple[str, ...]] = {
    "time_horizon": TIME_HORIZONS,
    "experience": EXPERIENCE_LEVELS,
    "emergency_fund": EMERGENCY_FUND_STATUSES,
    "debt_status": DEBT_STATUSES,
}


def _parse_number(field: str, value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise ProfileValidationError(f"{field} is required", field=field)
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            raise ProfileValidationError(f"{field} is required", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ProfileValidationError(
            f"{field} must be numeric, got {value!r}", field=field
        ) from None
    if not math.isfinite(number):
        raise ProfileValidationError(f"{field} must be finite, got {value!r}", field=field)
    if number < 0:
        raise ProfileValidationError(
            f"{field} must be non-negative, got {number}", field=field
        )
    return number


def _parse_risk_tolerance(value: Any) -> int:
    # Slider widgets report a one-element list
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None or value == "":
        return DEFAULT_RISK_TOLERANCE
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ProfileValidationError(
            f"risk_tolerance must be numeric, got {value!r}", field="risk_tolerance"
        ) from None
    if not math.isfinite(number):
        raise ProfileValidationError(
            f"risk_tolerance must be finite, got {value!r}", field="risk_tolerance"
        )
    return int(number)


def _check_choice(data: dict[str, Any], field: str, allowed: tuple[str, ...]) -> None:
    value = data.get(field)
    if value is not None and value not in allowed:
        raise ProfileValidationError(
            f"{field} must be one of {', '.join(allowed)}; got {value!r}", field=field
        )


def normalize_form_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Rename host form keys to profile field names."""
    return {FORM_FIELD_ALIASES.get(k, k): v for k, v in raw.items()}


def build_profile(raw: Mapping[str, Any]) -> FinancialProfile:
    """
    Validate raw form input and build a FinancialProfile.

    Args:
        raw: field -> value mapping; accepts profile field names or the
            host form's camelCase names. Blank optional choices are dropped.

    Returns:
        Validated, frozen FinancialProfile.

    Raises:
        ProfileValidationError: a required numeric field is missing,
            non-numeric or negative (``.field`` names it).
        ProfileValidationError: a choice field holds an unknown value.
        SchemaValidationError: raw is not a mapping, or any other field
            fails schema validation.
    """
    if not isinstance(raw, Mapping):
        raise SchemaValidationError(
            f"Profile input must be a mapping of fields, got {type(raw).__name__}"
        )
    data = normalize_form_keys(raw)

    for field in REQUIRED_NUMERIC_FIELDS:
        data[field] = _parse_number(field, data.get(field))

    age = data["age"]
    if age != int(age):
        raise ProfileValidationError(f"age must be a whole number, got {age}", field="age")
    data["age"] = int(age)
    data["risk_tolerance"] = _parse_risk_tolerance(data.get("risk_tolerance"))

    # Unanswered select/radio inputs arrive as empty strings
    cleaned = {k: v for k, v in data.items() if not (isinstance(v, str) and v == "")}
    if "time_horizon" not in cleaned:
        raise ProfileValidationError("time_horizon is required", field="time_horizon")
    for field, allowed in CHOICE_FIELDS.items():
        _check_choice(cleaned, field, allowed)

    try:
        profile = FinancialProfile(**cleaned)
    except PydanticValidationError as e:
        raise SchemaValidationError(f"FinancialProfile validation failed: {e}") from e

    logger.info(
        f"[Profile] Built profile: age={profile.age}, "
        f"amount=${profile.investment_amount:,.0f}, risk={profile.risk_tolerance}"
    )
    return profile
