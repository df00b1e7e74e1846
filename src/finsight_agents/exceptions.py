"""
Exception hierarchy for the FinSight Advisor.

This module defines the custom exceptions and the structured issue record
used throughout the advisory agents and tools. Validation failures are raised
before any computation runs; computation anomalies (zero risk, non-finite
values) are recovered locally and reported as PipelineIssue records so the
pipeline always completes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ErrorSeverity(Enum):
    """Categorizes the severity of issues for handling decisions."""

    CRITICAL = "critical"
    """Pipeline should stop; this error prevents meaningful continuation"""

    WARNING = "warning"
    """Log but continue; the pipeline recovered with a clamp or sentinel"""

    INFO = "info"
    """Track but don't alarm; this is informational"""


@dataclass(frozen=True)
class PipelineIssue:
    """
    Structured record of a recovered anomaly during one advisory run.

    Issues travel inside the AdvisoryReport so the host can surface them
    without the pipeline ever raising for them.
    """

    error_type: str
    """Category of issue (e.g. "RISK_CLAMPED", "SHARPE_UNDEFINED")"""

    message: str
    """Human-readable description"""

    severity: ErrorSeverity
    """How serious is this issue? CRITICAL/WARNING/INFO"""

    context: dict = field(default_factory=dict)
    """Additional context data (input value, clamped value, etc.)"""

    def to_dict(self) -> dict:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "severity": self.severity.value,
            "context": self.context,
        }


# ============================================================================
# BASE EXCEPTION CLASSES
# ============================================================================

class FinSightException(Exception):
    """
    Base exception for all FinSight Advisor errors.

    Inheriting from this allows catching all advisor errors:
        try:
            ...
        except FinSightException as e:
            ...
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__


class ValidationError(FinSightException):
    """Base class for input validation failures."""
    pass


class CalculationError(FinSightException):
    """Base class for errors during numeric computation."""
    pass


class ConfigurationError(FinSightException):
    """Raised when a setting from the environment or command line is unusable."""
    pass


# ============================================================================
# INPUT VALIDATION EXCEPTIONS
# ============================================================================

class ProfileValidationError(ValidationError):
    """
    Raised when a required profile field is missing, non-numeric or negative.

    Carries the offending field name so the host form can highlight it.

    Example:
        raise ProfileValidationError("age is required", field="age")
    """

    def __init__(self, message: str, field: str, error_code: Optional[str] = None):
        super().__init__(message, error_code)
        self.field = field


class SchemaValidationError(ValidationError):
    """
    Raised when Pydantic schema validation fails.

    This wraps Pydantic ValidationError for consistency.

    Example:
        raise SchemaValidationError("FinancialProfile validation failed: ...")
    """
    pass


# ============================================================================
# COMPUTATION EXCEPTIONS
# ============================================================================

class ComputationError(CalculationError):
    """
    Raised by callers that prefer a hard failure over a None sentinel.

    The advisory pipeline itself never raises this; it records a
    PipelineIssue and returns None instead.

    Example:
        raise ComputationError("Sharpe ratio undefined: portfolio risk is 0")
    """
    pass
