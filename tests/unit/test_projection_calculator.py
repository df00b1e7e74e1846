"""
Projection Calculator — Pure Function Tests
Level 1: Pure function tests, no LLM calls, no file I/O.
"""

from __future__ import annotations

import pytest

from finsight_agents.exceptions import ProfileValidationError, ValidationError
from finsight_agents.tools.projection_calculator import (
    build_projection,
    project_schedule,
    project_value,
)


@pytest.mark.schema
class TestProjectValue:

    def test_zero_years_is_identity(self):
        assert project_value(1000, 10, 0) == 1000

    def test_zero_return_is_identity(self):
        assert project_value(1000, 0, 5) == 1000

    def test_one_year(self):
        assert project_value(1000, 10, 1) == pytest.approx(1100.0)

    def test_compounding(self):
        assert project_value(1000, 10, 2) == pytest.approx(1210.0)
        assert project_value(50_000, 8.184, 10) == pytest.approx(50_000 * 1.08184 ** 10)

    def test_negative_return_shrinks(self):
        assert project_value(1000, -10, 2) == pytest.approx(810.0)

    def test_zero_amount(self):
        assert project_value(0, 10, 30) == 0

    def test_negative_amount_rejected(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            project_value(-1, 5, 10)
        assert exc_info.value.field == "investment_amount"

    def test_negative_years_rejected(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            project_value(1000, 5, -1)
        assert exc_info.value.field == "horizon_years"

    def test_rejection_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            project_value(-100, 5, 1)

    def test_overflow_returns_none(self):
        assert project_value(1e300, 1e6, 30) is None


@pytest.mark.schema
class TestProjectSchedule:

    def test_length_and_endpoints(self):
        schedule = project_schedule(1000, 10, 3)
        assert len(schedule) == 4
        assert schedule[0] == 1000
        assert schedule[-1] == pytest.approx(1331.0)

    def test_monotonic_for_positive_return(self):
        schedule = project_schedule(1000, 5, 10)
        assert schedule == sorted(schedule)

    def test_negative_amount_rejected(self):
        with pytest.raises(ProfileValidationError):
            project_schedule(-5, 5, 3)


@pytest.mark.schema
class TestBuildProjection:

    def test_fields(self):
        p = build_projection(10_000, 5.0, 2)
        assert p.investment_amount == 10_000
        assert p.horizon_years == 2
        assert p.projected_value == pytest.approx(11_025.0)
        assert p.projected_gain == pytest.approx(1_025.0)

    def test_identity_gain_is_zero(self):
        assert build_projection(10_000, 5.0, 0).projected_gain == 0

    def test_non_finite_gives_none_gain(self):
        p = build_projection(1e300, 1e6, 30)
        assert p.projected_value is None
        assert p.projected_gain is None
