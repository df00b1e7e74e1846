"""
Portfolio Metrics Calculator — Pure Function Tests
Level 1: Pure function tests, no LLM calls, no file I/O.
"""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from finsight_agents.config.constants import DEFAULT_RISK_FREE_RATE
from finsight_agents.exceptions import ComputationError
from finsight_agents.schemas.allocation_output import (
    TIER_ORDER,
    AllocationEntry,
    AllocationPlan,
    AssetClass,
    Tier,
)
from finsight_agents.schemas.metrics_output import PortfolioMetrics
from finsight_agents.tools.allocation_selector import select_allocation
from finsight_agents.tools.metrics_calculator import (
    compute_expected_return,
    compute_metrics,
    compute_portfolio_risk,
    compute_sharpe_ratio,
)
from tests.fixtures.conftest import EXPECTED_TIER_METRICS


def _riskless_plan(expected_return: float = 3.0) -> AllocationPlan:
    cash = AssetClass(
        name="Cash", base_weight_pct=0, expected_return_pct=expected_return, risk_pct=0.0
    )
    return AllocationPlan(
        tier=Tier.CONSERVATIVE,
        entries=(AllocationEntry(asset=cash, weight_pct=100),),
    )


# ---------------------------------------------------------------------------
# TestExpectedReturn
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestExpectedReturn:

    @pytest.mark.parametrize("tier", list(Tier))
    def test_matches_weighted_sum(self, tier):
        expected = EXPECTED_TIER_METRICS[tier.value]["expected_return"]
        assert compute_expected_return(select_allocation(tier)) == pytest.approx(expected)

    def test_non_decreasing_across_tiers(self):
        returns = [compute_expected_return(select_allocation(t)) for t in TIER_ORDER]
        assert returns == sorted(returns)

    def test_single_asset_plan(self):
        assert compute_expected_return(_riskless_plan(3.0)) == pytest.approx(3.0)


# ---------------------------------------------------------------------------
# TestPortfolioRisk
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestPortfolioRisk:

    @pytest.mark.parametrize("tier", list(Tier))
    def test_uncorrelated_formula(self, tier):
        expected = EXPECTED_TIER_METRICS[tier.value]["risk"]
        assert compute_portfolio_risk(select_allocation(tier)) == pytest.approx(expected)

    def test_risk_below_weighted_average_volatility(self):
        """Zero correlation makes portfolio risk smaller than the weighted sum."""
        plan = select_allocation(Tier.AGGRESSIVE)
        weighted = sum(e.weight_pct / 100.0 * e.asset.risk_pct for e in plan.entries)
        assert compute_portfolio_risk(plan) < weighted

    def test_zero_risk_plan(self):
        assert compute_portfolio_risk(_riskless_plan()) == 0.0


# ---------------------------------------------------------------------------
# TestSharpeRatio
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestSharpeRatio:

    def test_formula(self):
        assert compute_sharpe_ratio(8.0, 4.0, 2.0) == pytest.approx(1.5)

    def test_default_risk_free_rate(self):
        assert DEFAULT_RISK_FREE_RATE == 2.5
        assert compute_sharpe_ratio(7.5, 5.0) == pytest.approx(1.0)

    def test_zero_risk_returns_none(self):
        assert compute_sharpe_ratio(5.0, 0.0) is None

    def test_non_finite_returns_none(self):
        assert compute_sharpe_ratio(math.inf, 1.0) is None
        assert compute_sharpe_ratio(math.nan, 1.0) is None

    def test_negative_excess_return(self):
        assert compute_sharpe_ratio(1.0, 2.0, 2.5) == pytest.approx(-0.75)


# ---------------------------------------------------------------------------
# TestComputeMetrics
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestComputeMetrics:

    def test_moderate_metrics(self):
        m = compute_metrics(select_allocation(Tier.MODERATE))
        expected_return = EXPECTED_TIER_METRICS["Moderate"]["expected_return"]
        risk = EXPECTED_TIER_METRICS["Moderate"]["risk"]
        assert m.expected_return_pct == pytest.approx(expected_return)
        assert m.risk_pct == pytest.approx(risk)
        assert m.sharpe_ratio == pytest.approx((expected_return - 2.5) / risk)
        assert m.risk_free_rate == 2.5

    def test_display_rounding(self):
        m = compute_metrics(select_allocation(Tier.MODERATE))
        assert m.display_expected_return == 8.2
        assert m.display_risk == 7.4
        assert m.display_sharpe == 0.77

    def test_full_precision_kept(self):
        m = compute_metrics(select_allocation(Tier.CONSERVATIVE))
        assert m.expected_return_pct != m.display_expected_return
        assert m.expected_return_pct == pytest.approx(6.365)

    def test_custom_risk_free_rate(self):
        plan = select_allocation(Tier.AGGRESSIVE)
        low = compute_metrics(plan, risk_free_rate=1.0)
        high = compute_metrics(plan, risk_free_rate=5.0)
        assert low.sharpe_ratio > high.sharpe_ratio
        assert low.expected_return_pct == high.expected_return_pct

    def test_zero_risk_gives_sentinel_not_exception(self):
        m = compute_metrics(_riskless_plan())
        assert m.risk_pct == 0.0
        assert m.sharpe_ratio is None
        assert m.display_sharpe is None

    def test_require_sharpe_raises_when_undefined(self):
        m = compute_metrics(_riskless_plan())
        with pytest.raises(ComputationError):
            m.require_sharpe()

    def test_require_sharpe_returns_value(self):
        m = compute_metrics(select_allocation(Tier.MODERATE))
        assert m.require_sharpe() == m.sharpe_ratio

    def test_metrics_are_recomputed_not_mutated(self):
        m = compute_metrics(select_allocation(Tier.MODERATE))
        with pytest.raises(ValidationError):
            m.expected_return_pct = 0.0
        assert isinstance(m, PortfolioMetrics)
