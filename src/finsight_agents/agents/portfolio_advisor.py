"""
Portfolio Advisor
Asset Allocation Specialist — FinSight Advisor

Receives a validated FinancialProfile and the projection horizon.
Produces an AdvisoryReport with:
- Risk tier (clamped score -> Conservative/Moderate/Aggressive)
- Fixed 5-asset allocation plan and dollar split
- Expected return, uncorrelated risk and Sharpe ratio
- Compounded value projection
- Summary cards, alerts and key insights for the results page

Every anomaly (clamped score, undefined Sharpe, horizon disagreement) is
recovered locally and recorded as a PipelineIssue; the pipeline always
completes once the profile has been validated.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

try:
    from crewai import Agent, Task
    HAS_CREWAI = True
except ImportError:
    HAS_CREWAI = False
    Agent = None  # type: ignore
    Task = None  # type: ignore

from finsight_agents.config.constants import (
    DEFAULT_HORIZON_YEARS,
    DEFAULT_PRIMARY_GOAL,
    DEFAULT_RISK_FREE_RATE,
    HORIZON_CATEGORY_LABELS,
    HORIZON_CATEGORY_YEARS,
    PRIMARY_GOAL_MAX_CHARS,
    RISK_SCORE_MAX,
    RISK_SCORE_MIN,
)
from finsight_agents.exceptions import ErrorSeverity, PipelineIssue, ProfileValidationError
from finsight_agents.schemas.advisory_output import (
    AdvisoryReport,
    Alert,
    KeyInsight,
    SummaryCard,
)
from finsight_agents.schemas.allocation_output import AllocationPlan, Tier
from finsight_agents.schemas.metrics_output import PortfolioMetrics, ProjectionResult
from finsight_agents.schemas.profile_input import FinancialProfile
from finsight_agents.tools.allocation_selector import allocate_amount, select_allocation
from finsight_agents.tools.metrics_calculator import compute_metrics
from finsight_agents.tools.projection_calculator import build_projection
from finsight_agents.tools.risk_classifier import clamp_risk_score, tier_for_score

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CrewAI Agent Builder
# ---------------------------------------------------------------------------

def build_portfolio_advisor_agent() -> "Agent":
    """Create the Portfolio Advisor Agent. Requires crewai."""
    if not HAS_CREWAI:
        raise ImportError("crewai is required for agentic mode. pip install finsight-agents[agents]")

    from finsight_agents.tools.crew_tools import (
        AllocationSelectorTool,
        IntentResponderTool,
        ProjectionTool,
        RiskClassifierTool,
    )

    return Agent(
        role="Asset Allocation Specialist",
        goal=(
            "Classify the client's risk tolerance, select the matching fixed "
            "asset allocation, report its expected return, risk and Sharpe "
            "ratio, and project the investment's value over the horizon."
        ),
        backstory=(
            "You are a careful advisor who relies only on the deterministic "
            "allocation tools. You never invent weights, returns or market "
            "data; you report what the tools compute."
        ),
        tools=[
            RiskClassifierTool(),
            AllocationSelectorTool(),
            ProjectionTool(),
            IntentResponderTool(),
        ],
        verbose=True,
        allow_delegation=False,
        max_iter=6,
        temperature=0.2,
    )


def build_portfolio_advisor_task(
    agent: "Agent",
    profile_json: str = "",
    horizon_years: int = DEFAULT_HORIZON_YEARS,
) -> "Task":
    """Create the Portfolio Advisor task. Requires crewai."""
    if not HAS_CREWAI:
        raise ImportError("crewai is required for agentic mode. pip install finsight-agents[agents]")
    return Task(
        description=f"""Recommend an asset allocation for this client.

STEPS:
1. Classify the risk tolerance score into a tier
2. Select the tier's fixed allocation and read its metrics
3. Project the investment amount over {horizon_years} years
4. Summarize the recommendation in plain language

Client profile:
{profile_json}
""",
        expected_output=(
            "JSON with tier, weights, expected_return_pct, risk_pct, "
            "sharpe_ratio, projected_value and summary."
        ),
        agent=agent,
    )


# ---------------------------------------------------------------------------
# Report Builders
# ---------------------------------------------------------------------------

def primary_goal(goals: str) -> str:
    """First comma-separated goal, truncated for the summary card."""
    if not goals.strip():
        return DEFAULT_PRIMARY_GOAL
    first = goals.split(",")[0].strip()
    if len(first) > PRIMARY_GOAL_MAX_CHARS:
        return first[:PRIMARY_GOAL_MAX_CHARS] + "..."
    return first or DEFAULT_PRIMARY_GOAL


def investment_to_income_pct(profile: FinancialProfile) -> Optional[float]:
    """Investment amount as a percentage of annual income; None when income is 0."""
    if profile.annual_income == 0:
        return None
    return profile.investment_amount / profile.annual_income * 100.0


def horizon_matches_category(horizon_years: int, category: str) -> bool:
    """True when the slider years fall inside the categorical horizon's range."""
    low, high = HORIZON_CATEGORY_YEARS[category]
    return horizon_years >= low and (high is None or horizon_years <= high)


def build_summary_cards(profile: FinancialProfile, tier: Tier) -> list[SummaryCard]:
    return [
        SummaryCard(title="Investment Amount", value=f"${profile.investment_amount:,.0f}"),
        SummaryCard(title="Risk Profile", value=tier.value),
        SummaryCard(title="Time Horizon", value=HORIZON_CATEGORY_LABELS[profile.time_horizon]),
        SummaryCard(title="Primary Goal", value=primary_goal(profile.goals)),
    ]


def build_alerts(profile: FinancialProfile) -> list[Alert]:
    alerts = [
        Alert(
            kind="info",
            title="Portfolio Rebalancing",
            message="Consider rebalancing your portfolio quarterly",
        ),
    ]
    if profile.emergency_fund == "none":
        alerts.append(Alert(
            kind="warning",
            title="Emergency Fund",
            message="Build emergency fund before investing",
        ))
    else:
        alerts.append(Alert(
            kind="success",
            title="Emergency Fund",
            message="Emergency fund status looks good",
        ))
    return alerts


def build_key_insights(plan: AllocationPlan, metrics: PortfolioMetrics) -> list[KeyInsight]:
    # Figures come from the plan and metrics so the text never contradicts them
    return [
        KeyInsight(
            title="Portfolio Recommendation",
            description=(
                f"Based on your {plan.tier.value.lower()} risk profile, we recommend "
                f"an allocation of {plan.summary()}."
            ),
            impact="High",
        ),
        KeyInsight(
            title="Expected Returns",
            description=(
                f"Your portfolio could generate about "
                f"{metrics.display_expected_return:.1f}% annual returns under the "
                "long-run asset class assumptions."
            ),
            impact="Medium",
        ),
        KeyInsight(
            title="Risk Management",
            description=(
                "Diversification across asset classes and regular rebalancing "
                "will help manage volatility."
            ),
            impact="High",
        ),
        KeyInsight(
            title="Tax Optimization",
            description=(
                "Consider tax-advantaged accounts and tax-efficient fund "
                "selections to maximize after-tax returns."
            ),
            impact="Medium",
        ),
    ]


def _build_summary(
    tier: Tier,
    metrics: PortfolioMetrics,
    projection: ProjectionResult,
) -> str:
    sharpe = metrics.display_sharpe
    sharpe_text = f"{sharpe:.2f}" if sharpe is not None else "n/a"
    if projection.projected_value is not None:
        value_text = f"${projection.projected_value:,.0f}"
    else:
        value_text = "not computable"
    return (
        f"{tier.value} allocation: expected return {metrics.display_expected_return:.1f}%, "
        f"risk {metrics.display_risk:.1f}%, Sharpe {sharpe_text}. "
        f"${projection.investment_amount:,.0f} projects to {value_text} "
        f"over {projection.horizon_years} years."
    )


# ---------------------------------------------------------------------------
# Deterministic Pipeline
# ---------------------------------------------------------------------------

def run_advisory_pipeline(
    profile: FinancialProfile,
    horizon_years: int = DEFAULT_HORIZON_YEARS,
    risk_free_rate: float = DEFAULT_RISK_FREE_RATE,
) -> AdvisoryReport:
    """
    Run the deterministic advisory pipeline.

    Args:
        profile: validated FinancialProfile (see tools.profile_validator).
        horizon_years: projection horizon from the slider; independent of
            profile.time_horizon.
        risk_free_rate: annual risk-free rate % for the Sharpe ratio.

    Returns:
        Validated AdvisoryReport.

    Raises:
        ProfileValidationError: horizon_years is negative.
    """
    logger.info("[Advisor] Running advisory pipeline ...")
    if horizon_years < 0:
        raise ProfileValidationError(
            f"horizon_years must be non-negative, got {horizon_years}",
            field="horizon_years",
        )
    issues: list[PipelineIssue] = []

    # --- Step 1: Classify risk ---
    score_used, was_clamped = clamp_risk_score(profile.risk_tolerance)
    if was_clamped:
        logger.warning(
            f"[Advisor] Risk tolerance {profile.risk_tolerance} clamped to {score_used}"
        )
        issues.append(PipelineIssue(
            error_type="RISK_CLAMPED",
            message=(
                f"Risk tolerance {profile.risk_tolerance} is outside "
                f"[{RISK_SCORE_MIN}, {RISK_SCORE_MAX}]; using {score_used}"
            ),
            severity=ErrorSeverity.WARNING,
            context={"input": profile.risk_tolerance, "used": score_used},
        ))
    tier = tier_for_score(score_used)
    logger.info(f"[Advisor] Risk score {score_used} -> {tier.value}")

    # --- Step 2: Select allocation ---
    plan = select_allocation(tier)
    dollars = allocate_amount(plan, profile.investment_amount)
    logger.info(f"[Advisor] Allocation: {plan.summary()}")

    # --- Step 3: Metrics ---
    metrics = compute_metrics(plan, risk_free_rate)
    if metrics.sharpe_ratio is None:
        issues.append(PipelineIssue(
            error_type="SHARPE_UNDEFINED",
            message="Sharpe ratio undefined because portfolio risk is zero or non-finite",
            severity=ErrorSeverity.WARNING,
            context={"risk_pct": metrics.risk_pct},
        ))

    # --- Step 4: Projection (full-precision return) ---
    projection = build_projection(
        profile.investment_amount, metrics.expected_return_pct, horizon_years
    )
    if projection.projected_value is None:
        issues.append(PipelineIssue(
            error_type="NON_FINITE_RESULT",
            message="Projected value is not finite",
            severity=ErrorSeverity.WARNING,
            context={"horizon_years": horizon_years},
        ))

    # --- Step 5: Horizon consistency (reported, never reconciled) ---
    if not horizon_matches_category(horizon_years, profile.time_horizon):
        issues.append(PipelineIssue(
            error_type="HORIZON_MISMATCH",
            message=(
                f"Projection horizon of {horizon_years} years is outside the "
                f"'{profile.time_horizon}' time horizon range"
            ),
            severity=ErrorSeverity.INFO,
            context={"horizon_years": horizon_years, "time_horizon": profile.time_horizon},
        ))

    report = AdvisoryReport(
        profile=profile,
        risk_score_input=profile.risk_tolerance,
        risk_score_used=score_used,
        tier=tier,
        plan=plan,
        dollar_allocation=dollars,
        metrics=metrics,
        projection=projection,
        investment_to_income_pct=investment_to_income_pct(profile),
        summary_cards=build_summary_cards(profile, tier),
        alerts=build_alerts(profile),
        key_insights=build_key_insights(plan, metrics),
        issues=issues,
        analysis_date=date.today().isoformat(),
        summary=_build_summary(tier, metrics, projection),
    )
    logger.info(
        f"[Advisor] Done: {tier.value}, E[r]={metrics.display_expected_return}%, "
        f"risk={metrics.display_risk}%, issues={len(issues)}"
    )
    return report
