"""
Portfolio Advisor Tool: Allocation Selector
FinSight Advisor

Pure functions for:
- Looking up the fixed asset-class weights of a tier
- Splitting an investment amount across the selected weights

Weights change in steps at the tier boundaries (3->4 and 7->8); there is no
interpolation between tiers.
"""

from __future__ import annotations

import logging

from finsight_agents.schemas.allocation_output import (
    ASSET_CATALOG,
    TIER_WEIGHTS,
    AllocationEntry,
    AllocationPlan,
    AssetDollarAllocation,
    Tier,
)

logger = logging.getLogger(__name__)


def select_allocation(tier: Tier) -> AllocationPlan:
    """
    Build the AllocationPlan for a tier from the fixed lookup table.

    Args:
        tier: Tier.CONSERVATIVE, Tier.MODERATE or Tier.AGGRESSIVE.

    Returns:
        AllocationPlan with one entry per catalog asset, weights summing to 100.
    """
    weights = TIER_WEIGHTS[Tier(tier)]
    entries = tuple(
        AllocationEntry(asset=asset, weight_pct=weight)
        for asset, weight in zip(ASSET_CATALOG, weights)
    )
    return AllocationPlan(tier=Tier(tier), entries=entries)


def allocate_amount(plan: AllocationPlan, amount: float) -> list[AssetDollarAllocation]:
    """
    Split an investment amount across the plan's weights.

    Args:
        plan: allocation to apply.
        amount: investment amount in USD (non-negative).

    Returns:
        One AssetDollarAllocation per plan entry, in plan order.
    """
    return [
        AssetDollarAllocation(
            name=e.asset.name,
            weight_pct=e.weight_pct,
            amount=amount * e.weight_pct / 100.0,
        )
        for e in plan.entries
    ]
