"""
Allocation Selector — Output Schema
FinSight Advisor

Output contract for the tier classifier and allocation selector.
Holds the fixed asset-class catalog and the three tier weight tables.
All values are static assumptions, not learned from market data.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Tier(str, Enum):
    """Risk tier derived from the risk tolerance score."""
    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    AGGRESSIVE = "Aggressive"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class AssetClass(BaseModel):
    """One fixed investment category with static return/risk assumptions."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    base_weight_pct: int = Field(..., ge=0, le=100, description="Neutral catalog weight %")
    expected_return_pct: float = Field(..., description="Assumed annual return %")
    risk_pct: float = Field(..., ge=0.0, description="Annual volatility proxy %")


class AllocationEntry(BaseModel):
    """One asset class and its weight inside a plan."""

    model_config = ConfigDict(frozen=True)

    asset: AssetClass
    weight_pct: int = Field(..., ge=0, le=100)


class AllocationPlan(BaseModel):
    """Ordered asset-class weights for one tier."""

    model_config = ConfigDict(frozen=True)

    tier: Tier
    entries: tuple[AllocationEntry, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_weights_sum_to_100(self) -> "AllocationPlan":
        """Weights are whole percentages and must sum to exactly 100."""
        total = sum(e.weight_pct for e in self.entries)
        if total != 100:
            raise ValueError(f"Allocation weights sum to {total}%, expected exactly 100%")
        return self

    @property
    def weights(self) -> dict[str, int]:
        """Asset name -> weight %, in catalog order."""
        return {e.asset.name: e.weight_pct for e in self.entries}

    def summary(self) -> str:
        """One-line description, e.g. '20% US Stocks, 10% International Stocks, ...'."""
        return ", ".join(f"{e.weight_pct}% {e.asset.name}" for e in self.entries)


class AssetDollarAllocation(BaseModel):
    """Dollar amount assigned to one asset class for a given investment."""

    name: str
    weight_pct: int = Field(..., ge=0, le=100)
    amount: float = Field(..., ge=0.0)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

US_STOCKS = AssetClass(name="US Stocks", base_weight_pct=40, expected_return_pct=10.5, risk_pct=16.0)
INTERNATIONAL_STOCKS = AssetClass(
    name="International Stocks", base_weight_pct=20, expected_return_pct=9.8, risk_pct=18.0
)
BONDS = AssetClass(name="Bonds", base_weight_pct=25, expected_return_pct=4.2, risk_pct=4.0)
REAL_ESTATE = AssetClass(name="Real Estate", base_weight_pct=10, expected_return_pct=8.5, risk_pct=14.0)
COMMODITIES = AssetClass(name="Commodities", base_weight_pct=5, expected_return_pct=6.8, risk_pct=22.0)

# Fixed catalog; order is the display order and the order of TIER_WEIGHTS tuples
ASSET_CATALOG: tuple[AssetClass, ...] = (
    US_STOCKS,
    INTERNATIONAL_STOCKS,
    BONDS,
    REAL_ESTATE,
    COMMODITIES,
)

# Weight % per asset class, aligned with ASSET_CATALOG
TIER_WEIGHTS: dict[Tier, tuple[int, int, int, int, int]] = {
    Tier.CONSERVATIVE: (20, 10, 60, 5, 5),
    Tier.MODERATE:     (35, 25, 30, 7, 3),
    Tier.AGGRESSIVE:   (50, 30, 10, 7, 3),
}

# Tier order from least to most risk
TIER_ORDER: tuple[Tier, ...] = (Tier.CONSERVATIVE, Tier.MODERATE, Tier.AGGRESSIVE)
