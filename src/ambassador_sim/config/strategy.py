"""Weighting profiles for the goal-seeking search.

A profile says how a target income should be split across the revenue
streams, and which activity / premium / match rates to assume while
searching.  Only the business share drives the search itself; the user
and provider shares describe the intended mix.
"""

from pydantic import BaseModel, ConfigDict, Field


class StrategyWeights(BaseModel):
    """Fractions of the target income assigned to each stream."""

    model_config = ConfigDict(frozen=True)

    business: float = Field(default=0.40, ge=0, le=1.0, description="Share from business fees")
    user: float = Field(default=0.30, ge=0, le=1.0, description="Share from user-side transactions")
    provider: float = Field(default=0.30, ge=0, le=1.0, description="Share from provider-side transactions")


class StrategyProfile(BaseModel):
    """One named strategy: weights + the rates assumed for it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="balanced", description="Machine name")
    label: str = Field(default="Balanced", description="Human label")
    weights: StrategyWeights = Field(default_factory=StrategyWeights)
    premium_rate: float = Field(default=20.0, ge=0, le=100, description="Premium conversion (%)")
    match_rate: float = Field(default=40.0, ge=0, le=100, description="Matched transactions (%)")
    user_activity_rate: float = Field(default=30.0, ge=0, le=100, description="Active users (%)")
    provider_activity_rate: float = Field(default=35.0, ge=0, le=100, description="Active providers (%)")


BUSINESS_LEANING = StrategyProfile(
    name="business-leaning",
    label="Business focus",
    weights=StrategyWeights(business=0.70, user=0.15, provider=0.15),
    premium_rate=15,
    match_rate=30,
    user_activity_rate=25,
    provider_activity_rate=30,
)

BALANCED = StrategyProfile(
    name="balanced",
    label="Balanced",
    weights=StrategyWeights(business=0.40, user=0.30, provider=0.30),
    premium_rate=20,
    match_rate=40,
    user_activity_rate=30,
    provider_activity_rate=35,
)

VOLUME_LEANING = StrategyProfile(
    name="volume-leaning",
    label="Volume focus",
    weights=StrategyWeights(business=0.20, user=0.40, provider=0.40),
    premium_rate=25,
    match_rate=50,
    user_activity_rate=40,
    provider_activity_rate=45,
)

# Display order: business → balanced → volume
PROFILES: dict[str, StrategyProfile] = {
    p.name: p for p in (BUSINESS_LEANING, BALANCED, VOLUME_LEANING)
}

RECOMMENDED_PROFILE = BALANCED.name
