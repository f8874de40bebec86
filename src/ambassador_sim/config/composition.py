"""Network composition — the single input to the commission engine."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NetworkComposition(BaseModel):
    """Referral network of one ambassador, fixed for one evaluation.

    Counts must be non-negative; rates are percentages and are clamped
    into [0, 100] on construction, so the engine never re-validates them.
    """

    model_config = ConfigDict(frozen=True)

    businesses: int = Field(default=0, ge=0, description="Businesses registered (fixed monthly fee each)")
    users: int = Field(default=0, ge=0, description="End-users referred")
    providers: int = Field(default=0, ge=0, description="Service providers referred")
    user_activity_rate: float = Field(
        default=25.0, allow_inf_nan=False,
        description="Percent of users that transact once per month",
    )
    provider_activity_rate: float = Field(
        default=25.0, allow_inf_nan=False,
        description="Percent of providers that serve once per month",
    )
    premium_rate: float = Field(
        default=30.0, allow_inf_nan=False,
        description="Percent of users + providers on the paid premium tier",
    )
    match_rate: float = Field(
        default=10.0, allow_inf_nan=False,
        description="Percent of transactions where the ambassador referred both "
                    "the user and the provider (doubles the commission rate).",
    )

    @field_validator(
        "user_activity_rate", "provider_activity_rate", "premium_rate", "match_rate",
    )
    @classmethod
    def _clamp_pct(cls, v: float) -> float:
        return min(100.0, max(0.0, v))

    @property
    def registered(self) -> int:
        """Users + providers (the premium conversion base)."""
        return self.users + self.providers
