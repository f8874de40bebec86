"""Result types — the contract between engine, search, API and dashboard.

Monetary fields are unrounded MXN per month; rounding happens only at
display time (see ``ambassador_sim.api.formatting``).
"""

from __future__ import annotations

from pydantic import BaseModel

from ambassador_sim.config.composition import NetworkComposition


# ═══════════════════════════════════════════════════════════════════════════
# Quota eligibility
# ═══════════════════════════════════════════════════════════════════════════

class QuotaStatus(BaseModel):
    """How many businesses the user / provider base can pay for."""

    users_units: int
    """floor(users / USERS_PER_BUSINESS)."""
    providers_units: int
    """floor(providers / PROVIDERS_PER_BUSINESS)."""
    quota_eligible: int
    """min(users_units, providers_units) — businesses the base can support."""
    eligible_businesses: int
    """min(businesses, quota_eligible) — businesses whose fee is paid now."""
    pending_businesses: int
    """max(0, businesses − quota_eligible) — fee released once quota is met."""

    required_users: int
    required_providers: int
    users_shortfall: int
    """Users still missing to make every business eligible (0 when met)."""
    providers_shortfall: int

    @property
    def quota_met(self) -> bool:
        return self.pending_businesses == 0


# ═══════════════════════════════════════════════════════════════════════════
# Earnings breakdown
# ═══════════════════════════════════════════════════════════════════════════

class EarningsBreakdown(BaseModel):
    """Monthly income of one composition, by stream."""

    quota: QuotaStatus

    # --- Business fees ---
    business_fee_income: float
    """Eligible businesses × fee.  Counted in the total."""
    business_fee_pending: float
    """Pending businesses × fee.  Reported, NOT counted in the total."""
    business_fee_potential: float
    """All businesses × fee — what the fees would be with the quota met."""

    # --- Transactions ---
    active_users: int
    active_providers: int
    total_transactions: int
    matched_transactions: float
    single_transactions: float
    matched_tx_income: float
    single_tx_income: float
    transaction_income: float
    """matched_tx_income + single_tx_income."""
    user_tx_income: float
    """Cosmetic split: transaction_income × user share of transactions."""
    provider_tx_income: float
    """Cosmetic split: transaction_income × provider share of transactions."""

    # --- Premium ---
    premium_subscribers: int
    premium_income: float

    # --- Totals ---
    monthly_total: float
    """business_fee_income + transaction_income + premium_income."""
    salary_difference: float
    """monthly_total − TRADITIONAL_SALARY (negative when below)."""

    def streams(self) -> dict[str, float]:
        """The four displayed income streams."""
        return {
            "businesses": self.business_fee_income,
            "users": self.user_tx_income,
            "providers": self.provider_tx_income,
            "premium": self.premium_income,
        }


# ═══════════════════════════════════════════════════════════════════════════
# Goal-seeking search
# ═══════════════════════════════════════════════════════════════════════════

class StrategyResult(BaseModel):
    """Composition found by the search for one target and profile."""

    profile: str
    """Profile name, or ``"custom"`` for ad-hoc weights."""
    target: float
    composition: NetworkComposition
    breakdown: EarningsBreakdown
    premium_subscribers: int
    iterations: int
    """Search iterations performed (1 … MAX_SEARCH_ITERATIONS)."""
    scale_factor: float
    """Scale factor used on the returned iteration."""
    target_met: bool
    """True when monthly_total ≥ GOAL_TOLERANCE × target.  False means the
    iteration budget ran out and this is a best-effort, below-target result."""


class GoalComparison(BaseModel):
    """One search per weighting profile, side by side."""

    target: float
    strategies: list[StrategyResult]
    recommended: str
    """Profile whose composition is applied to the interactive controls."""

    def get(self, profile: str) -> StrategyResult:
        for s in self.strategies:
            if s.profile == profile:
                return s
        raise KeyError(profile)

    @property
    def recommended_strategy(self) -> StrategyResult:
        return self.get(self.recommended)
