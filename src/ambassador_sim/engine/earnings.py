"""Quota & commission engine.

Pure function of a ``NetworkComposition``: no state, no failure modes.
Rates are already clamped by the composition model.
"""

from __future__ import annotations

import math

from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.constants import (
    AVG_TICKET,
    BUSINESS_FEE,
    PREMIUM_COMMISSION,
    PREMIUM_COST,
    TRADITIONAL_SALARY,
    TX_RATE_MATCHED,
    TX_RATE_SINGLE,
)
from ambassador_sim.engine.quota import compute_quota
from ambassador_sim.models.results import EarningsBreakdown


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves towards +∞ (0.5 → 1, 2.5 → 3)."""
    return int(math.floor(x + 0.5))


def evaluate(composition: NetworkComposition) -> EarningsBreakdown:
    """Compute the monthly earnings breakdown of ``composition``."""
    c = composition

    # ── 1. Business fees, gated by the quota ───────────────────────────
    quota = compute_quota(c)
    business_fee_income = quota.eligible_businesses * BUSINESS_FEE
    business_fee_pending = quota.pending_businesses * BUSINESS_FEE
    business_fee_potential = c.businesses * BUSINESS_FEE

    # ── 2. Transactions ────────────────────────────────────────────────
    # Each active participant makes exactly one transaction per month.
    active_users = round_half_up(c.users * c.user_activity_rate / 100)
    active_providers = round_half_up(c.providers * c.provider_activity_rate / 100)
    total_tx = active_users + active_providers

    match_fraction = c.match_rate / 100
    matched_tx = total_tx * match_fraction
    single_tx = total_tx * (1 - match_fraction)
    matched_tx_income = matched_tx * AVG_TICKET * TX_RATE_MATCHED
    single_tx_income = single_tx * AVG_TICKET * TX_RATE_SINGLE
    transaction_income = matched_tx_income + single_tx_income

    # Display-only attribution back to each side; sums to transaction_income.
    user_share = active_users / total_tx if total_tx > 0 else 0.0
    provider_share = active_providers / total_tx if total_tx > 0 else 0.0

    # ── 3. Premium subscriptions ───────────────────────────────────────
    premium_subscribers = round_half_up(c.registered * c.premium_rate / 100)
    premium_income = premium_subscribers * PREMIUM_COST * PREMIUM_COMMISSION

    # ── 4. Total (pending business fees excluded) ──────────────────────
    monthly_total = business_fee_income + transaction_income + premium_income

    return EarningsBreakdown(
        quota=quota,
        business_fee_income=business_fee_income,
        business_fee_pending=business_fee_pending,
        business_fee_potential=business_fee_potential,
        active_users=active_users,
        active_providers=active_providers,
        total_transactions=total_tx,
        matched_transactions=matched_tx,
        single_transactions=single_tx,
        matched_tx_income=matched_tx_income,
        single_tx_income=single_tx_income,
        transaction_income=transaction_income,
        user_tx_income=transaction_income * user_share,
        provider_tx_income=transaction_income * provider_share,
        premium_subscribers=premium_subscribers,
        premium_income=premium_income,
        monthly_total=monthly_total,
        salary_difference=monthly_total - TRADITIONAL_SALARY,
    )
