"""Quota system — 16 users + 4 providers back each paid business.

Pure arithmetic: composition → QuotaStatus, plus the sync helpers the
calculator controls use to keep counts on the ratio.
"""

from __future__ import annotations

from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.constants import PROVIDERS_PER_BUSINESS, USERS_PER_BUSINESS
from ambassador_sim.models.results import QuotaStatus


def required_network(businesses: int) -> tuple[int, int]:
    """Users and providers needed for ``businesses`` to be fully eligible."""
    return businesses * USERS_PER_BUSINESS, businesses * PROVIDERS_PER_BUSINESS


def compute_quota(composition: NetworkComposition) -> QuotaStatus:
    """Split businesses into eligible (paid now) and pending (paid later)."""
    users_units = composition.users // USERS_PER_BUSINESS
    providers_units = composition.providers // PROVIDERS_PER_BUSINESS
    quota_eligible = min(users_units, providers_units)

    eligible = min(composition.businesses, quota_eligible)
    pending = max(0, composition.businesses - quota_eligible)

    required_users, required_providers = required_network(composition.businesses)

    return QuotaStatus(
        users_units=users_units,
        providers_units=providers_units,
        quota_eligible=quota_eligible,
        eligible_businesses=eligible,
        pending_businesses=pending,
        required_users=required_users,
        required_providers=required_providers,
        users_shortfall=max(0, required_users - composition.users),
        providers_shortfall=max(0, required_providers - composition.providers),
    )


# ── Control sync ──────────────────────────────────────────────────────────

def sync_from_businesses(composition: NetworkComposition) -> NetworkComposition:
    """Set users and providers to exactly what the business count requires."""
    users, providers = required_network(composition.businesses)
    return composition.model_copy(update={"users": users, "providers": providers})


def sync_from_users(composition: NetworkComposition) -> NetworkComposition:
    """Raise users to the business minimum; counts above it are kept."""
    minimum, _ = required_network(composition.businesses)
    if composition.users >= minimum:
        return composition
    return composition.model_copy(update={"users": minimum})


def sync_from_providers(composition: NetworkComposition) -> NetworkComposition:
    """Raise providers to the business minimum; counts above it are kept."""
    _, minimum = required_network(composition.businesses)
    if composition.providers >= minimum:
        return composition
    return composition.model_copy(update={"providers": minimum})
