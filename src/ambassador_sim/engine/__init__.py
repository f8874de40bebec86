"""Engine — commission evaluation, quota rules and goal-seeking search."""

from ambassador_sim.engine.quota import (
    compute_quota,
    required_network,
    sync_from_businesses,
    sync_from_providers,
    sync_from_users,
)
from ambassador_sim.engine.earnings import evaluate, round_half_up
from ambassador_sim.engine.goal_seek import compare_strategies, search, search_profile

__all__ = [
    "compute_quota",
    "required_network",
    "sync_from_businesses",
    "sync_from_users",
    "sync_from_providers",
    "evaluate",
    "round_half_up",
    "search",
    "search_profile",
    "compare_strategies",
]
