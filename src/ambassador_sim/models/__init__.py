"""Result models — engine and search output contracts."""

from ambassador_sim.models.results import (
    EarningsBreakdown,
    GoalComparison,
    QuotaStatus,
    StrategyResult,
)

__all__ = [
    "EarningsBreakdown",
    "GoalComparison",
    "QuotaStatus",
    "StrategyResult",
]
