"""Goal-seeking strategy search.

Answers: "How big a network do I need to earn X per month?"

Search strategy (geometric scaling of the business count):
  1. Seed businesses from the business share of the target:
     ceil(target × weights.business × scale / BUSINESS_FEE)
  2. Tie users and providers to businesses at the exact 16:4:1 ratio
     (the search never grows them independently, so the quota is always met)
  3. Evaluate the composition with the commission engine
  4. Stop once the total reaches GOAL_TOLERANCE × target; otherwise
     scale *= SCALE_STEP and retry
  5. After MAX_SEARCH_ITERATIONS the last composition is returned as a
     best-effort result with ``target_met=False``; this is not an error
"""

from __future__ import annotations

import logging
import math

from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.constants import (
    BUSINESS_FEE,
    GOAL_TOLERANCE,
    MAX_SEARCH_ITERATIONS,
    SCALE_STEP,
)
from ambassador_sim.config.strategy import PROFILES, RECOMMENDED_PROFILE, StrategyProfile, StrategyWeights
from ambassador_sim.engine.earnings import evaluate
from ambassador_sim.engine.quota import required_network
from ambassador_sim.models.results import EarningsBreakdown, GoalComparison, StrategyResult

logger = logging.getLogger(__name__)


def search(
    target_monthly_income: float,
    weights: StrategyWeights,
    premium_rate_pct: float,
    match_rate_pct: float = 40.0,
    user_activity_rate_pct: float = 30.0,
    provider_activity_rate_pct: float = 30.0,
    max_iterations: int = MAX_SEARCH_ITERATIONS,
    profile: str = "custom",
) -> StrategyResult:
    """Find a composition whose engine total reaches ``target_monthly_income``.

    Parameters
    ----------
    target_monthly_income : float
        Desired income (MXN / month).  Callers coerce negative input to 0.
    weights : StrategyWeights
        Income split; ``weights.business`` seeds the business count.
    premium_rate_pct, match_rate_pct, user_activity_rate_pct, provider_activity_rate_pct : float
        Rates (0–100) assumed for every candidate composition.
    max_iterations : int
        Iteration budget, capped at ``MAX_SEARCH_ITERATIONS``.
    profile : str
        Name recorded on the result.

    Returns
    -------
    StrategyResult
        The first composition within tolerance, or the last one tried.
    """
    max_iterations = max(1, min(max_iterations, MAX_SEARCH_ITERATIONS))
    threshold = target_monthly_income * GOAL_TOLERANCE

    scale = 1.0
    composition: NetworkComposition | None = None
    breakdown: EarningsBreakdown | None = None
    met = False
    iterations = 0

    for iterations in range(1, max_iterations + 1):
        businesses = math.ceil(target_monthly_income * weights.business * scale / BUSINESS_FEE)
        users, providers = required_network(businesses)

        composition = NetworkComposition(
            businesses=businesses,
            users=users,
            providers=providers,
            user_activity_rate=user_activity_rate_pct,
            provider_activity_rate=provider_activity_rate_pct,
            premium_rate=premium_rate_pct,
            match_rate=match_rate_pct,
        )
        breakdown = evaluate(composition)

        logger.debug(
            "search[%s] iter=%d scale=%.4f businesses=%d total=%.2f threshold=%.2f",
            profile, iterations, scale, businesses, breakdown.monthly_total, threshold,
        )

        if breakdown.monthly_total >= threshold:
            met = True
            break

        if iterations < max_iterations:
            scale *= SCALE_STEP

    if not met:
        logger.warning(
            "search[%s] budget of %d iterations exhausted: best total %.2f < %.2f",
            profile, max_iterations, breakdown.monthly_total, threshold,
        )

    return StrategyResult(
        profile=profile,
        target=target_monthly_income,
        composition=composition,
        breakdown=breakdown,
        premium_subscribers=breakdown.premium_subscribers,
        iterations=iterations,
        scale_factor=scale,
        target_met=met,
    )


def search_profile(target_monthly_income: float, profile: StrategyProfile) -> StrategyResult:
    """Run ``search`` with the weights and rates of ``profile``."""
    return search(
        target_monthly_income,
        profile.weights,
        premium_rate_pct=profile.premium_rate,
        match_rate_pct=profile.match_rate,
        user_activity_rate_pct=profile.user_activity_rate,
        provider_activity_rate_pct=profile.provider_activity_rate,
        profile=profile.name,
    )


def compare_strategies(
    target_monthly_income: float,
    profiles: list[StrategyProfile] | None = None,
    recommended: str = RECOMMENDED_PROFILE,
) -> GoalComparison:
    """Search once per profile and return the results side by side.

    Defaults to the three canonical profiles with ``balanced`` recommended.
    """
    if profiles is None:
        profiles = list(PROFILES.values())

    strategies = [search_profile(target_monthly_income, p) for p in profiles]
    names = [s.profile for s in strategies]
    if recommended not in names:
        recommended = names[0]

    return GoalComparison(
        target=target_monthly_income,
        strategies=strategies,
        recommended=recommended,
    )
