"""Fixed business rules of the ambassador programme.

These are not runtime configuration: changing any of them changes the
commission plan itself.
"""

from __future__ import annotations

# ── Quota system (16 : 4 : 1) ──────────────────────────────────────────
USERS_PER_BUSINESS = 16
PROVIDERS_PER_BUSINESS = 4

# ── Commissions (MXN / month) ──────────────────────────────────────────
BUSINESS_FEE = 200
AVG_TICKET = 1_000
TX_RATE_SINGLE = 0.01
"""Commission rate when only one side of the transaction was referred."""
TX_RATE_MATCHED = 0.02
"""Commission rate when both user and provider were referred by the same ambassador."""
PREMIUM_COST = 99
PREMIUM_COMMISSION = 0.40

# ── Reference salary shown next to the projection ──────────────────────
TRADITIONAL_SALARY = 10_000

# ── Goal-seeking search ────────────────────────────────────────────────
MAX_SEARCH_ITERATIONS = 20
SCALE_STEP = 1.15
GOAL_TOLERANCE = 0.95
DEFAULT_GOAL = 15_000

CURRENCY = "MXN"


def as_dict() -> dict[str, float | int | str]:
    """All business rules as a flat mapping (for the API and dashboard)."""
    return {
        "USERS_PER_BUSINESS": USERS_PER_BUSINESS,
        "PROVIDERS_PER_BUSINESS": PROVIDERS_PER_BUSINESS,
        "BUSINESS_FEE": BUSINESS_FEE,
        "AVG_TICKET": AVG_TICKET,
        "TX_RATE_SINGLE": TX_RATE_SINGLE,
        "TX_RATE_MATCHED": TX_RATE_MATCHED,
        "PREMIUM_COST": PREMIUM_COST,
        "PREMIUM_COMMISSION": PREMIUM_COMMISSION,
        "TRADITIONAL_SALARY": TRADITIONAL_SALARY,
        "MAX_SEARCH_ITERATIONS": MAX_SEARCH_ITERATIONS,
        "SCALE_STEP": SCALE_STEP,
        "GOAL_TOLERANCE": GOAL_TOLERANCE,
        "CURRENCY": CURRENCY,
    }
