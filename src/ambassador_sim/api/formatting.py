"""Display formatting — whole pesos with thousands separators."""

from __future__ import annotations

from ambassador_sim.config.constants import CURRENCY
from ambassador_sim.engine.earnings import round_half_up


def format_amount(amount: float) -> str:
    """``12345.6`` → ``"$12,346"``."""
    value = round_half_up(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,}"


def format_currency(amount: float) -> str:
    """``12345.6`` → ``"$12,346 MXN"``."""
    return f"{format_amount(amount)} {CURRENCY}"


def format_difference(amount: float) -> str:
    """Signed amount: ``"+$2,000 MXN"`` or ``"-$500 MXN"``."""
    sign = "+" if amount >= 0 else "-"
    return f"{sign}${round_half_up(abs(amount)):,} {CURRENCY}"
