"""Narrative generator — plain-English interpretation of earnings results.

Turns an ``EarningsBreakdown`` (or a goal comparison) into a text block
that explains where the money comes from, what the quota is holding back,
and what to do next.
"""

from __future__ import annotations

from ambassador_sim.api.formatting import format_amount, format_currency, format_difference
from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.constants import TRADITIONAL_SALARY
from ambassador_sim.config.strategy import PROFILES
from ambassador_sim.models.results import EarningsBreakdown, GoalComparison


def _header(sections: list[str], title: str) -> None:
    if sections:
        sections.append("")
    sections.append("=" * 60)
    sections.append(title)
    sections.append("=" * 60)


def generate_narrative(composition: NetworkComposition, breakdown: EarningsBreakdown) -> str:
    """Generate a plain-English narrative for one evaluated composition.

    Covers the network, income by stream, quota status and recommendations.
    """
    c = composition
    b = breakdown
    q = b.quota

    sections: list[str] = []

    # ── 1. Network ──
    _header(sections, "NETWORK")
    sections.append(
        f"Businesses: {c.businesses}\n"
        f"Users: {c.users} ({c.user_activity_rate:.0f}% active → {b.active_users} transactions)\n"
        f"Providers: {c.providers} ({c.provider_activity_rate:.0f}% active → {b.active_providers} transactions)\n"
        f"Matched transactions: {c.match_rate:.0f}%\n"
        f"Premium subscribers: {b.premium_subscribers} ({c.premium_rate:.0f}% of {c.registered})"
    )

    # ── 2. Income ──
    _header(sections, "MONTHLY INCOME")
    streams = [
        ("Business fees", b.business_fee_income),
        ("User transactions", b.user_tx_income),
        ("Provider transactions", b.provider_tx_income),
        ("Premium subscriptions", b.premium_income),
    ]
    for name, val in streams:
        pct = (val / b.monthly_total * 100) if b.monthly_total > 0 else 0
        sections.append(f"  {name:25s}  {format_amount(val):>12s}  ({pct:5.1f}%)")
    sections.append(f"\nTotal: {format_currency(b.monthly_total)}")
    sections.append(
        f"Versus a {format_currency(TRADITIONAL_SALARY)} salary: {format_difference(b.salary_difference)}"
    )

    # ── 3. Quota ──
    _header(sections, "QUOTA (16 USERS + 4 PROVIDERS PER BUSINESS)")
    sections.append(
        f"Eligible businesses: {q.eligible_businesses} of {c.businesses}\n"
        f"Pending businesses: {q.pending_businesses}"
    )
    if q.pending_businesses:
        sections.append(
            f"Pending fees NOT counted in the total: {format_currency(b.business_fee_pending)}"
        )

    # ── 4. Recommendations ──
    _header(sections, "RECOMMENDATIONS")
    recs: list[str] = []
    if q.pending_businesses:
        missing = []
        if q.users_shortfall:
            missing.append(f"{q.users_shortfall} users")
        if q.providers_shortfall:
            missing.append(f"{q.providers_shortfall} providers")
        recs.append(
            f"Refer {' and '.join(missing)} to release {format_currency(b.business_fee_pending)} "
            f"of pending business fees."
        )
    if b.total_transactions > 0 and c.match_rate < 50:
        recs.append(
            "Refer both sides of a transaction (user and provider) to earn "
            "the doubled 2% commission on more of your volume."
        )
    if b.salary_difference < 0:
        recs.append(
            f"You are {format_currency(-b.salary_difference)} below a traditional salary. "
            f"Use goal mode to size the network you need."
        )
    if not recs:
        recs.append("Quota met and income above a traditional salary. Keep the ratio as you grow.")
    for i, rec in enumerate(recs, 1):
        sections.append(f"  {i}. {rec}")

    return "\n".join(sections)


def generate_goal_narrative(comparison: GoalComparison) -> str:
    """Side-by-side summary of the strategies found for one target."""
    if not comparison.strategies:
        return "No strategies to compare."

    sections: list[str] = []
    _header(sections, f"STRATEGIES FOR {format_currency(comparison.target)} / MONTH")

    header = f"{'Strategy':18s}  {'Businesses':>10s}  {'Users':>7s}  {'Providers':>9s}  {'Premium':>7s}  {'Total':>12s}"
    sections.append(header)
    sections.append("-" * len(header))
    for s in comparison.strategies:
        label = PROFILES[s.profile].label if s.profile in PROFILES else s.profile
        if s.profile == comparison.recommended:
            label += " *"
        c = s.composition
        sections.append(
            f"{label:18s}  {c.businesses:>10d}  {c.users:>7d}  {c.providers:>9d}  "
            f"{s.premium_subscribers:>7d}  {format_amount(s.breakdown.monthly_total):>12s}"
        )

    sections.append("\n* recommended")
    short = [s.profile for s in comparison.strategies if not s.target_met]
    if short:
        sections.append(
            f"Below target after the full search: {', '.join(short)}. "
            f"These are best-effort results."
        )
    return "\n".join(sections)
