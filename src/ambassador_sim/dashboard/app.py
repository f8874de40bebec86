"""Ambassador Earnings Simulator — Streamlit dashboard.

Layout: sidebar inputs (presets + composition controls) → main area with
two tabs (Calculator | Goal mode).
Goal mode runs one search per weighting profile and applies the
recommended (balanced) result to the sidebar controls.

Run with:
    streamlit run src/ambassador_sim/dashboard/app.py
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ambassador_sim.api.formatting import format_amount, format_currency, format_difference
from ambassador_sim.config import constants
from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.presets import PRESETS
from ambassador_sim.config.strategy import PROFILES
from ambassador_sim.engine.earnings import evaluate
from ambassador_sim.engine.goal_seek import compare_strategies
from ambassador_sim.engine.quota import required_network

# Control keys, one per composition field
_FIELDS = (
    "businesses", "users", "providers",
    "user_activity_rate", "provider_activity_rate", "premium_rate", "match_rate",
)

st.set_page_config(page_title="Ambassador Earnings Simulator", page_icon="💸", layout="wide")


def _apply(composition: NetworkComposition) -> None:
    """Push a composition into the sidebar controls."""
    for name in _FIELDS:
        st.session_state[name] = int(getattr(composition, name))


def _on_goal() -> None:
    """Search all profiles and apply the recommended one to the controls."""
    comparison = compare_strategies(st.session_state["goal"])
    st.session_state["comparison"] = comparison
    _apply(comparison.recommended_strategy.composition)


# First load: open on the default goal with the balanced strategy applied
if "comparison" not in st.session_state:
    st.session_state["goal"] = constants.DEFAULT_GOAL
    _on_goal()


def _on_businesses_change() -> None:
    users, providers = required_network(st.session_state["businesses"])
    st.session_state["users"] = users
    st.session_state["providers"] = providers


def _on_users_change() -> None:
    minimum, _ = required_network(st.session_state["businesses"])
    st.session_state["users"] = max(st.session_state["users"], minimum)


def _on_providers_change() -> None:
    _, minimum = required_network(st.session_state["businesses"])
    st.session_state["providers"] = max(st.session_state["providers"], minimum)


# ---------------------------------------------------------------------------
# SIDEBAR: inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Your network")

with st.sidebar.expander("Presets", expanded=True):
    cols = st.columns(2)
    for i, (name, preset) in enumerate(PRESETS.items()):
        cols[i % 2].button(name.replace("-", " ").title(), key=f"preset_{name}",
                           on_click=_apply, args=(preset,), use_container_width=True)

with st.sidebar.expander("Network", expanded=True):
    st.number_input("Businesses", min_value=0, step=1, key="businesses", on_change=_on_businesses_change,
                    help=f"Each pays {format_currency(constants.BUSINESS_FEE)}/month once backed by "
                         f"{constants.USERS_PER_BUSINESS} users and {constants.PROVIDERS_PER_BUSINESS} providers")
    c1, c2 = st.columns(2)
    c1.number_input("Users", min_value=0, step=16, key="users", on_change=_on_users_change)
    c2.number_input("Providers", min_value=0, step=4, key="providers", on_change=_on_providers_change)

with st.sidebar.expander("Activity", expanded=True):
    st.slider("Active users %", 0, 100, key="user_activity_rate")
    st.slider("Active providers %", 0, 100, key="provider_activity_rate")
    st.slider("Premium %", 0, 100, key="premium_rate",
              help="Share of users + providers paying for premium")
    st.slider("Match %", 0, 100, key="match_rate",
              help="Transactions where you referred both user and provider (2% instead of 1%)")

composition = NetworkComposition(**{name: st.session_state[name] for name in _FIELDS})
breakdown = evaluate(composition)

# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------
st.title("Ambassador Earnings Simulator")

tab_calc, tab_goal = st.tabs(["Calculator", "Goal mode"])

with tab_calc:
    c1, c2, c3 = st.columns(3)
    c1.metric("Monthly income", format_currency(breakdown.monthly_total))
    c2.metric(f"vs {format_currency(constants.TRADITIONAL_SALARY)} salary",
              format_difference(breakdown.salary_difference))
    c3.metric("Pending (quota)", format_currency(breakdown.business_fee_pending))

    q = breakdown.quota
    if q.pending_businesses:
        st.warning(
            f"{q.pending_businesses} of {composition.businesses} businesses are pending: "
            f"refer {q.users_shortfall} more users and {q.providers_shortfall} more providers "
            f"to release {format_currency(breakdown.business_fee_pending)}/month."
        )

    streams = breakdown.streams()
    fig = go.Figure(go.Bar(
        x=list(streams.values()),
        y=[k.title() for k in streams],
        orientation="h",
        text=[format_amount(v) for v in streams.values()],
    ))
    fig.update_layout(height=280, margin=dict(l=10, r=10, t=30, b=10), title="Income by stream (MXN)")
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("How is this calculated?"):
        st.markdown(
            f"- **Businesses**: {q.eligible_businesses} eligible × {format_amount(constants.BUSINESS_FEE)}\n"
            f"- **Transactions**: {breakdown.total_transactions} per month "
            f"({breakdown.matched_transactions:.1f} matched at 2%, "
            f"{breakdown.single_transactions:.1f} single at 1%) on a "
            f"{format_amount(constants.AVG_TICKET)} ticket\n"
            f"- **Premium**: {breakdown.premium_subscribers} subscribers × "
            f"{format_amount(constants.PREMIUM_COST)} × {constants.PREMIUM_COMMISSION:.0%}\n"
            f"- The user / provider split of transaction income is proportional to each side's "
            f"transactions and is shown for reference only."
        )

    # Income curve: grow the network at the current rates, on the exact ratio
    sizes = np.unique(np.linspace(0, max(composition.businesses * 2, 20), 41).round().astype(int))
    totals = []
    for b in sizes:
        users, providers = required_network(int(b))
        grown = composition.model_copy(update={"businesses": int(b), "users": users, "providers": providers})
        totals.append(evaluate(grown).monthly_total)
    curve = go.Figure(go.Scatter(x=sizes, y=totals, mode="lines", name="Monthly income"))
    curve.add_hline(y=constants.TRADITIONAL_SALARY, line_dash="dot", annotation_text="Traditional salary")
    curve.update_layout(height=300, margin=dict(l=10, r=10, t=30, b=10),
                        title="Income vs businesses (16:4:1 network)",
                        xaxis_title="Businesses", yaxis_title="MXN / month")
    st.plotly_chart(curve, use_container_width=True)

with tab_goal:
    c1, c2 = st.columns([0.7, 0.3])
    c1.number_input("Target monthly income (MXN)", 0, 10_000_000, step=1_000, key="goal")
    c2.button("Find strategies", type="primary", on_click=_on_goal, use_container_width=True)

    comparison = st.session_state["comparison"]
    st.caption(
        f"Strategies for {format_currency(comparison.target)}/month. "
        f"The recommended one has been applied to your network controls."
    )

    rows = []
    for s in comparison.strategies:
        c = s.composition
        rows.append({
            "Strategy": PROFILES[s.profile].label,
            "Businesses": c.businesses,
            "Users": c.users,
            "Providers": c.providers,
            "Premium": s.premium_subscribers,
            "Total": format_currency(s.breakdown.monthly_total),
            "Target met": "yes" if s.target_met else "no",
        })
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

    cols = st.columns(len(comparison.strategies))
    for col, s in zip(cols, comparison.strategies):
        with col:
            label = PROFILES[s.profile].label
            if s.profile == comparison.recommended:
                label += " (recommended)"
            st.subheader(label)
            for name, val in s.breakdown.streams().items():
                st.write(f"{name.title()}: {format_amount(val)}")
            st.write(f"**Total: {format_currency(s.breakdown.monthly_total)}**")
            st.button("Apply", key=f"apply_{s.profile}", on_click=_apply, args=(s.composition,))
