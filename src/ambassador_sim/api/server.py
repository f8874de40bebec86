"""FastAPI server — HTTP adapter for the ambassador earnings calculator.

Run with:
    uvicorn ambassador_sim.api.server:app --reload --port 8000

Or:
    python -m ambassador_sim.api.server

Endpoints:
    GET  /constants        — business rules (fees, ratios, rates)
    GET  /presets          — all scenario presets
    GET  /presets/{name}   — one preset, evaluated
    GET  /profiles         — the goal-seeking weighting profiles
    POST /evaluate         — raw form fields (or a preset) → earnings breakdown
    POST /goal             — target income → one strategy per profile
    POST /sync             — keep users/providers on the 16:4:1 ratio
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ambassador_sim import __version__
from ambassador_sim.api.formatting import format_amount, format_currency, format_difference
from ambassador_sim.api.inputs import composition_from_form, parse_count
from ambassador_sim.api.narrative import generate_goal_narrative, generate_narrative
from ambassador_sim.config import constants
from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.presets import PRESETS, UnknownPresetError, get_preset
from ambassador_sim.config.strategy import PROFILES
from ambassador_sim.engine.earnings import evaluate
from ambassador_sim.engine.goal_seek import compare_strategies
from ambassador_sim.engine.quota import sync_from_businesses, sync_from_providers, sync_from_users
from ambassador_sim.models.results import EarningsBreakdown

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Ambassador Earnings Simulator API",
    version=__version__,
    description=(
        "Projects an ambassador's monthly earnings from a referral network of "
        "businesses, users and providers, and finds network sizes that reach "
        "a target income."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class EvaluateRequest(BaseModel):
    """Request body for /evaluate.  Field values are raw form input."""
    fields: dict[str, Any] = Field(
        default_factory=dict,
        description="Raw form values keyed by composition field name. Missing or "
                    "unparsable values read as 0. Example: {'businesses': '10', 'users': '160'}",
    )
    preset: str | None = Field(
        default=None,
        description="Preset name. When given, ``fields`` is ignored.",
    )


class EvaluateResponse(BaseModel):
    """Response from /evaluate."""
    composition: NetworkComposition
    breakdown: EarningsBreakdown
    display: dict[str, str]
    narrative: str = ""


class GoalRequest(BaseModel):
    """Request body for /goal."""
    target: Any = Field(
        default=constants.DEFAULT_GOAL,
        description="Target monthly income (MXN). Unparsable or negative input reads as 0.",
    )


class GoalResponse(BaseModel):
    """Response from /goal."""
    target: int
    recommended: str
    strategies: list[dict[str, Any]]
    applied: EvaluateResponse
    narrative: str = ""


class SyncRequest(BaseModel):
    """Request body for /sync."""
    fields: dict[str, Any] = Field(default_factory=dict)
    source: Literal["businesses", "users", "providers"] = Field(
        default="businesses",
        description="Which control changed. 'businesses' resets users/providers to the "
                    "exact ratio; 'users' / 'providers' only raise that side to its minimum.",
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _display(breakdown: EarningsBreakdown) -> dict[str, str]:
    """Formatted output fields as the calculator shows them."""
    return {
        "monthly_income": format_currency(breakdown.monthly_total),
        "extra_income": format_difference(breakdown.salary_difference),
        "businesses_income": format_amount(breakdown.business_fee_income),
        "users_income": format_amount(breakdown.user_tx_income),
        "providers_income": format_amount(breakdown.provider_tx_income),
        "premium_income": format_amount(breakdown.premium_income),
        "pending_income": format_amount(breakdown.business_fee_pending),
    }


def _evaluate_response(composition: NetworkComposition) -> EvaluateResponse:
    breakdown = evaluate(composition)
    return EvaluateResponse(
        composition=composition,
        breakdown=breakdown,
        display=_display(breakdown),
        narrative=generate_narrative(composition, breakdown),
    )


def _preset_or_404(name: str) -> NetworkComposition:
    try:
        return get_preset(name)
    except UnknownPresetError as exc:
        raise HTTPException(status_code=404, detail=str(exc.args[0])) from exc


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — welcome message and pointers."""
    return {
        "name": "Ambassador Earnings Simulator API",
        "version": __version__,
        "docs": "GET /docs (interactive Swagger UI)",
        "start_here": "POST /goal with {'target': 15000}",
    }


@app.get("/constants")
def get_constants():
    """Fixed business rules used by every calculation."""
    return constants.as_dict()


@app.get("/presets")
def list_presets():
    """All scenario presets as compositions."""
    return {name: c.model_dump() for name, c in PRESETS.items()}


@app.get("/presets/{name}", response_model=EvaluateResponse)
def get_preset_endpoint(name: str):
    """One preset, evaluated."""
    return _evaluate_response(_preset_or_404(name))


@app.get("/profiles")
def list_profiles():
    """Weighting profiles used by goal mode."""
    return {name: p.model_dump() for name, p in PROFILES.items()}


@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate_endpoint(req: EvaluateRequest):
    """Evaluate a composition given as raw form fields (or a preset name)."""
    if req.preset is not None:
        composition = _preset_or_404(req.preset)
    else:
        composition = composition_from_form(req.fields)
    logger.info("evaluate %s", composition.model_dump())
    return _evaluate_response(composition)


@app.post("/goal", response_model=GoalResponse)
def goal_endpoint(req: GoalRequest):
    """Search one composition per weighting profile for the target income.

    The recommended (balanced) composition is also evaluated in full, as the
    calculator applies it to its controls.
    """
    target = parse_count(req.target)
    logger.info("goal target=%d", target)
    comparison = compare_strategies(target)
    applied = comparison.recommended_strategy

    strategies = []
    for s in comparison.strategies:
        strategies.append({
            **s.model_dump(),
            "display": _display(s.breakdown),
        })

    return GoalResponse(
        target=target,
        recommended=comparison.recommended,
        strategies=strategies,
        applied=_evaluate_response(applied.composition),
        narrative=generate_goal_narrative(comparison),
    )


@app.post("/sync", response_model=EvaluateResponse)
def sync_endpoint(req: SyncRequest):
    """Apply the quota sync rule for the control that changed, then evaluate."""
    composition = composition_from_form(req.fields)
    if req.source == "businesses":
        composition = sync_from_businesses(composition)
    elif req.source == "users":
        composition = sync_from_users(composition)
    else:
        composition = sync_from_providers(composition)
    return _evaluate_response(composition)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "ambassador_sim.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
