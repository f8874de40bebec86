"""Tests for the HTTP adapter layer.

Covers:
  - Read-only endpoints (/health, /constants, /presets, /profiles)
  - /evaluate with raw form fields and presets
  - /goal and /sync
  - Narrative generation
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ambassador_sim.api.inputs import MAX_COUNT
from ambassador_sim.api.narrative import generate_goal_narrative, generate_narrative
from ambassador_sim.api.server import app
from ambassador_sim.config import NetworkComposition, StrategyProfile, StrategyWeights
from ambassador_sim.engine.earnings import evaluate
from ambassador_sim.engine.goal_seek import compare_strategies


client = TestClient(app)

EXAMPLE_FORM = {
    "businesses": "10",
    "users": "160",
    "providers": "40",
    "user_activity_rate": "25",
    "provider_activity_rate": "25",
    "premium_rate": "30",
    "match_rate": "10",
}


# ═══════════════════════════════════════════════════════════════════════════
# Read-only endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestInfoEndpoints:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        data = client.get("/").json()
        assert data["name"] == "Ambassador Earnings Simulator API"

    def test_constants(self):
        data = client.get("/constants").json()
        assert data["BUSINESS_FEE"] == 200
        assert data["PREMIUM_COST"] == 99

    def test_presets(self):
        data = client.get("/presets").json()
        assert len(data) == 6
        assert data["full-time"]["businesses"] == 110

    def test_preset_evaluated(self):
        resp = client.get("/presets/conservative")
        assert resp.status_code == 200
        data = resp.json()
        assert data["breakdown"]["monthly_total"] == pytest.approx(327.2)
        assert data["display"]["monthly_income"] == "$327 MXN"

    def test_unknown_preset_404(self):
        resp = client.get("/presets/nope")
        assert resp.status_code == 404
        assert "conservative" in resp.json()["detail"]

    def test_profiles(self):
        data = client.get("/profiles").json()
        assert list(data) == ["business-leaning", "balanced", "volume-leaning"]
        assert data["balanced"]["weights"]["business"] == 0.4


# ═══════════════════════════════════════════════════════════════════════════
# /evaluate
# ═══════════════════════════════════════════════════════════════════════════

class TestEvaluate:
    def test_raw_form_fields(self):
        resp = client.post("/evaluate", json={"fields": EXAMPLE_FORM})
        assert resp.status_code == 200
        data = resp.json()
        assert data["composition"]["businesses"] == 10
        assert data["breakdown"]["monthly_total"] == pytest.approx(4_926.0)
        assert data["display"] == {
            "monthly_income": "$4,926 MXN",
            "extra_income": "-$5,074 MXN",
            "businesses_income": "$2,000",
            "users_income": "$440",
            "providers_income": "$110",
            "premium_income": "$2,376",
            "pending_income": "$0",
        }
        assert "MONTHLY INCOME" in data["narrative"]

    def test_pending_visible(self):
        form = dict(EXAMPLE_FORM, users="80")
        data = client.post("/evaluate", json={"fields": form}).json()
        assert data["breakdown"]["business_fee_pending"] == 1_000
        assert data["display"]["pending_income"] == "$1,000"

    def test_garbage_reads_as_zero(self):
        data = client.post("/evaluate", json={"fields": {"businesses": "abc", "users": -4}}).json()
        assert data["breakdown"]["monthly_total"] == 0
        assert data["display"]["monthly_income"] == "$0 MXN"

    def test_empty_body(self):
        resp = client.post("/evaluate", json={})
        assert resp.status_code == 200
        assert resp.json()["breakdown"]["monthly_total"] == 0

    def test_preset_overrides_fields(self):
        data = client.post("/evaluate", json={"fields": EXAMPLE_FORM, "preset": "moderate"}).json()
        assert data["composition"]["match_rate"] == 40

    def test_unknown_preset(self):
        resp = client.post("/evaluate", json={"preset": "nope"})
        assert resp.status_code == 404

    def test_huge_count_clamped(self):
        resp = client.post("/evaluate", json={"fields": {"users": "9" * 400, "user_activity_rate": "25"}})
        assert resp.status_code == 200
        data = resp.json()
        assert data["composition"]["users"] == MAX_COUNT
        assert data["breakdown"]["active_users"] == MAX_COUNT // 4


# ═══════════════════════════════════════════════════════════════════════════
# /goal and /sync
# ═══════════════════════════════════════════════════════════════════════════

class TestGoal:
    def test_three_strategies_balanced_applied(self):
        resp = client.post("/goal", json={"target": "15000"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["target"] == 15_000
        assert data["recommended"] == "balanced"
        assert [s["profile"] for s in data["strategies"]] == [
            "business-leaning", "balanced", "volume-leaning",
        ]
        applied = data["applied"]["composition"]
        assert applied["businesses"] == 35
        assert applied["users"] == 560
        assert applied["providers"] == 140
        for s in data["strategies"]:
            assert s["target_met"]
            assert s["display"]["monthly_income"].endswith(" MXN")

    def test_default_target(self):
        data = client.post("/goal", json={}).json()
        assert data["target"] == 15_000

    def test_unparsable_target_is_zero(self):
        data = client.post("/goal", json={"target": "lots"}).json()
        assert data["target"] == 0
        assert all(s["composition"]["businesses"] == 0 for s in data["strategies"])

    def test_huge_target_clamped(self):
        resp = client.post("/goal", json={"target": "1" + "0" * 400})
        assert resp.status_code == 200
        data = resp.json()
        assert data["target"] == MAX_COUNT
        assert data["applied"]["breakdown"]["monthly_total"] >= MAX_COUNT * 0.95


class TestSync:
    def test_from_businesses(self):
        data = client.post("/sync", json={"fields": {"businesses": "5", "users": "999"}}).json()
        assert data["composition"]["users"] == 80
        assert data["composition"]["providers"] == 20
        assert data["breakdown"]["quota"]["pending_businesses"] == 0

    def test_from_users_raises_minimum(self):
        body = {"fields": {"businesses": "5", "users": "10", "providers": "20"}, "source": "users"}
        data = client.post("/sync", json=body).json()
        assert data["composition"]["users"] == 80

    def test_from_providers_keeps_surplus(self):
        body = {"fields": {"businesses": "5", "users": "80", "providers": "100"}, "source": "providers"}
        data = client.post("/sync", json=body).json()
        assert data["composition"]["providers"] == 100

    def test_bad_source_rejected(self):
        resp = client.post("/sync", json={"source": "premium"})
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════════════
# Narrative
# ═══════════════════════════════════════════════════════════════════════════

class TestNarrative:
    def test_full_quota(self, full_quota: NetworkComposition):
        text = generate_narrative(full_quota, evaluate(full_quota))
        assert "Total: $4,926 MXN" in text
        assert "Eligible businesses: 10 of 10" in text
        assert "Pending fees" not in text

    def test_pending_recommendation(self, short_on_users: NetworkComposition):
        text = generate_narrative(short_on_users, evaluate(short_on_users))
        assert "Pending fees NOT counted in the total: $1,000 MXN" in text
        assert "Refer 80 users to release $1,000 MXN" in text

    def test_above_salary(self):
        c = NetworkComposition(businesses=110, users=1_760, providers=440, match_rate=60)
        text = generate_narrative(c, evaluate(c))
        assert "below a traditional salary" not in text

    def test_goal_narrative(self):
        text = generate_goal_narrative(compare_strategies(15_000))
        assert "STRATEGIES FOR $15,000 MXN / MONTH" in text
        assert "Balanced *" in text
        assert "best-effort" not in text

    def test_goal_narrative_flags_shortfall(self):
        stuck = StrategyProfile(name="stuck", weights=StrategyWeights(business=0.0, user=0.5, provider=0.5))
        text = generate_goal_narrative(compare_strategies(5_000, profiles=[stuck]))
        assert "stuck" in text
        assert "best-effort" in text
