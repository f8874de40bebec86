"""Pydantic validation tests — clamping, rejection, immutability, presets."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ambassador_sim.config import (
    PRESETS,
    PROFILES,
    RECOMMENDED_PROFILE,
    NetworkComposition,
    StrategyProfile,
    StrategyWeights,
    UnknownPresetError,
    get_preset,
)
from ambassador_sim.config import constants


# ═══════════════════════════════════════════════════════════════════════════
# NetworkComposition
# ═══════════════════════════════════════════════════════════════════════════

class TestCompositionValidation:
    def test_defaults_are_valid(self):
        c = NetworkComposition()
        assert c.businesses == 0
        assert c.registered == 0

    def test_rates_clamped_high(self):
        c = NetworkComposition(user_activity_rate=150, provider_activity_rate=101,
                               premium_rate=1e6, match_rate=100.5)
        assert c.user_activity_rate == 100
        assert c.provider_activity_rate == 100
        assert c.premium_rate == 100
        assert c.match_rate == 100

    def test_rates_clamped_low(self):
        c = NetworkComposition(user_activity_rate=-5, match_rate=-0.1)
        assert c.user_activity_rate == 0
        assert c.match_rate == 0

    def test_numeric_strings_accepted(self):
        c = NetworkComposition(businesses="3", premium_rate="12.5")
        assert c.businesses == 3
        assert c.premium_rate == 12.5

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            NetworkComposition(users=-1)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            NetworkComposition(businesses="many")

    def test_nan_rate_rejected(self):
        with pytest.raises(ValidationError):
            NetworkComposition(match_rate=float("nan"))

    def test_frozen(self):
        c = NetworkComposition(businesses=1)
        with pytest.raises(ValidationError):
            c.businesses = 2

    def test_registered(self):
        assert NetworkComposition(users=30, providers=7).registered == 37


# ═══════════════════════════════════════════════════════════════════════════
# Strategy profiles
# ═══════════════════════════════════════════════════════════════════════════

class TestProfiles:
    def test_three_canonical_profiles(self):
        assert list(PROFILES) == ["business-leaning", "balanced", "volume-leaning"]
        assert RECOMMENDED_PROFILE == "balanced"

    def test_weights_sum_to_one(self):
        for p in PROFILES.values():
            w = p.weights
            assert w.business + w.user + w.provider == pytest.approx(1.0)

    def test_business_share_ordering(self):
        shares = [p.weights.business for p in PROFILES.values()]
        assert shares == sorted(shares, reverse=True)

    def test_weight_above_one_rejected(self):
        with pytest.raises(ValidationError):
            StrategyWeights(business=1.5)

    def test_rate_above_hundred_rejected(self):
        with pytest.raises(ValidationError):
            StrategyProfile(premium_rate=120)


# ═══════════════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════════════

class TestPresets:
    def test_names(self):
        assert set(PRESETS) == {
            "conservative", "moderate", "optimistic",
            "full-time", "business-focus", "volume-focus",
        }

    def test_lookup(self):
        moderate = get_preset("moderate")
        assert moderate.businesses == 10
        assert moderate.users == 160
        assert moderate.providers == 40
        assert moderate.match_rate == 40

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError) as exc_info:
            get_preset("aggressive")
        assert "conservative" in str(exc_info.value)
        assert exc_info.value.name == "aggressive"

    def test_unknown_preset_is_key_error(self):
        with pytest.raises(KeyError):
            get_preset("")

    def test_ratio_presets_on_quota(self):
        for name, c in PRESETS.items():
            if name == "volume-focus":
                continue
            assert c.users == c.businesses * constants.USERS_PER_BUSINESS
            assert c.providers == c.businesses * constants.PROVIDERS_PER_BUSINESS

    def test_volume_focus_exceeds_quota(self):
        c = PRESETS["volume-focus"]
        assert c.users > c.businesses * constants.USERS_PER_BUSINESS
        assert c.providers > c.businesses * constants.PROVIDERS_PER_BUSINESS


def test_constants_table():
    table = constants.as_dict()
    assert table["USERS_PER_BUSINESS"] == 16
    assert table["PROVIDERS_PER_BUSINESS"] == 4
    assert table["BUSINESS_FEE"] == 200
    assert table["TX_RATE_MATCHED"] == 2 * table["TX_RATE_SINGLE"]
    assert table["CURRENCY"] == "MXN"
