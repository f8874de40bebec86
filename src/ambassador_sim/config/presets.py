"""Scenario presets — literal compositions selectable by name.

Selecting a preset is a table lookup, not a search.
"""

from __future__ import annotations

from ambassador_sim.config.composition import NetworkComposition


class UnknownPresetError(KeyError):
    """Raised for a preset name outside the table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unknown preset {name!r}. Valid presets: {', '.join(PRESETS)}"
        )


PRESETS: dict[str, NetworkComposition] = {
    # Just starting out, few matches
    "conservative": NetworkComposition(
        businesses=1, users=16, providers=4,
        user_activity_rate=20, provider_activity_rate=25,
        premium_rate=10, match_rate=20,
    ),
    # Established network
    "moderate": NetworkComposition(
        businesses=10, users=160, providers=40,
        user_activity_rate=30, provider_activity_rate=35,
        premium_rate=15, match_rate=40,
    ),
    "optimistic": NetworkComposition(
        businesses=30, users=480, providers=120,
        user_activity_rate=40, provider_activity_rate=45,
        premium_rate=20, match_rate=50,
    ),
    # Full dedication, better networking
    "full-time": NetworkComposition(
        businesses=110, users=1_760, providers=440,
        user_activity_rate=35, provider_activity_rate=40,
        premium_rate=25, match_rate=60,
    ),
    # B2B
    "business-focus": NetworkComposition(
        businesses=100, users=1_600, providers=400,
        user_activity_rate=25, provider_activity_rate=30,
        premium_rate=15, match_rate=30,
    ),
    # Far more users/providers than the 20 businesses require (320 / 80)
    "volume-focus": NetworkComposition(
        businesses=20, users=2_500, providers=800,
        user_activity_rate=50, provider_activity_rate=55,
        premium_rate=30, match_rate=45,
    ),
}


def get_preset(name: str) -> NetworkComposition:
    """Return the composition stored under ``name``."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name) from None
