"""Configuration models — compositions, strategy profiles, presets, scenarios."""

from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.strategy import StrategyProfile, StrategyWeights, PROFILES, RECOMMENDED_PROFILE
from ambassador_sim.config.presets import PRESETS, UnknownPresetError, get_preset
from ambassador_sim.config.scenario import Scenario, load_scenario, dump_scenario

__all__ = [
    "NetworkComposition",
    "StrategyProfile",
    "StrategyWeights",
    "PROFILES",
    "RECOMMENDED_PROFILE",
    "PRESETS",
    "UnknownPresetError",
    "get_preset",
    "Scenario",
    "load_scenario",
    "dump_scenario",
]
