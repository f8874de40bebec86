"""Top-level scenario — bundles a composition, a goal, and custom profiles.

Scenarios can be kept as YAML files (see ``scenarios/base_case.yaml``)::

    name: Base case
    composition:
      businesses: 10
      users: 160
      ...
    goal: 15000
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from ambassador_sim.config.composition import NetworkComposition
from ambassador_sim.config.constants import DEFAULT_GOAL
from ambassador_sim.config.strategy import StrategyProfile


class Scenario(BaseModel):
    """Complete input bundle for one calculator session."""

    name: str = Field(default="Base case", description="Human label")
    description: str = Field(default="", description="Free-text notes")
    composition: NetworkComposition = Field(default_factory=NetworkComposition)
    goal: float = Field(default=DEFAULT_GOAL, ge=0, description="Target monthly income (MXN)")
    profiles: list[StrategyProfile] = Field(
        default_factory=list,
        description="Extra weighting profiles stored with the scenario; callers pass "
                    "them to compare_strategies alongside the canonical three.",
    )


def load_scenario(path: str | Path) -> Scenario:
    """Read a YAML scenario file into a validated ``Scenario``."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)


def dump_scenario(scenario: Scenario, path: str | Path) -> None:
    """Write ``scenario`` as YAML."""
    with open(path, "w") as f:
        yaml.safe_dump(scenario.model_dump(), f, sort_keys=False)
