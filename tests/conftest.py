"""Shared test fixtures — sample compositions matching base_case.yaml."""

from __future__ import annotations

import pytest

from ambassador_sim.config import NetworkComposition, StrategyProfile, PROFILES


@pytest.fixture
def full_quota() -> NetworkComposition:
    """10 businesses backed by exactly 160 users and 40 providers."""
    return NetworkComposition(
        businesses=10,
        users=160,
        providers=40,
        user_activity_rate=25,
        provider_activity_rate=25,
        premium_rate=30,
        match_rate=10,
    )


@pytest.fixture
def short_on_users() -> NetworkComposition:
    """Same network with only half the users the businesses need."""
    return NetworkComposition(
        businesses=10,
        users=80,
        providers=40,
        user_activity_rate=25,
        provider_activity_rate=25,
        premium_rate=30,
        match_rate=10,
    )


@pytest.fixture
def empty() -> NetworkComposition:
    return NetworkComposition()


@pytest.fixture
def balanced() -> StrategyProfile:
    return PROFILES["balanced"]
