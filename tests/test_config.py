from __future__ import annotations

import dataclasses

import pytest

from core.config import PREMIUM_TOKEN_EMISSION, SimulationParameters, default_parameters


def test_defaults_match_reference_values():
    p = default_parameters()
    assert p.monthly_revenue == 80_000
    assert p.on_chain_sales_percent == 40
    assert p.monthly_revenue_increase == 7
    assert p.revenue_share == 7
    assert p.premium_token_emission == PREMIUM_TOKEN_EMISSION == 32_000
    assert p.initial_pool_size == PREMIUM_TOKEN_EMISSION
    assert p.initial_token_rate == 1.0
    assert p.months == 12
    assert p.pool_size_fallback == "emission"


def test_parameters_are_immutable():
    p = default_parameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.months = 24


def test_builder_returns_fresh_records_and_applies_overrides():
    a = default_parameters()
    b = default_parameters(months=24)
    assert a.months == 12
    assert b.months == 24
    assert default_parameters() == a


def test_with_updates_copies():
    p = default_parameters()
    q = p.with_updates(revenue_share=10.0)
    assert isinstance(q, SimulationParameters)
    assert q.revenue_share == 10.0
    assert p.revenue_share == 7.0


def test_unset_pool_follows_emission():
    bare = SimulationParameters(80_000, 40, 7, 7)
    assert bare.initial_pool_size == 0.0
    assert default_parameters(premium_token_emission=1_000.0).initial_pool_size == 1_000.0
    assert default_parameters(premium_token_emission=1_000.0, initial_pool_size=5.0).initial_pool_size == 5.0
