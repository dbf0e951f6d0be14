"""Shared pytest fixtures. Living at the project root also puts the
top-level packages (core, engine, ...) on sys.path for the tests."""

from __future__ import annotations

import pytest

from core.config import SimulationParameters, default_parameters


@pytest.fixture
def reference_params() -> SimulationParameters:
    """The reference defaults: 80k revenue, 40% on-chain, 7% growth, 7% share."""
    return default_parameters()


@pytest.fixture
def flat_params() -> SimulationParameters:
    """No revenue growth and nothing shared into the pool."""
    return default_parameters(monthly_revenue_increase=0.0, revenue_share=0.0)
