from __future__ import annotations

import math

import pytest

from core.config import SimulationParameters, default_parameters
from core.errors import (
    InvalidAmount,
    InvalidDivisor,
    InvalidHorizon,
    OutOfRangePercentage,
    SimulationError,
)
from engine.projection import annualize_growth, parameter_errors, project


def _replay(params):
    """Straight re-statement of the monthly recurrence for comparison."""
    revenue = params.monthly_revenue
    pool = params.initial_pool_size or params.premium_token_emission
    rates = []
    for _ in range(params.months):
        pool += revenue * params.on_chain_sales_percent / 100 * params.revenue_share / 100
        rates.append(pool / params.premium_token_emission)
        revenue *= 1 + params.monthly_revenue_increase / 100
    return pool, rates


def test_first_month_of_reference_run(reference_params):
    first = project(reference_params).months[0]
    assert first.month == 1
    assert first.revenue == pytest.approx(80_000)
    assert first.product_sales == pytest.approx(32_000)
    assert first.revenue_share_amount == pytest.approx(2_240)
    assert first.pool_top_up == first.revenue_share_amount
    assert first.pool_size == pytest.approx(34_240)
    assert first.token_rate == pytest.approx(1.07)


def test_reference_run_matches_replay(reference_params):
    result = project(reference_params)
    final_pool, rates = _replay(reference_params)

    assert result.final.pool_size == pytest.approx(final_pool, rel=1e-12)
    assert [r.token_rate for r in result.months] == pytest.approx(rates, rel=1e-12)
    assert result.apy == pytest.approx((rates[-1] / 1.0 - 1) * 100, rel=1e-12)
    assert result.initial_token_rate == 1.0


@pytest.mark.parametrize("months", [1, 6, 12, 36])
def test_length_and_contiguous_months(months):
    result = project(default_parameters(months=months))
    assert len(result.months) == months
    assert [r.month for r in result.months] == list(range(1, months + 1))


def test_pool_and_rate_non_decreasing(reference_params):
    records = project(reference_params.with_updates(months=36)).months
    for prev, cur in zip(records, records[1:]):
        assert cur.pool_size >= prev.pool_size
        assert cur.token_rate >= prev.token_rate


def test_rate_is_pool_over_emission():
    params = default_parameters(premium_token_emission=12_345.0, initial_pool_size=5_000.0)
    for r in project(params).months:
        assert math.isclose(r.token_rate, r.pool_size / 12_345.0, rel_tol=1e-9)


def test_revenue_compounds_month_over_month():
    params = default_parameters(monthly_revenue_increase=3.5, months=24)
    records = project(params).months
    assert records[0].revenue == params.monthly_revenue
    for prev, cur in zip(records, records[1:]):
        assert math.isclose(cur.revenue, prev.revenue * 1.035, rel_tol=1e-12)


def test_apy_for_twelve_months_is_unscaled(reference_params):
    result = project(reference_params)
    assert result.apy == ((result.final_token_rate / result.initial_token_rate) - 1) * 100


def test_apy_rescales_linearly_for_other_horizons():
    result = project(default_parameters(months=6))
    growth = (result.final_token_rate / result.initial_token_rate - 1) * 100
    assert result.apy == pytest.approx(growth * 2)
    assert annualize_growth(1.1, 1.0, 24) == pytest.approx(5.0)


def test_no_growth_and_no_share_keeps_pool_flat(flat_params):
    result = project(flat_params)
    assert all(r.pool_size == flat_params.initial_pool_size for r in result.months)
    assert all(r.token_rate == 1.0 for r in result.months)
    assert result.apy == 0


def test_zero_horizon_rejected():
    with pytest.raises(InvalidHorizon):
        project(default_parameters(months=0))


def test_non_integer_horizon_rejected():
    with pytest.raises(InvalidHorizon):
        project(default_parameters(months=2.5))


def test_zero_emission_rejected():
    with pytest.raises(InvalidDivisor):
        project(default_parameters(premium_token_emission=0.0))


def test_zero_initial_rate_rejected():
    with pytest.raises(InvalidDivisor):
        project(default_parameters(initial_token_rate=0.0))


@pytest.mark.parametrize("field, value", [
    ("on_chain_sales_percent", 101.0),
    ("on_chain_sales_percent", -1.0),
    ("revenue_share", 150.0),
    ("monthly_revenue_increase", -0.5),
])
def test_out_of_range_percentages_rejected(field, value):
    with pytest.raises(OutOfRangePercentage):
        project(default_parameters(**{field: value}))


def test_nan_emission_rejected():
    with pytest.raises(InvalidDivisor):
        project(default_parameters(premium_token_emission=float("nan")))


def test_negative_amounts_rejected():
    with pytest.raises(InvalidAmount):
        project(default_parameters(monthly_revenue=-1.0))
    with pytest.raises(InvalidAmount):
        project(default_parameters(initial_pool_size=-10.0))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        project(default_parameters(months=-3))
    assert issubclass(InvalidHorizon, SimulationError)


def test_parameter_errors_collects_everything():
    params = default_parameters(months=0, premium_token_emission=0.0, revenue_share=200.0)
    kinds = [type(e) for e in parameter_errors(params)]
    assert kinds == [InvalidHorizon, InvalidDivisor, OutOfRangePercentage]
    assert parameter_errors(default_parameters()) == []


def test_zero_pool_falls_back_to_emission():
    result = project(default_parameters(initial_pool_size=0.0, revenue_share=0.0))
    assert result.months[0].pool_size == 32_000
    assert result.months[0].token_rate == 1.0


def test_zero_pool_without_fallback_starts_empty():
    params = default_parameters(initial_pool_size=0.0, pool_size_fallback="none")
    first = project(params).months[0]
    assert first.pool_size == pytest.approx(2_240)
    assert first.token_rate == pytest.approx(2_240 / 32_000)


def test_unknown_fallback_policy_rejected():
    with pytest.raises(InvalidAmount):
        project(default_parameters(pool_size_fallback="zero"))


def test_repeated_calls_are_independent(reference_params):
    a = project(reference_params)
    b = project(reference_params)
    assert a == b
    assert a.months is not b.months


def test_custom_emission_alone_opens_rate_at_one():
    bare = SimulationParameters(80_000, 40, 7, 0, premium_token_emission=1_000.0)
    assert project(bare).months[0].token_rate == 1.0

    result = project(default_parameters(premium_token_emission=1_000.0, revenue_share=0.0))
    assert result.months[0].token_rate == 1.0
    assert result.apy == 0


@pytest.mark.parametrize("changes, error", [
    ({"monthly_revenue": math.inf}, InvalidAmount),
    ({"initial_pool_size": math.inf}, InvalidAmount),
    ({"monthly_revenue": 0.0, "monthly_revenue_increase": math.inf, "months": 3}, OutOfRangePercentage),
    ({"premium_token_emission": math.inf}, InvalidDivisor),
    ({"initial_token_rate": math.inf}, InvalidDivisor),
])
def test_infinite_inputs_rejected(changes, error):
    with pytest.raises(error):
        project(default_parameters(**changes))
