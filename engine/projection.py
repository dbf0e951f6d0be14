"""
Projection engine — deterministic month-by-month pool and token-rate math.

Each month:
  product_sales        = revenue × on_chain_sales_percent / 100
  revenue_share_amount = product_sales × revenue_share / 100
  pool_size           += revenue_share_amount
  token_rate           = pool_size / premium_token_emission
and revenue compounds by monthly_revenue_increase before the next month.

The engine is a pure function: no I/O, no logging, no state kept between
calls. Invalid parameters raise before anything is computed.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import List, Tuple

from core.config import SimulationParameters
from core.errors import (
    InvalidAmount,
    InvalidDivisor,
    InvalidHorizon,
    OutOfRangePercentage,
    SimulationError,
)

from .pool import resolve_initial_pool_size


@dataclass(frozen=True)
class MonthRecord:
    """Financial state at the end of one projected month (1-indexed)."""
    month: int
    revenue: float
    product_sales: float
    revenue_share_amount: float
    pool_top_up: float  # same value as revenue_share_amount: this month's increment
    pool_size: float    # cumulative, after this month's top-up
    token_rate: float


@dataclass(frozen=True)
class ProjectionResult:
    months: Tuple[MonthRecord, ...]
    initial_token_rate: float
    apy: float

    @property
    def final(self) -> MonthRecord:
        return self.months[-1]

    @property
    def final_token_rate(self) -> float:
        return self.months[-1].token_rate


def parameter_errors(params: SimulationParameters) -> List[SimulationError]:
    """
    Every precondition violation in ``params``, in a stable order.

    Comparisons are written as ``not (x > 0)`` so NaN is rejected too;
    infinities are rejected by the isfinite checks.
    """
    errors: List[SimulationError] = []

    months = params.months
    if isinstance(months, bool) or not isinstance(months, numbers.Integral):
        errors.append(InvalidHorizon(f"months must be a whole number, got {months!r}."))
    elif months < 1:
        errors.append(InvalidHorizon(f"months must be at least 1, got {months}."))

    if not (math.isfinite(params.premium_token_emission) and params.premium_token_emission > 0):
        errors.append(InvalidDivisor(
            f"premium_token_emission must be finite and > 0, got {params.premium_token_emission}."
        ))
    if not (math.isfinite(params.initial_token_rate) and params.initial_token_rate > 0):
        errors.append(InvalidDivisor(
            f"initial_token_rate must be finite and > 0, got {params.initial_token_rate}."
        ))

    for name in ("on_chain_sales_percent", "revenue_share"):
        value = getattr(params, name)
        if not (0 <= value <= 100):
            errors.append(OutOfRangePercentage(f"{name} must be within [0, 100], got {value}."))
    if not (math.isfinite(params.monthly_revenue_increase) and params.monthly_revenue_increase >= 0):
        errors.append(OutOfRangePercentage(
            f"monthly_revenue_increase must be finite and >= 0, got {params.monthly_revenue_increase}."
        ))

    if not (math.isfinite(params.monthly_revenue) and params.monthly_revenue >= 0):
        errors.append(InvalidAmount(f"monthly_revenue must be finite and >= 0, got {params.monthly_revenue}."))
    if not (math.isfinite(params.initial_pool_size) and params.initial_pool_size >= 0):
        errors.append(InvalidAmount(
            f"initial_pool_size must be finite and >= 0, got {params.initial_pool_size}."
        ))
    if params.pool_size_fallback not in ("emission", "none"):
        errors.append(InvalidAmount(
            f"Unknown pool_size_fallback {params.pool_size_fallback!r}; expected 'emission' or 'none'."
        ))

    return errors


def annualize_growth(final_rate: float, initial_rate: float, months: int) -> float:
    """
    Growth of the token rate over ``months``, rescaled to a 12-month figure.

    ((final / initial) - 1) × 100 × (12 / months). This is a linear rescale of
    the realized growth, not a compounding annualization: a 6-month run that
    gained 10% reports 20%, a 24-month run that gained 10% reports 5%. For a
    12-month horizon the factor is exactly 1.
    """
    return ((final_rate / initial_rate) - 1.0) * 100.0 * (12.0 / months)


def project(params: SimulationParameters) -> ProjectionResult:
    """
    Project the pool and token rate month by month.

    Raises
    ------
    InvalidHorizon, InvalidDivisor, OutOfRangePercentage, InvalidAmount
        On the first violated precondition; nothing is computed.
    """
    errors = parameter_errors(params)
    if errors:
        raise errors[0]

    on_chain_fraction = params.on_chain_sales_percent / 100.0
    share_fraction = params.revenue_share / 100.0
    growth_factor = 1.0 + params.monthly_revenue_increase / 100.0
    emission = float(params.premium_token_emission)

    current_revenue = float(params.monthly_revenue)
    current_pool_size = resolve_initial_pool_size(params)

    records: List[MonthRecord] = []
    for month in range(1, int(params.months) + 1):
        product_sales = current_revenue * on_chain_fraction
        revenue_share_amount = product_sales * share_fraction
        current_pool_size += revenue_share_amount
        token_rate = current_pool_size / emission

        records.append(MonthRecord(
            month=month,
            revenue=current_revenue,
            product_sales=product_sales,
            revenue_share_amount=revenue_share_amount,
            pool_top_up=revenue_share_amount,
            pool_size=current_pool_size,
            token_rate=token_rate,
        ))

        # affects month + 1 only
        current_revenue *= growth_factor

    apy = annualize_growth(records[-1].token_rate, params.initial_token_rate, params.months)

    return ProjectionResult(
        months=tuple(records),
        initial_token_rate=params.initial_token_rate,
        apy=apy,
    )
