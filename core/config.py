"""
Simulation parameters and the default-parameter builder.

The engine reads nothing else: no module-level mutable defaults, every call
to default_parameters() hands back a fresh record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

PREMIUM_TOKEN_EMISSION: float = 32_000.0
DEFAULT_TOKEN_ID: str = "TKN"

PoolSizeFallback = Literal["emission", "none"]


@dataclass(frozen=True)
class SimulationParameters:
    monthly_revenue: float
    on_chain_sales_percent: float
    monthly_revenue_increase: float
    revenue_share: float
    premium_token_emission: float = PREMIUM_TOKEN_EMISSION
    initial_pool_size: float = 0.0  # resolved through pool_size_fallback
    initial_token_rate: float = 1.0
    months: int = 12

    # "emission": a zero initial pool is replaced by the emission so the
    # opening token rate is exactly 1.0. "none": zero means zero.
    pool_size_fallback: PoolSizeFallback = "emission"

    # soft ceiling, only used by inputs.validators to warn
    max_monthly_revenue: float = 1_000_000.0

    def with_updates(self, **changes) -> "SimulationParameters":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


def default_parameters(**overrides) -> SimulationParameters:
    """
    Build the reference parameter set.

    80k monthly revenue, 40% of it on-chain, 7% monthly growth, 7% of on-chain
    sales shared into a pool seeded at the emission (so the rate opens at 1.0),
    projected over 12 months.
    """
    params = SimulationParameters(
        monthly_revenue=80_000.0,
        on_chain_sales_percent=40.0,
        monthly_revenue_increase=7.0,
        revenue_share=7.0,
        premium_token_emission=PREMIUM_TOKEN_EMISSION,
        initial_token_rate=1.0,
        months=12,
    )
    if overrides:
        params = replace(params, **overrides)
    if "initial_pool_size" not in overrides:
        # seed at the effective emission, not the module constant
        params = replace(params, initial_pool_size=float(params.premium_token_emission))
    return params
