"""
Initial pool sizing — the explicit pre-step that runs once before the
monthly recurrence, plus the suggested-seed heuristic used by the dashboard.
"""

from __future__ import annotations

from core.config import PREMIUM_TOKEN_EMISSION, SimulationParameters
from core.errors import InvalidAmount

# Share of first-month on-chain sales used to seed the pool.
SEED_SALES_FRACTION = 0.5


def resolve_initial_pool_size(params: SimulationParameters) -> float:
    """
    Effective opening pool for a projection.

    With pool_size_fallback="emission" a zero initial pool becomes the
    emission, which opens the token rate at exactly 1.0. With "none" the
    initial pool is used as given.
    """
    policy = params.pool_size_fallback
    if policy == "emission":
        if params.initial_pool_size == 0:
            return float(params.premium_token_emission)
        return float(params.initial_pool_size)
    if policy == "none":
        return float(params.initial_pool_size)
    raise InvalidAmount(f"Unknown pool_size_fallback {policy!r}; expected 'emission' or 'none'.")


def estimate_initial_pool_size(
    first_month_revenue: float,
    on_chain_sales_percent: float,
    *,
    premium_token_emission: float = PREMIUM_TOKEN_EMISSION,
) -> float:
    """
    Suggest a seed pool from first-month revenue.

    Half of the first month's on-chain sales, floored at the emission so the
    first projected token rate is never below 1.0.
    """
    calculated = first_month_revenue * SEED_SALES_FRACTION * (on_chain_sales_percent / 100.0)
    return max(calculated, float(premium_token_emission))
