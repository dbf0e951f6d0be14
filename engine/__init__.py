"""
Projection engine — pure monthly pool/token-rate recurrence and pool sizing.
"""

from .pool import estimate_initial_pool_size, resolve_initial_pool_size
from .projection import (
    MonthRecord,
    ProjectionResult,
    annualize_growth,
    parameter_errors,
    project,
)

__all__ = [
    "MonthRecord",
    "ProjectionResult",
    "annualize_growth",
    "parameter_errors",
    "project",
    "estimate_initial_pool_size",
    "resolve_initial_pool_size",
]
