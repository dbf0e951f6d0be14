"""
Projection summary — the handful of numbers a reader looks at first,
plus flags for results that need a caveat.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd

from core.utils import format_currency, format_percent, format_rate
from engine.projection import ProjectionResult


@dataclass
class ProjectionSummary:
    """Headline figures for one projection."""
    months: int
    initial_token_rate: float
    final_token_rate: float
    rate_change_pct: float  # realized growth over the horizon, not annualized
    apy: float
    total_pool_top_up: float
    final_pool_size: float
    final_revenue: float

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Horizon", "Value": str(self.months), "Unit": "months"},
            {"Metric": "Initial Token Rate", "Value": format_rate(self.initial_token_rate), "Unit": ""},
            {"Metric": "Final Token Rate", "Value": format_rate(self.final_token_rate), "Unit": ""},
            {"Metric": "Rate Change", "Value": format_percent(self.rate_change_pct), "Unit": "over horizon"},
            {"Metric": "APY", "Value": format_percent(self.apy), "Unit": "12-month equivalent"},
            {"Metric": "Total Pool Top Up", "Value": format_currency(self.total_pool_top_up), "Unit": ""},
            {"Metric": "Final Pool Size", "Value": format_currency(self.final_pool_size), "Unit": ""},
            {"Metric": "Final Monthly Revenue", "Value": format_currency(self.final_revenue), "Unit": ""},
        ]
        return pd.DataFrame(rows)


def summarize_projection(result: ProjectionResult) -> ProjectionSummary:
    records = result.months
    top_ups = np.array([r.pool_top_up for r in records], dtype=float)

    final = result.final
    rate_change_pct = (final.token_rate / result.initial_token_rate - 1.0) * 100.0

    flags: List[str] = []
    n = len(records)
    if n != 12:
        flags.append(
            f"APY rescales {n}-month growth linearly to 12 months; "
            f"it is not a compounded yield."
        )
    if float(top_ups.sum()) == 0.0:
        flags.append("No revenue reached the pool; the token rate is flat.")
    if records[0].pool_size - records[0].pool_top_up == 0.0:
        flags.append("Projection started from an empty pool.")

    return ProjectionSummary(
        months=n,
        initial_token_rate=float(result.initial_token_rate),
        final_token_rate=float(final.token_rate),
        rate_change_pct=float(rate_change_pct),
        apy=float(result.apy),
        total_pool_top_up=float(top_ups.sum()),
        final_pool_size=float(final.pool_size),
        final_revenue=float(final.revenue),
        flags=flags,
    )
