from __future__ import annotations

from typing import Iterable

import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def format_currency(value: float) -> str:
    """Whole US dollars with thousands separators, e.g. -$1,235."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Format a value already expressed in percent, e.g. 12.34 -> '12.3%'."""
    return f"{value:.{decimals}f}%"


def format_rate(value: float) -> str:
    """Token rate in dollars with two decimals."""
    return f"${value:.2f}"
