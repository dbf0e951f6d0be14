"""
Tabular views of a projection for the presentation layer.
"""

from __future__ import annotations

from dataclasses import asdict

import pandas as pd

from core.schema import MONEY_COLUMNS, MONTH_RECORD_COLUMNS, MONTH_RECORD_LABELS
from core.utils import format_currency, format_rate, require_columns
from engine.projection import ProjectionResult


def projection_to_frame(result: ProjectionResult) -> pd.DataFrame:
    """One row per month, columns in MONTH_RECORD_COLUMNS order."""
    rows = [asdict(record) for record in result.months]
    return pd.DataFrame(rows, columns=list(MONTH_RECORD_COLUMNS))


def format_month_table(
    result: ProjectionResult,
    *,
    show_all_months: bool = True,
) -> pd.DataFrame:
    """
    Display-ready table: whole-dollar money columns, two-decimal token rate,
    human-readable headers. With show_all_months=False only month 1 is shown.
    """
    df = projection_to_frame(result)
    if not show_all_months:
        df = df.head(1)
    return format_frame(df)


def format_frame(df: pd.DataFrame) -> pd.DataFrame:
    require_columns(df, MONTH_RECORD_COLUMNS)
    out = df[list(MONTH_RECORD_COLUMNS)].copy()
    for col in MONEY_COLUMNS:
        out[col] = out[col].map(format_currency)
    out["token_rate"] = out["token_rate"].map(format_rate)
    out["month"] = out["month"].astype(int)
    return out.rename(columns=MONTH_RECORD_LABELS).reset_index(drop=True)
