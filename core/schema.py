from __future__ import annotations

from typing import Dict, Tuple

# Column order of the per-month projection table (reports.tables).
MONTH_RECORD_COLUMNS: Tuple[str, ...] = (
    "month",
    "revenue",
    "product_sales",
    "revenue_share_amount",
    "pool_top_up",
    "pool_size",
    "token_rate",
)

# Human-readable headers for display tables.
MONTH_RECORD_LABELS: Dict[str, str] = {
    "month": "Month",
    "revenue": "Revenue",
    "product_sales": "Product Sales",
    "revenue_share_amount": "Revenue Share",
    "pool_top_up": "Pool Top Up",
    "pool_size": "Pool Size",
    "token_rate": "Token Rate",
}

MONEY_COLUMNS: Tuple[str, ...] = (
    "revenue",
    "product_sales",
    "revenue_share_amount",
    "pool_top_up",
    "pool_size",
)
