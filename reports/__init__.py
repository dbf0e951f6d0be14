"""
Reporting — projection tables and headline summaries for the dashboard.
"""

from .metrics import ProjectionSummary, summarize_projection
from .tables import format_frame, format_month_table, projection_to_frame

__all__ = [
    "ProjectionSummary",
    "summarize_projection",
    "projection_to_frame",
    "format_month_table",
    "format_frame",
]
