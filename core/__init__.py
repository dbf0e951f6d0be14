"""
Core package — parameter record, error taxonomy, column schema and shared
formatting helpers. No business logic lives here.
"""

from .config import (
    DEFAULT_TOKEN_ID,
    PREMIUM_TOKEN_EMISSION,
    SimulationParameters,
    default_parameters,
)
from .errors import (
    InvalidAmount,
    InvalidDivisor,
    InvalidHorizon,
    OutOfRangePercentage,
    ParameterParseError,
    SimulationError,
)
from .schema import MONTH_RECORD_COLUMNS, MONTH_RECORD_LABELS
from .utils import format_currency, format_percent, format_rate, require_columns

__all__ = [
    "DEFAULT_TOKEN_ID",
    "PREMIUM_TOKEN_EMISSION",
    "SimulationParameters",
    "default_parameters",
    "SimulationError",
    "InvalidHorizon",
    "InvalidDivisor",
    "OutOfRangePercentage",
    "InvalidAmount",
    "ParameterParseError",
    "MONTH_RECORD_COLUMNS",
    "MONTH_RECORD_LABELS",
    "format_currency",
    "format_percent",
    "format_rate",
    "require_columns",
]
