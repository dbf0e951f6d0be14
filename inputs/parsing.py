"""
Parse raw form text into numbers and parameter records.

The dashboard and the walkthrough collect text; this is the single place
that turns it into floats before anything reaches the engine.
"""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Mapping, Optional

import pandas as pd

from core.config import SimulationParameters, default_parameters
from core.errors import ParameterParseError

# Fields that may be supplied as raw text. months is handled separately.
NUMERIC_FIELDS = tuple(
    f.name for f in fields(SimulationParameters)
    if f.name not in ("months", "pool_size_fallback")
)


def parse_number(text: object) -> Optional[float]:
    """
    Parse a user-entered number; None if it isn't one.

    Accepts surrounding whitespace, thousands separators, a leading "$" and a
    trailing "%". NaN and infinities are rejected.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        value = float(text)
        return value if math.isfinite(value) else None

    cleaned = str(text).strip().replace(",", "").replace("_", "")
    if cleaned.startswith("$"):
        cleaned = cleaned[1:]
    if cleaned.endswith("%"):
        cleaned = cleaned[:-1]
    if not cleaned:
        return None

    value = pd.to_numeric(cleaned, errors="coerce")
    if pd.isna(value):
        return None
    value = float(value)
    return value if math.isfinite(value) else None


def parse_months(text: object) -> Optional[int]:
    """Parse a horizon; only whole numbers qualify (e.g. "12" or "12.0")."""
    value = parse_number(text)
    if value is None or not value.is_integer():
        return None
    return int(value)


def parse_parameters(
    raw: Mapping[str, object],
    *,
    base: Optional[SimulationParameters] = None,
) -> SimulationParameters:
    """
    Build SimulationParameters from raw form values layered on ``base``.

    Keys not present in ``raw`` keep their value from ``base`` (defaults if
    omitted). Unknown keys are ignored. Range checks are left to
    inputs.validators / the engine.

    Raises
    ------
    ParameterParseError
        If a supplied field is not a number.
    """
    params = base if base is not None else default_parameters()
    changes = {}

    for name in NUMERIC_FIELDS:
        if name in raw:
            value = parse_number(raw[name])
            if value is None:
                raise ParameterParseError(name, raw[name])
            changes[name] = value

    if "months" in raw:
        months = parse_months(raw["months"])
        if months is None:
            raise ParameterParseError("months", raw["months"])
        changes["months"] = months

    if "pool_size_fallback" in raw:
        changes["pool_size_fallback"] = str(raw["pool_size_fallback"]).strip().lower()

    return params.with_updates(**changes) if changes else params
