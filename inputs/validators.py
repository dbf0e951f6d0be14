"""
Parameter validation before a projection is run.

Catches problems early and explains them in plain language:
- Horizon and divisors the engine cannot work with
- Percentages outside their ranges
- Negative revenue or pool size
- Inputs that are legal but probably not what the user meant
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from core.config import SimulationParameters
from engine.projection import parameter_errors


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a parameter set."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_parameters(params: SimulationParameters) -> ValidationResult:
    """
    Run all checks on a parameter set without raising.

    Errors are exactly the conditions project() rejects; warnings are
    informational and never block a run.
    """
    result = ValidationResult()
    result.errors.extend(str(e) for e in parameter_errors(params))

    # --- Revenue ---
    if params.monthly_revenue > params.max_monthly_revenue:
        result.warnings.append(
            f"Monthly revenue {params.monthly_revenue:,.0f} exceeds the expected "
            f"maximum of {params.max_monthly_revenue:,.0f}."
        )
    if params.monthly_revenue == 0:
        result.warnings.append("Monthly revenue is zero; the pool will never grow.")

    # --- Revenue share ---
    if params.revenue_share == 0 or params.on_chain_sales_percent == 0:
        result.warnings.append(
            "Nothing flows into the pool (zero on-chain sales or zero revenue share)."
        )

    # --- Pool ---
    if params.initial_pool_size == 0 and params.pool_size_fallback == "none":
        result.warnings.append(
            "Initial pool is zero with no fallback; the token rate starts near zero "
            "and APY against the initial rate will be strongly negative."
        )

    # --- Horizon ---
    if result.is_valid and params.months != 12:
        result.warnings.append(
            f"Horizon is {params.months} months; APY is the observed growth "
            f"rescaled linearly to 12 months, not a compounded rate."
        )

    return result
