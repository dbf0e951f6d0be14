"""
Parameter source helpers — parsing raw form text and validating parameter sets.
"""

from .parsing import parse_months, parse_number, parse_parameters
from .validators import ValidationResult, validate_parameters

__all__ = [
    "parse_number",
    "parse_months",
    "parse_parameters",
    "ValidationResult",
    "validate_parameters",
]
