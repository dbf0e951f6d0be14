"""
Guided walkthrough — five-step state machine over a one-month projection,
and token display labels.
"""

from .labels import TokenLabels, token_labels
from .stepper import (
    STEP_TITLES,
    RateIncrease,
    StepValidationError,
    WizardState,
    WizardStep,
    advance,
    new_wizard,
    rate_increase,
    retreat,
    run_walkthrough_projection,
)

__all__ = [
    "TokenLabels",
    "token_labels",
    "STEP_TITLES",
    "RateIncrease",
    "StepValidationError",
    "WizardState",
    "WizardStep",
    "advance",
    "new_wizard",
    "rate_increase",
    "retreat",
    "run_walkthrough_projection",
]
