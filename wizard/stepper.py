"""
Step-by-step walkthrough as an explicit finite-state machine.

  REVENUE → REVENUE_SHARE → POOL_TOP_UP → POOL_SIZE → RATE_INCREASE → (completed)

States are immutable; advance() and retreat() return new states. Input is
validated when leaving REVENUE and REVENUE_SHARE, and leaving REVENUE_SHARE
runs a one-month projection through engine.project; the walkthrough never
computes pool or rate values itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Optional

from core.config import SimulationParameters, default_parameters
from core.errors import SimulationError
from engine.projection import ProjectionResult, project
from inputs.parsing import parse_number

logger = logging.getLogger(__name__)


class WizardStep(IntEnum):
    REVENUE = 1
    REVENUE_SHARE = 2
    POOL_TOP_UP = 3
    POOL_SIZE = 4
    RATE_INCREASE = 5


FIRST_STEP = WizardStep.REVENUE
LAST_STEP = WizardStep.RATE_INCREASE

STEP_TITLES: Dict[WizardStep, str] = {
    WizardStep.REVENUE: "Start selling your digital products on chain",
    WizardStep.REVENUE_SHARE: "Share revenue with the pool",
    WizardStep.POOL_TOP_UP: "Pool topped up with tokens",
    WizardStep.POOL_SIZE: "Increased pool size",
    WizardStep.RATE_INCREASE: "Premium token rate increase",
}


class StepValidationError(SimulationError):
    """The current step's input was rejected; the state did not change."""

    def __init__(self, step: WizardStep, message: str):
        self.step = step
        super().__init__(message)


@dataclass(frozen=True)
class WizardState:
    step: WizardStep = FIRST_STEP
    revenue_text: str = ""
    revenue_share_text: str = ""
    result: Optional[ProjectionResult] = None
    completed: bool = False

    @property
    def progress(self) -> float:
        """Fraction of the walkthrough behind us, 0.0 at step 1, 1.0 at the last step."""
        return (int(self.step) - int(FIRST_STEP)) / (int(LAST_STEP) - int(FIRST_STEP))

    def with_inputs(
        self,
        *,
        revenue_text: Optional[str] = None,
        revenue_share_text: Optional[str] = None,
    ) -> "WizardState":
        changes = {}
        if revenue_text is not None:
            changes["revenue_text"] = revenue_text
        if revenue_share_text is not None:
            changes["revenue_share_text"] = revenue_share_text
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class RateIncrease:
    """What the last step shows: new rate, growth this period, and its APY."""
    new_rate: float
    increase_pct: float
    apy: float


def _plain(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def new_wizard(base: Optional[SimulationParameters] = None) -> WizardState:
    """Fresh walkthrough pre-filled with the base (default) revenue and share."""
    params = base if base is not None else default_parameters()
    return WizardState(
        revenue_text=_plain(params.monthly_revenue),
        revenue_share_text=_plain(params.revenue_share),
    )


def _parse_positive(state: WizardState, text: str, message: str) -> float:
    value = parse_number(text)
    if value is None or value <= 0:
        raise StepValidationError(state.step, message)
    return value


def run_walkthrough_projection(
    monthly_revenue: float,
    revenue_share: float,
    *,
    base: Optional[SimulationParameters] = None,
) -> ProjectionResult:
    """One-month projection with the walkthrough's two inputs on top of ``base``."""
    params = base if base is not None else default_parameters()
    return project(params.with_updates(
        monthly_revenue=monthly_revenue,
        revenue_share=revenue_share,
        months=1,
    ))


def advance(state: WizardState, *, base: Optional[SimulationParameters] = None) -> WizardState:
    """
    Move forward one step.

    Raises
    ------
    StepValidationError
        If the current step's input is invalid.
    """
    if state.completed:
        return state

    step = state.step
    if step == WizardStep.REVENUE:
        _parse_positive(state, state.revenue_text, "Please enter a valid revenue amount")

    elif step == WizardStep.REVENUE_SHARE:
        revenue = _parse_positive(state, state.revenue_text, "Please enter a valid revenue amount")
        share = _parse_positive(
            state, state.revenue_share_text, "Please enter a valid revenue share percentage"
        )
        if share > 100:
            raise StepValidationError(step, "Revenue share cannot exceed 100%")
        try:
            result = run_walkthrough_projection(revenue, share, base=base)
        except SimulationError as exc:
            raise StepValidationError(step, str(exc)) from exc
        logger.debug("Walkthrough projection: revenue=%s share=%s rate=%s",
                     revenue, share, result.final_token_rate)
        return replace(state, step=WizardStep.POOL_TOP_UP, result=result)

    elif step == LAST_STEP:
        logger.debug("Walkthrough completed")
        return replace(state, completed=True)

    next_step = WizardStep(int(step) + 1)
    logger.debug("Walkthrough step %s -> %s", step.name, next_step.name)
    return replace(state, step=next_step)


def retreat(state: WizardState) -> WizardState:
    """Move back one step; going back to an input step discards the projection."""
    if state.step == FIRST_STEP:
        return replace(state, completed=False)
    prev_step = WizardStep(int(state.step) - 1)
    result = state.result if prev_step > WizardStep.REVENUE_SHARE else None
    logger.debug("Walkthrough step %s -> %s", state.step.name, prev_step.name)
    return replace(state, step=prev_step, result=result, completed=False)


def rate_increase(result: ProjectionResult) -> RateIncrease:
    """Rate change after the first projected month, with its APY."""
    first = result.months[0]
    increase_pct = (first.token_rate - result.initial_token_rate) / result.initial_token_rate * 100.0
    return RateIncrease(new_rate=first.token_rate, increase_pct=increase_pct, apy=result.apy)
