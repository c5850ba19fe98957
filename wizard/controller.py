"""Step navigation for the demand wizard.

Forward motion is gated by the validation gate; backward motion never
is. Jumping is only allowed to steps that were already reached, so the
gate cannot be bypassed by a step indicator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from .state import FIRST_STEP, LAST_STEP, STEPS, WizardState
from .validation import FieldCheck, ValidationGate

logger = logging.getLogger(__name__)


@dataclass
class NavigationResult:
    """What a navigation request did."""

    moved: bool
    step: int
    failures: Dict[str, FieldCheck] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "moved": self.moved,
            "step": self.step,
            "failures": {name: check.message for name, check in self.failures.items()},
        }


@dataclass(frozen=True)
class StepIndicator:
    index: int
    key: str
    title: str
    reached: bool
    clickable: bool


class WizardController:
    """Owns ``current_step`` of a :class:`WizardState`."""

    def __init__(self, state: WizardState, gate: ValidationGate):
        self._state = state
        self._gate = gate

    @property
    def current_step(self) -> int:
        return self._state.current_step

    def go_next(self) -> NavigationResult:
        state = self._state
        checks = self._gate.step_checks(state.current_step, state.field_values)
        failures = {name: check for name, check in checks.items() if not check.valid}

        # Present the outcome of this attempt for every checked field.
        for name, check in checks.items():
            if check.valid:
                state.field_errors.pop(name, None)
            else:
                state.field_errors[name] = check.message

        if failures:
            logger.info(
                "Step %d blocked by invalid fields: %s",
                state.current_step, ", ".join(failures),
            )
            return NavigationResult(moved=False, step=state.current_step, failures=failures)

        previous = state.current_step
        state.current_step = min(previous + 1, LAST_STEP)
        logger.debug("Step %d -> %d", previous, state.current_step)
        return NavigationResult(moved=state.current_step != previous, step=state.current_step)

    def go_back(self) -> NavigationResult:
        state = self._state
        previous = state.current_step
        state.current_step = max(previous - 1, FIRST_STEP)
        return NavigationResult(moved=state.current_step != previous, step=state.current_step)

    def jump_to(self, target: int) -> bool:
        """Move back to an already visited step.

        Returns ``False`` (and changes nothing) for the current step, any
        later step, or an index outside the wizard.
        """
        state = self._state
        if not FIRST_STEP <= target < state.current_step:
            logger.debug("Rejected jump from step %d to %d", state.current_step, target)
            return False
        state.current_step = target
        return True

    def can_go_back(self) -> bool:
        return self._state.current_step > FIRST_STEP

    def can_go_next(self) -> bool:
        return self._state.current_step < LAST_STEP

    def indicators(self) -> List[StepIndicator]:
        current = self._state.current_step
        return [
            StepIndicator(
                index=step.index,
                key=step.key,
                title=step.title,
                reached=step.index <= current,
                clickable=step.index < current,
            )
            for step in STEPS
        ]
