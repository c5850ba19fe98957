"""Step definitions and the per-session wizard state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Tuple

from .fields import FieldStore

ActiveMode = Literal["examples", "form"]

MODE_EXAMPLES: ActiveMode = "examples"
MODE_FORM: ActiveMode = "form"


@dataclass(frozen=True)
class Step:
    """One stage of the wizard."""

    index: int
    key: str
    title: str
    required_fields: Tuple[str, ...] = ()
    shown_fields: Tuple[str, ...] = ()


STEPS: Tuple[Step, ...] = (
    Step(
        index=0,
        key="basic_info",
        title="基本信息",
        required_fields=("title", "category", "description"),
        shown_fields=("title", "category", "description"),
    ),
    Step(
        index=1,
        key="project_details",
        title="项目细节",
        shown_fields=("budget", "timeline", "cooperationType"),
    ),
    Step(index=2, key="confirmation", title="确认提交"),
)

FIRST_STEP = 0
LAST_STEP = len(STEPS) - 1
CONFIRM_STEP = LAST_STEP


def get_step(index: int) -> Step:
    if not FIRST_STEP <= index <= LAST_STEP:
        raise IndexError(f"Step index out of range: {index}")
    return STEPS[index]


@dataclass
class WizardState:
    """Mutable state of one wizard session.

    ``current_step`` is changed only by the controller, ``fields`` by the
    example applier or direct edits, ``is_submitting`` only by the
    submission coordinator. ``field_errors`` holds the messages currently
    presented for fields that failed validation.
    """

    current_step: int = FIRST_STEP
    fields: FieldStore = field(default_factory=FieldStore)
    is_submitting: bool = False
    active_mode: ActiveMode = MODE_EXAMPLES
    field_errors: Dict[str, str] = field(default_factory=dict)

    @property
    def field_values(self) -> Dict[str, str]:
        return self.fields.get_all()

    @property
    def step(self) -> Step:
        return get_step(self.current_step)

    def to_dict(self) -> dict:
        return {
            "current_step": self.current_step,
            "step_key": self.step.key,
            "field_values": self.field_values,
            "is_submitting": self.is_submitting,
            "active_mode": self.active_mode,
            "field_errors": dict(self.field_errors),
        }
