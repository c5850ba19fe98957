"""One wizard session, wired end to end.

``DemandWizard`` owns a single :class:`WizardState` and the components
that act on it. It is what a front end talks to::

    wizard = DemandWizard(client=my_client)
    wizard.apply_example("smart-streetlight")
    wizard.set_field("description", "...")
    wizard.go_next()
    ...
    result = await wizard.submit()
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

from .base import (
    ExampleProvider,
    Navigator,
    Notifier,
    SubmissionClient,
    SubmissionResult,
    UnknownExampleError,
)
from .config import WizardConfig
from .controller import NavigationResult, StepIndicator, WizardController
from .examples import Example, ExampleApplier, StaticExampleProvider
from .fields import FIELD_LABELS, REQUIRED_FIELDS
from .notify import LoggingNotifier, RecordingNavigator
from .state import WizardState
from .submission import SubmissionCoordinator
from .validation import DemandValidationGate, ValidationGate

logger = logging.getLogger(__name__)

_SUMMARY_ORDER = ("title", "category", "budget", "timeline", "cooperationType", "description")


class DemandWizard:
    """Facade over state, gate, controller, applier and coordinator."""

    def __init__(
        self,
        client: SubmissionClient,
        *,
        notifier: Optional[Notifier] = None,
        navigator: Optional[Navigator] = None,
        examples: Optional[ExampleProvider] = None,
        gate: Optional[ValidationGate] = None,
        config: Optional[WizardConfig] = None,
        state: Optional[WizardState] = None,
    ):
        self.config = config or WizardConfig()
        self.state = state or WizardState()
        self.gate = gate or DemandValidationGate(self.config)
        self.examples = examples or StaticExampleProvider()
        self.notifier = notifier or LoggingNotifier()
        self.navigator = navigator or RecordingNavigator()

        self.controller = WizardController(self.state, self.gate)
        self.applier = ExampleApplier(self.state)
        self.coordinator = SubmissionCoordinator(
            self.state, client, self.notifier, self.navigator, self.config
        )

    # -- fields -------------------------------------------------------------

    def set_field(self, name: str, value: Optional[str]) -> None:
        self.state.fields.set(name, value)
        self._revalidate([name])

    def set_fields(self, values: Mapping[str, Optional[str]]) -> None:
        self.state.fields.update(values)
        self._revalidate(values)

    def _revalidate(self, names) -> None:
        """Refresh messages of edited fields that are currently shown as errors."""
        shown = [name for name in names if name in self.state.field_errors]
        if not shown:
            return
        for name, check in self.gate.validate(shown, self.state.field_values).items():
            if check.valid:
                del self.state.field_errors[name]
            else:
                self.state.field_errors[name] = check.message

    # -- examples -----------------------------------------------------------

    def list_examples(self) -> List[Example]:
        return self.examples.list_examples()

    def apply_example(self, example_or_id) -> Dict[str, str]:
        example = example_or_id
        if not isinstance(example, Example):
            example = self.examples.get_example(example_or_id)
            if example is None:
                raise UnknownExampleError(example_or_id)
        written = self.applier.apply(example)
        self._revalidate(written)
        return written

    def skip_examples(self) -> None:
        self.applier.skip()

    # -- navigation ---------------------------------------------------------

    def go_next(self) -> NavigationResult:
        return self.controller.go_next()

    def go_back(self) -> NavigationResult:
        return self.controller.go_back()

    def jump_to(self, target: int) -> bool:
        return self.controller.jump_to(target)

    def indicators(self) -> List[StepIndicator]:
        return self.controller.indicators()

    # -- submission ---------------------------------------------------------

    def can_submit(self) -> bool:
        return not self.controller.can_go_next() and not self.state.is_submitting

    async def submit(self) -> SubmissionResult:
        return await self.coordinator.submit()

    def summary(self) -> List[Tuple[str, str]]:
        """Rows shown on the confirmation step, in display order."""
        values = self.state.field_values
        rows = []
        for name in _SUMMARY_ORDER:
            value = values.get(name, "")
            if not value and name not in REQUIRED_FIELDS:
                value = self.config.unspecified_label
            rows.append((FIELD_LABELS[name], value))
        return rows
