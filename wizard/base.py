"""Collaborator interfaces for the demand wizard.

The wizard never renders, transports or navigates by itself. Every
outward effect goes through one of the interfaces below, injected at
construction time, so the core can be driven from a web service, a test
or any other front end.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Literal, Optional

if TYPE_CHECKING:
    from .examples import Example

NotificationKind = Literal["success", "failure", "error"]


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome reported by the submission collaborator."""

    success: bool
    message: str = ""


@dataclass(frozen=True)
class Notification:
    """A single user-facing notification."""

    kind: NotificationKind
    title: str
    detail: str = ""

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind, "title": self.title, "detail": self.detail}


class SubmissionClient(abc.ABC):
    """Performs the actual submission of a demand payload."""

    @abc.abstractmethod
    async def submit(self, payload: Dict[str, str]) -> SubmissionResult:
        """Send the payload and report the outcome.

        Parameters
        ----------
        payload : dict
            Only the fields that carry a non-empty value.

        Returns
        -------
        SubmissionResult
            ``success=False`` for semantic rejections (e.g. duplicates).
            Transport problems are raised as exceptions.
        """
        ...


class Notifier(abc.ABC):
    """Fire-and-forget sink for notifications."""

    @abc.abstractmethod
    def notify(self, kind: NotificationKind, title: str, detail: str = "") -> None:
        ...


class Navigator(abc.ABC):
    """Leaves the wizard after a successful submission."""

    @abc.abstractmethod
    def navigate(self, destination: str) -> None:
        ...


class ExampleProvider(abc.ABC):
    """Supplies the example templates offered before the form."""

    @abc.abstractmethod
    def list_examples(self) -> List["Example"]:
        ...

    def get_example(self, example_id: str) -> Optional["Example"]:
        for example in self.list_examples():
            if example.id == example_id:
                return example
        return None


class WizardError(Exception):
    """Base exception for wizard precondition violations."""

    code: str = "WIZARD_ERROR"


class SubmissionInFlightError(WizardError):
    """``submit`` was called while a previous submission is outstanding."""

    code = "SUBMISSION_IN_FLIGHT"


class StepPreconditionError(WizardError):
    """An operation was requested on a step that does not allow it."""

    code = "STEP_PRECONDITION"

    def __init__(self, message: str, step: int):
        super().__init__(message)
        self.step = step


class UnknownFieldError(WizardError, KeyError):
    """A field name outside the demand field set was used."""

    code = "UNKNOWN_FIELD"

    def __init__(self, name: str):
        super().__init__(f"Unknown demand field: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class UnknownExampleError(WizardError, LookupError):
    """No example with the requested id exists."""

    code = "EXAMPLE_NOT_FOUND"

    def __init__(self, example_id: str):
        super().__init__(f"Unknown example: {example_id!r}")
        self.example_id = example_id
