"""Demand intake wizard core.

This package contains the step machine, validation gate, example prefill
and submission bookkeeping of the demand wizard. It has ZERO dependency
on any UI or web framework; rendering, transport, notifications and
navigation are injected collaborators.
"""

from .base import (
    ExampleProvider,
    Navigator,
    Notification,
    Notifier,
    StepPreconditionError,
    SubmissionClient,
    SubmissionInFlightError,
    SubmissionResult,
    UnknownExampleError,
    UnknownFieldError,
    WizardError,
)
from .config import WizardConfig
from .controller import NavigationResult, WizardController
from .examples import Example, ExampleApplier, StaticExampleProvider
from .fields import FIELD_NAMES, FieldStore
from .session import DemandWizard
from .state import MODE_EXAMPLES, MODE_FORM, STEPS, WizardState
from .submission import SubmissionCoordinator, build_payload
from .validation import DemandValidationGate, FieldCheck, ValidationGate

__version__ = "0.1.0"

__all__ = [
    "DemandValidationGate",
    "DemandWizard",
    "Example",
    "ExampleApplier",
    "ExampleProvider",
    "FIELD_NAMES",
    "FieldCheck",
    "FieldStore",
    "MODE_EXAMPLES",
    "MODE_FORM",
    "NavigationResult",
    "Navigator",
    "Notification",
    "Notifier",
    "STEPS",
    "StaticExampleProvider",
    "StepPreconditionError",
    "SubmissionClient",
    "SubmissionCoordinator",
    "SubmissionInFlightError",
    "SubmissionResult",
    "UnknownExampleError",
    "UnknownFieldError",
    "ValidationGate",
    "WizardConfig",
    "WizardController",
    "WizardError",
    "WizardState",
    "build_payload",
]
