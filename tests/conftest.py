"""Shared fixtures for the demand wizard test suite.

Wires the fake collaborators from ``wizard_fakes`` into wizard sessions and
provides field values that mirror real demands entered through the form.
"""

import pytest

from wizard import DemandWizard, WizardState
from wizard.validation import DemandValidationGate

from wizard_fakes import FakeNavigator, FakeNotifier, FakeSubmissionClient


# ---------------------------------------------------------------------------
# Field value fixtures
# ---------------------------------------------------------------------------

VALID_TITLE = "Build a website"
VALID_DESCRIPTION = "A" * 25


@pytest.fixture
def valid_basic_info():
    """Values that pass the basic-info step."""
    return {
        "title": VALID_TITLE,
        "description": VALID_DESCRIPTION,
        "category": "软件开发",
    }


@pytest.fixture
def gate():
    return DemandValidationGate()


@pytest.fixture
def state():
    return WizardState()


@pytest.fixture
def client():
    return FakeSubmissionClient()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def navigator():
    return FakeNavigator()


@pytest.fixture
def wizard(client, notifier, navigator):
    w = DemandWizard(client, notifier=notifier, navigator=navigator)
    client.state = w.state
    return w


@pytest.fixture
def wizard_at_confirmation(wizard, valid_basic_info):
    """A wizard that has passed both steps and sits on the confirmation step."""
    wizard.skip_examples()
    wizard.set_fields(valid_basic_info)
    assert wizard.go_next().moved
    assert wizard.go_next().moved
    assert wizard.state.current_step == 2
    return wizard
