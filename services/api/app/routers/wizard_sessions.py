"""Wizard session endpoints.

Each session wraps one ``DemandWizard``. Field edits, example prefill and
navigation are synchronous; ``/submit`` awaits the submission collaborator.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from shared.schemas.wizard import (
    ExampleSchema,
    FieldsUpdate,
    JumpRequest,
    NavigationResponse,
    SubmitResponse,
    WizardOptionsResponse,
    WizardStateResponse,
)
from wizard.base import (
    StepPreconditionError,
    SubmissionInFlightError,
    UnknownExampleError,
    WizardError,
)
from wizard.controller import NavigationResult
from wizard.examples import StaticExampleProvider
from wizard.fields import get_field_options

from .. import sessions

logger = logging.getLogger(__name__)
router = APIRouter()

_examples = StaticExampleProvider()


def _get_session_or_404(session_id: str) -> sessions.WizardSession:
    session = sessions.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail={"code": "SESSION_NOT_FOUND"})
    return session


def _http_error(exc: WizardError) -> HTTPException:
    if isinstance(exc, UnknownExampleError):
        status = 404
    elif isinstance(exc, (SubmissionInFlightError, StepPreconditionError)):
        status = 409
    else:
        status = 422
    logger.info("Wizard request rejected (%s): %s", exc.code, exc)
    return HTTPException(status_code=status, detail={"code": exc.code, "message": str(exc)})


@router.get("/wizard/options", response_model=WizardOptionsResponse)
async def get_options():
    """Step definitions and option catalogs for rendering the form."""
    return {"steps": sessions.step_definitions(), "options": get_field_options()}


@router.get("/examples", response_model=List[ExampleSchema])
async def list_examples():
    return [e.to_dict() for e in _examples.list_examples()]


@router.post("/wizard/sessions", status_code=201, response_model=WizardStateResponse)
async def create_session():
    session = sessions.create_session()
    return sessions.state_payload(session)


@router.get("/wizard/sessions/{session_id}", response_model=WizardStateResponse)
async def get_session(session_id: str):
    return sessions.state_payload(_get_session_or_404(session_id))


@router.delete("/wizard/sessions/{session_id}")
async def delete_session(session_id: str):
    _get_session_or_404(session_id)
    sessions.discard_session(session_id)
    return {"status": "deleted", "session_id": session_id}


@router.patch("/wizard/sessions/{session_id}/fields", response_model=WizardStateResponse)
async def update_fields(session_id: str, body: FieldsUpdate):
    session = _get_session_or_404(session_id)
    session.wizard.set_fields(body.model_dump(exclude_unset=True))
    return sessions.state_payload(session)


@router.post("/wizard/sessions/{session_id}/examples/{example_id}", response_model=WizardStateResponse)
async def apply_example(session_id: str, example_id: str):
    session = _get_session_or_404(session_id)
    try:
        session.wizard.apply_example(example_id)
    except WizardError as exc:
        raise _http_error(exc)
    return sessions.state_payload(session)


@router.post("/wizard/sessions/{session_id}/skip", response_model=WizardStateResponse)
async def skip_examples(session_id: str):
    session = _get_session_or_404(session_id)
    session.wizard.skip_examples()
    return sessions.state_payload(session)


@router.post("/wizard/sessions/{session_id}/next", response_model=NavigationResponse)
async def go_next(session_id: str):
    session = _get_session_or_404(session_id)
    return sessions.navigation_payload(session, session.wizard.go_next())


@router.post("/wizard/sessions/{session_id}/back", response_model=NavigationResponse)
async def go_back(session_id: str):
    session = _get_session_or_404(session_id)
    return sessions.navigation_payload(session, session.wizard.go_back())


@router.post("/wizard/sessions/{session_id}/jump", response_model=NavigationResponse)
async def jump_to(session_id: str, body: JumpRequest):
    """Jump back to a visited step; forward targets come back with ``moved=False``."""
    session = _get_session_or_404(session_id)
    moved = session.wizard.jump_to(body.target)
    result = NavigationResult(moved=moved, step=session.wizard.state.current_step)
    return sessions.navigation_payload(session, result)


@router.post("/wizard/sessions/{session_id}/submit", response_model=SubmitResponse)
async def submit(session_id: str):
    """Submit the session's demand.

    On success the session is discarded and ``redirect`` names where the
    client should go; otherwise the session stays on the confirmation step.
    """
    session = _get_session_or_404(session_id)
    session.notifier.drain()
    try:
        result = await session.wizard.submit()
    except WizardError as exc:
        raise _http_error(exc)

    notifications = [n.to_dict() for n in session.notifier.drain()]
    if result.success:
        sessions.discard_session(session_id)
        return {
            "result": {"success": True, "message": result.message},
            "notifications": notifications,
            "redirect": session.navigator.last,
            "state": None,
        }
    return {
        "result": {"success": False, "message": result.message},
        "notifications": notifications,
        "redirect": None,
        "state": sessions.state_payload(session),
    }
