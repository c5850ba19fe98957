"""Live wizard sessions held by the API process.

Sessions are not persisted: they live until they are deleted, until a
submission succeeds, or until they sit idle for longer than
``SESSION_TTL_SECONDS`` (env ``WIZARD_SESSION_TTL_SECONDS``, default 30 min).
"""

from __future__ import annotations

import logging
import os
import time
import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Dict, Optional

from wizard import DemandWizard, WizardConfig
from wizard.controller import NavigationResult
from wizard.notify import CollectingNotifier, LoggingNotifier, RecordingNavigator
from wizard.state import STEPS

from .submitter import StoreSubmissionClient

logger = logging.getLogger(__name__)


@dataclass
class WizardSession:
    id: str
    wizard: DemandWizard
    notifier: CollectingNotifier
    navigator: RecordingNavigator
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    touched_at: float = field(default_factory=time.monotonic)


SESSION_TTL_SECONDS = float(os.environ.get("WIZARD_SESSION_TTL_SECONDS", "1800"))

_sessions: Dict[str, WizardSession] = {}


def _sweep_expired(now: float) -> None:
    expired = [sid for sid, s in _sessions.items() if now - s.touched_at > SESSION_TTL_SECONDS]
    for sid in expired:
        del _sessions[sid]
    if expired:
        logger.info("Expired %d idle wizard session(s)", len(expired))


def create_session(owner: str = "") -> WizardSession:
    _sweep_expired(time.monotonic())
    config = WizardConfig.from_env()
    notifier = CollectingNotifier(forward=LoggingNotifier())
    navigator = RecordingNavigator()
    wizard = DemandWizard(
        StoreSubmissionClient(config=config, owner=owner),
        notifier=notifier,
        navigator=navigator,
        config=config,
    )
    session = WizardSession(id=str(uuid.uuid4()), wizard=wizard, notifier=notifier, navigator=navigator)
    _sessions[session.id] = session
    logger.info("Opened wizard session %s", session.id)
    return session


def get_session(session_id: str) -> Optional[WizardSession]:
    """Return a live session and mark it as used."""
    now = time.monotonic()
    _sweep_expired(now)
    session = _sessions.get(session_id)
    if session is not None:
        session.touched_at = now
    return session


def discard_session(session_id: str) -> bool:
    removed = _sessions.pop(session_id, None) is not None
    if removed:
        logger.info("Closed wizard session %s", session_id)
    return removed


def state_payload(session: WizardSession) -> dict:
    """Render a session into the ``WizardStateResponse`` shape."""
    wizard = session.wizard
    data = wizard.state.to_dict()
    data.update(
        session_id=session.id,
        steps=[asdict(i) for i in wizard.indicators()],
        summary=[list(row) for row in wizard.summary()],
        can_go_back=wizard.controller.can_go_back(),
        can_go_next=wizard.controller.can_go_next(),
        can_submit=wizard.can_submit(),
    )
    return data


def navigation_payload(session: WizardSession, result: NavigationResult) -> dict:
    data = result.to_dict()
    data["state"] = state_payload(session)
    return data


def step_definitions() -> list:
    return [
        {
            "index": s.index,
            "key": s.key,
            "title": s.title,
            "required_fields": list(s.required_fields),
            "shown_fields": list(s.shown_fields),
        }
        for s in STEPS
    ]
