"""Submission bookkeeping for the confirmation step.

The coordinator owns ``is_submitting``: it is raised right before the
submission collaborator is awaited and lowered in a ``finally`` block, so
it is reset on success, semantic failure and raised errors alike. A second
``submit`` while the flag is up is rejected rather than queued.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Mapping, Optional

from .base import (
    Navigator,
    NotificationKind,
    Notifier,
    StepPreconditionError,
    SubmissionClient,
    SubmissionInFlightError,
    SubmissionResult,
)
from .config import WizardConfig
from .fields import FIELD_NAMES
from .state import CONFIRM_STEP, WizardState

logger = logging.getLogger(__name__)


def build_payload(values: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Keep only the demand fields that carry a non-empty value."""
    return {name: values[name] for name in FIELD_NAMES if values.get(name)}


class SubmissionCoordinator:
    """Submits the session's fields and routes the outcome."""

    def __init__(
        self,
        state: WizardState,
        client: SubmissionClient,
        notifier: Notifier,
        navigator: Navigator,
        config: Optional[WizardConfig] = None,
    ):
        self._state = state
        self._client = client
        self._notifier = notifier
        self._navigator = navigator
        self.config = config or WizardConfig()

    async def submit(self, values: Optional[Mapping[str, str]] = None) -> SubmissionResult:
        """Submit ``values`` (the session's current fields by default).

        Raises
        ------
        SubmissionInFlightError
            A previous submission has not settled yet.
        StepPreconditionError
            The wizard is not on the confirmation step.
        """
        state = self._state
        if state.is_submitting:
            raise SubmissionInFlightError("A submission is already in progress")
        if state.current_step != CONFIRM_STEP:
            raise StepPreconditionError(
                f"Submission is only possible on step {CONFIRM_STEP}", step=state.current_step
            )

        payload = build_payload(state.field_values if values is None else values)
        config = self.config

        state.is_submitting = True
        t0 = time.monotonic()
        try:
            try:
                result = await self._client.submit(payload)
            except Exception:
                logger.exception("Submission collaborator raised (fields=%s)", sorted(payload))
                self._notify("error", config.error_title, config.error_detail)
                return SubmissionResult(success=False, message=config.error_detail)

            latency_ms = int((time.monotonic() - t0) * 1000)
            if result.success:
                logger.info("Demand submitted in %dms", latency_ms)
                self._notify("success", config.success_title, config.success_detail)
                try:
                    self._navigator.navigate(config.success_destination)
                except Exception:
                    logger.exception("Navigator failed for %s", config.success_destination)
            else:
                logger.warning("Demand rejected in %dms: %s", latency_ms, result.message or "-")
                self._notify(
                    "failure",
                    config.failure_title,
                    result.message or config.failure_default_detail,
                )
            return result
        finally:
            state.is_submitting = False

    def _notify(self, kind: NotificationKind, title: str, detail: str) -> None:
        # Notifications are fire-and-forget.
        try:
            self._notifier.notify(kind, title, detail)
        except Exception:
            logger.exception("Notifier failed for %s notification", kind)
