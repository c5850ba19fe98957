"""Submission collaborator backed by the in-process demand store."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from pydantic import ValidationError

from wizard.base import SubmissionClient, SubmissionResult
from wizard.config import WizardConfig
from wizard.validation import DemandFieldsModel

from . import db

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "duplicate"


class StoreSubmissionClient(SubmissionClient):
    """Validates the payload with the session's field rules and stores it.

    The rules are the ones the wizard gate applies (``DemandFieldsModel``
    with the same ``WizardConfig``), so a demand that passed the basic-info
    step is never rejected here for its length. Semantic problems come
    back as ``success=False``; anything else propagates to the coordinator.
    """

    def __init__(self, config: Optional[WizardConfig] = None, owner: str = ""):
        self.config = config or WizardConfig()
        self.owner = owner

    async def submit(self, payload: Dict[str, str]) -> SubmissionResult:
        try:
            body = DemandFieldsModel.model_validate(payload, context={"config": self.config})
        except ValidationError as exc:
            first = exc.errors()[0]
            logger.info("Rejected demand payload: %s %s", first["loc"], first["msg"])
            return SubmissionResult(success=False, message=first["msg"])

        try:
            demand = db.create_demand(owner=self.owner, **body.model_dump())
        except db.DuplicateDemandError as exc:
            logger.info("Rejected duplicate demand (existing %s)", exc.existing_id)
            return SubmissionResult(success=False, message=DUPLICATE_MESSAGE)
        return SubmissionResult(success=True, message=demand["id"])
