"""Validation gate for demand fields.

The gate is a capability: anything implementing ``validate`` can be
injected into the controller. The default implementation binds the rules
to a pydantic model, so the same constraints can be reused by API schemas.

Rules
-----
- ``title``        : at least ``title_min_length`` characters (5)
- ``description``  : at least ``description_min_length`` characters (20)
- everything else  : free-form, always valid
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from .config import WizardConfig
from .fields import FIELD_NAMES
from .state import get_step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldCheck:
    """Validation outcome for a single field."""

    name: str
    valid: bool
    message: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {"valid": self.valid, "message": self.message}


class ValidationGate(abc.ABC):
    """Judges whether field values satisfy a step's requirements."""

    @abc.abstractmethod
    def validate(
        self, fields: Iterable[str], values: Mapping[str, str]
    ) -> Dict[str, FieldCheck]:
        """Validate ``fields`` against ``values`` and report per field."""
        ...

    def step_passes(self, step_index: int, values: Mapping[str, str]) -> bool:
        return all(check.valid for check in self.step_checks(step_index, values).values())

    def step_checks(self, step_index: int, values: Mapping[str, str]) -> Dict[str, FieldCheck]:
        required = get_step(step_index).required_fields
        if not required:
            return {}
        return self.validate(required, values)


class DemandFieldsModel(BaseModel):
    """Field rules of a demand, expressed as a pydantic model.

    Thresholds and messages come from the ``WizardConfig`` passed in the
    validation context; without one the defaults apply.
    """

    model_config = ConfigDict(extra="ignore", validate_default=True)

    title: str = ""
    description: str = ""
    category: str = ""
    budget: str = ""
    timeline: str = ""
    cooperationType: str = ""

    @field_validator("title")
    @classmethod
    def _title_length(cls, value: str, info: ValidationInfo) -> str:
        config = _config_from(info)
        if len(value) < config.title_min_length:
            raise PydanticCustomError("title_too_short", config.title_too_short)
        return value

    @field_validator("description")
    @classmethod
    def _description_length(cls, value: str, info: ValidationInfo) -> str:
        config = _config_from(info)
        if len(value) < config.description_min_length:
            raise PydanticCustomError("description_too_short", config.description_too_short)
        return value


def _config_from(info: ValidationInfo) -> WizardConfig:
    context = info.context or {}
    return context.get("config") or WizardConfig()


class DemandValidationGate(ValidationGate):
    """Default gate backed by ``DemandFieldsModel``. Pure and synchronous."""

    def __init__(self, config: Optional[WizardConfig] = None):
        self.config = config or WizardConfig()

    def validate(
        self, fields: Iterable[str], values: Mapping[str, str]
    ) -> Dict[str, FieldCheck]:
        names = list(fields)
        data = {name: values.get(name) or "" for name in FIELD_NAMES}

        failures: Dict[str, str] = {}
        try:
            DemandFieldsModel.model_validate(data, context={"config": self.config})
        except ValidationError as exc:
            for err in exc.errors():
                if err["loc"]:
                    failures.setdefault(str(err["loc"][0]), err["msg"])

        results = {
            name: FieldCheck(name=name, valid=name not in failures, message=failures.get(name, ""))
            for name in names
        }
        invalid = [name for name, check in results.items() if not check.valid]
        if invalid:
            logger.debug("Validation failed for fields: %s", invalid)
        return results
