"""Wizard session request/response schemas."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .demands import SubmissionResultSchema


class FieldsUpdate(BaseModel):
    """Partial edit of demand fields. Omitted fields are left as they are."""

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    cooperationType: Optional[str] = None


class JumpRequest(BaseModel):
    target: int = Field(..., ge=0)


class ExampleSchema(BaseModel):
    id: str
    label: str
    values: Dict[str, str] = Field(default_factory=dict)


class StepSchema(BaseModel):
    index: int
    key: str
    title: str
    required_fields: List[str] = Field(default_factory=list)
    shown_fields: List[str] = Field(default_factory=list)


class WizardOptionsResponse(BaseModel):
    """Step definitions and option catalogs for rendering the form."""

    steps: List[StepSchema]
    options: Dict[str, List[Any]] = Field(default_factory=dict)


class StepIndicatorSchema(BaseModel):
    index: int
    key: str
    title: str
    reached: bool
    clickable: bool


class NotificationSchema(BaseModel):
    kind: Literal["success", "failure", "error"]
    title: str
    detail: str = ""


class WizardStateResponse(BaseModel):
    """Full session state for rendering."""

    session_id: str
    current_step: int = Field(..., ge=0, le=2)
    step_key: str
    field_values: Dict[str, str]
    is_submitting: bool = False
    active_mode: Literal["examples", "form"] = "examples"
    field_errors: Dict[str, str] = Field(default_factory=dict)
    steps: List[StepIndicatorSchema] = Field(default_factory=list)
    summary: List[List[str]] = Field(default_factory=list)
    can_go_back: bool = False
    can_go_next: bool = True
    can_submit: bool = False


class NavigationResponse(BaseModel):
    moved: bool
    step: int
    failures: Dict[str, str] = Field(default_factory=dict)
    state: WizardStateResponse


class SubmitResponse(BaseModel):
    result: SubmissionResultSchema
    notifications: List[NotificationSchema] = Field(default_factory=list)
    redirect: Optional[str] = None
    state: Optional[WizardStateResponse] = None
