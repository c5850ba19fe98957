"""Demand schemas for API contracts."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DemandCreate(BaseModel):
    """Request to create a demand directly (the wizard's submission payload)."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    category: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    cooperationType: Optional[str] = None


class DemandResponse(BaseModel):
    """API response for a stored demand."""

    id: str
    title: str
    description: str = ""
    category: Optional[str] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    cooperationType: Optional[str] = None
    status: str = "open"
    created_at: str


class SubmissionResultSchema(BaseModel):
    success: bool
    message: str = ""
