from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AssessmentIn(BaseModel):
    """Quiz submission. Unknown quiz fields are kept as-is."""

    model_config = ConfigDict(extra="allow")

    username: str | None = None
    userId: str | None = None
    stream: str | None = None
    specializedFields: list[str] = Field(default_factory=list)


class AssessmentCheck(BaseModel):
    hasTakenAssessment: bool
