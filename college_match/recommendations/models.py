from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_interests: list[str] = Field(default_factory=list)
    matched_types: list[str] = Field(default_factory=list)
    recommended_colleges: list[dict[str, Any]] = Field(default_factory=list)
    stream: str | None = None
    total_found: int = 0
