from __future__ import annotations
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autofeature.domain.enums import Axis, ResolutionPolicy


class ResolveRequest(BaseModel):
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    policy: Optional[ResolutionPolicy] = None   # falls back to settings

    @field_validator("policy", mode="before")
    @classmethod
    def _normalize_policy(cls, v):
        if isinstance(v, str):
            return ResolutionPolicy.parse(v)
        return v


class ResolveResponse(BaseModel):
    found: bool
    attachment_id: Optional[UUID] = None
    axis: Optional[Axis] = None
    slug: Optional[str] = None
    policy: ResolutionPolicy

    model_config = ConfigDict(from_attributes=True)
