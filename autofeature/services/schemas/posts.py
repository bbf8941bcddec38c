from __future__ import annotations
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from autofeature.domain.enums import PostStatus


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    status: PostStatus = PostStatus.draft
    tags: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)


class PostStatusUpdate(BaseModel):
    status: PostStatus


class PostRead(BaseModel):
    id: UUID
    title: str
    status: PostStatus
    tags: List[str] = Field(default_factory=list)          # slugs
    categories: List[str] = Field(default_factory=list)    # slugs
    featured_image_id: Optional[UUID] = None
