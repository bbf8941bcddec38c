from __future__ import annotations
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AttachmentCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    mime_type: str = Field("image/jpeg", pattern=r"^[\w.+-]+/[\w.+-]+$")
    status: str = "inherit"
    file_name: Optional[str] = None


class AttachmentRead(BaseModel):
    id: UUID
    title: str
    mime_type: str
    status: str
    file_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
