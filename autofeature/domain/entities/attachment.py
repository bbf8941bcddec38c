# autofeature/domain/entities/attachment.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Attachment:
    """
    A media-library entry as the resolver sees it. Owned by the media store;
    the resolver only reads it.
    """
    id: UUID
    title: str
    mime_type: str = "image/jpeg"
    status: str = "inherit"

    @property
    def is_image(self) -> bool:
        return self.mime_type.split("/", 1)[0] == "image"
