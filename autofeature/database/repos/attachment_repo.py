from __future__ import annotations
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.orm import Session

from autofeature.database.models import Attachment


class AttachmentRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(
        self,
        *,
        title: str,
        mime_type: str,
        status: str = "inherit",
        file_name: Optional[str] = None,
        data_origin: Optional[str] = None,
    ) -> Attachment:
        if not title or not title.strip():
            raise ValueError("Attachment title is required")
        obj = Attachment(
            title=title,
            mime_type=mime_type.strip().lower(),
            status=status,
            file_name=file_name,
            data_origin=data_origin,
        )
        self.db.add(obj)
        self.db.flush()
        return obj

    def get(self, attachment_id: UUID) -> Optional[Attachment]:
        return self.db.get(Attachment, attachment_id)

    def list(self, *, q: Optional[str] = None, limit: int = 100, offset: int = 0) -> List[Attachment]:
        stmt = select(Attachment)
        if q:
            stmt = stmt.where(Attachment.title.icontains(q, autoescape=True))
        stmt = stmt.order_by(Attachment.title.asc()).offset(offset).limit(limit)
        return list(self.db.execute(stmt).scalars().all())
