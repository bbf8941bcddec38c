# autofeature/database/models/media.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from autofeature.database.core.main import Base
from autofeature.database.core.service_object import ServiceObject


# =======================
# Media library
# =======================
class Attachment(ServiceObject, Base):
    __tablename__ = "attachment"
    __table_args__ = (
        # LIKE 'prefix%' lookups are case-sensitive; text_pattern_ops lets Postgres use the index
        Index("ix_attachment_title_pattern", "title", postgresql_ops={"title": "text_pattern_ops"}),
        Index("ix_attachment_mime_status", "mime_type", "status"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)   # "image/jpeg"
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="inherit", server_default="inherit")
    file_name: Mapped[Optional[str]] = mapped_column(Text)
