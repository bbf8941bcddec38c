# autofeature/database/core/service_object.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID as PyUUID

from sqlalchemy import DateTime, Text, func, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, declared_attr


class ServiceObject:
    """
    Mixin for persisted entities (posts, attachments, terms):
    uuid primary key, created/updated timestamps and a free-form origin.
    Use with multiple inheritance: `class Post(ServiceObject, Base): ...`
    """
    __abstract__ = True

    @declared_attr
    def id(cls) -> Mapped[PyUUID]:
        # gen_random_uuid() comes from pgcrypto; enabled in migrations
        return mapped_column(
            UUID(as_uuid=True),
            primary_key=True,
            server_default=text("gen_random_uuid()"),
        )

    @declared_attr
    def date_created(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(DateTime(timezone=True), server_default=func.clock_timestamp())

    @declared_attr
    def last_updated(cls) -> Mapped[Optional[datetime]]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.clock_timestamp(),
            onupdate=func.clock_timestamp(),
        )

    @declared_attr
    def data_origin(cls) -> Mapped[Optional[str]]:
        # e.g. "api", "import"
        return mapped_column(Text, nullable=True)
