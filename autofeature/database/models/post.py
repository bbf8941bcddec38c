# autofeature/database/models/post.py
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import Enum as SAEnum, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autofeature.database.core.main import Base
from autofeature.database.core.service_object import ServiceObject
from autofeature.domain.enums import PostStatus
from autofeature.database.models.taxonomy import PostTerm

if TYPE_CHECKING:
    from .taxonomy import Term


# =======================
# Posts
# =======================
class Post(ServiceObject, Base):
    __tablename__ = "post"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[PostStatus] = mapped_column(
        SAEnum(PostStatus, name="post_status", inherit_schema=True),
        nullable=False,
        default=PostStatus.draft,
        server_default=PostStatus.draft.value,
    )

    terms: Mapped[List["Term"]] = relationship(
        "Term",
        secondary=lambda: PostTerm.__table__,
        back_populates="posts",
    )
    meta: Mapped[List["PostMeta"]] = relationship(
        back_populates="post",
        cascade="all, delete-orphan",
    )


# =======================
# Post meta (one value per key)
# =======================
class PostMeta(Base):
    __tablename__ = "post_meta"
    __table_args__ = (
        Index("ix_post_meta_key", "meta_key"),
    )

    post_id: Mapped[UUID_t] = mapped_column(
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    meta_key: Mapped[str] = mapped_column(String(255), primary_key=True)
    meta_value: Mapped[Optional[str]] = mapped_column(Text)

    post: Mapped["Post"] = relationship(back_populates="meta")
