# autofeature/database/models/taxonomy.py
from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import Enum as SAEnum, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from autofeature.database.core.main import Base
from autofeature.database.core.service_object import ServiceObject
from autofeature.domain.enums import Axis

if TYPE_CHECKING:
    from .post import Post


# =======================
# Terms (tags & categories)
# =======================
class Term(ServiceObject, Base):
    __tablename__ = "term"
    __table_args__ = (
        UniqueConstraint("axis", "slug", name="uq_term_axis_slug"),
    )

    axis: Mapped[Axis] = mapped_column(
        SAEnum(Axis, name="term_axis", inherit_schema=True),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)

    posts: Mapped[List["Post"]] = relationship(
        "Post",
        secondary=lambda: PostTerm.__table__,
        back_populates="terms",
    )


class PostTerm(Base):
    __tablename__ = "post_term"
    __table_args__ = (
        Index("ix_post_term_term_id", "term_id"),
    )

    post_id: Mapped[UUID_t] = mapped_column(
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    term_id: Mapped[UUID_t] = mapped_column(
        ForeignKey("term.id", ondelete="CASCADE"),
        primary_key=True,
    )
