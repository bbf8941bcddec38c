# autofeature/database/repos/post_repo.py
from __future__ import annotations
from typing import Iterable, List, Optional, Tuple
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.orm import Session

from autofeature.database.models import Post, PostMeta, PostTerm, Term
from autofeature.database.repos.term_repo import TermRepo
from autofeature.domain.enums import Axis, PostStatus

THUMBNAIL_META_KEY = "_thumbnail_id"


class PostRepo:
    """
    Posts, their terms and their meta. Satisfies PostStorePort via structural typing.

    Meta is single-valued per (post_id, meta_key):
      - add_meta(unique=True)  -> write-once; a no-op when the key already exists
      - update_meta()          -> set/overwrite
    """

    def __init__(self, db: Session, *, thumbnail_key: str = THUMBNAIL_META_KEY) -> None:
        self.db = db
        self.thumbnail_key = thumbnail_key
        self.terms = TermRepo(db)

    # ---------- posts ----------

    def get(self, post_id: UUID) -> Optional[Post]:
        return self.db.get(Post, post_id)

    def require(self, post_id: UUID) -> Post:
        post = self.get(post_id)
        if not post:
            raise ValueError("Post not found")
        return post

    def create_post(
        self,
        *,
        title: str,
        status: PostStatus = PostStatus.draft,
        tags: Iterable[str] = (),
        categories: Iterable[str] = (),
        data_origin: Optional[str] = None,
    ) -> Post:
        post = Post(title=title, status=PostStatus(status), data_origin=data_origin)
        post.terms = (
            self.terms.find_or_create_many(Axis.tag, tags)
            + self.terms.find_or_create_many(Axis.category, categories)
        )
        self.db.add(post)
        self.db.flush()
        return post

    def set_status(self, post_id: UUID, status: PostStatus) -> Tuple[Post, PostStatus]:
        """Store the new status; returns (post, old_status) so callers can fire the transition."""
        post = self.require(post_id)
        old = PostStatus(post.status)
        post.status = PostStatus(status)
        self.db.flush()
        return post, old

    # ---------- classification reads ----------

    def _slugs(self, post_id: UUID, axis: Axis) -> List[str]:
        stmt = (
            select(Term.slug)
            .join(PostTerm, PostTerm.term_id == Term.id)
            .where(PostTerm.post_id == post_id, Term.axis == axis)
            .order_by(Term.slug.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get_tags(self, post_id: UUID) -> List[str]:
        return self._slugs(post_id, Axis.tag)

    def get_categories(self, post_id: UUID) -> List[str]:
        return self._slugs(post_id, Axis.category)

    # ---------- meta ----------

    def get_meta(self, post_id: UUID, key: str) -> Optional[str]:
        stmt = select(PostMeta.meta_value).where(PostMeta.post_id == post_id, PostMeta.meta_key == key)
        return self.db.execute(stmt).scalars().first()

    def add_meta(self, post_id: UUID, key: str, value: str, unique: bool = True) -> bool:
        """
        Insert meta for the post. With unique=True an existing key wins and
        nothing is written. Returns True only if a row was written.
        """
        if not unique:
            self.update_meta(post_id, key, value)
            return True
        self.db.flush()
        stmt = (
            pg_insert(PostMeta)
            .values(post_id=post_id, meta_key=key, meta_value=value)
            .on_conflict_do_nothing(index_elements=[PostMeta.post_id, PostMeta.meta_key])
        )
        res = self.db.execute(stmt)
        return (res.rowcount or 0) == 1

    def update_meta(self, post_id: UUID, key: str, value: str) -> None:
        self.db.flush()
        ins = pg_insert(PostMeta).values(post_id=post_id, meta_key=key, meta_value=value)
        stmt = ins.on_conflict_do_update(
            index_elements=[PostMeta.post_id, PostMeta.meta_key],
            set_={"meta_value": ins.excluded.meta_value},
        )
        self.db.execute(stmt)

    # ---------- featured image ----------

    def featured_image_id(self, post_id: UUID) -> Optional[UUID]:
        raw = (self.get_meta(post_id, self.thumbnail_key) or "").strip()
        if not raw or raw == "0":
            return None
        try:
            return UUID(raw)
        except ValueError:
            return None

    def has_featured_image(self, post_id: UUID) -> bool:
        # Any non-empty value counts, even one we cannot parse; it is not ours to replace.
        raw = (self.get_meta(post_id, self.thumbnail_key) or "").strip()
        return bool(raw) and raw != "0"
