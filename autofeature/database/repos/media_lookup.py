# autofeature/database/repos/media_lookup.py
from __future__ import annotations
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.orm import Session

from autofeature.common.settings import Settings, get_settings
from autofeature.database.models import Attachment as DBAttachment
from autofeature.database.repos._mapping import to_domain_attachment
from autofeature.domain.entities.attachment import Attachment as DomainAttachment
from autofeature.domain.enums.axis import Axis
from autofeature.domain.policies.title_prefix import DEFAULT_PREFIX_WORD, eligible_title_prefix


class MediaLookupRepo:
    """
    Read-only attachment search. Satisfies MediaLookupPort via structural typing.

    An attachment is returned for (axis, slug) when:
      - mime_type is "<mime_type>/..." (images by default)
      - status == attachment_status ("inherit")
      - title starts with "<word> <axis> <slug>" (case-sensitive, wildcards escaped)
    Rows come back in random order, at most `limit` of them.
    """

    def __init__(
        self,
        session: Session,
        *,
        word: str = DEFAULT_PREFIX_WORD,
        mime_type: str = "image",
        status: str = "inherit",
        limit: int = 1,
    ) -> None:
        self.session = session
        self.word = word
        self.mime_type = mime_type
        self.status = status
        self.limit = max(1, int(limit))

    @classmethod
    def from_settings(cls, session: Session, settings: Optional[Settings] = None) -> "MediaLookupRepo":
        rc = (settings or get_settings()).resolver
        return cls(
            session,
            word=rc.title_prefix_word,
            mime_type=rc.mime_type,
            status=rc.attachment_status,
            limit=rc.lookup_limit,
        )

    def lookup(self, axis: Axis, slug: str) -> List[DomainAttachment]:
        prefix = eligible_title_prefix(axis, slug, self.word)
        A = DBAttachment
        stmt = (
            select(A)
            .where(
                A.mime_type.startswith(f"{self.mime_type}/", autoescape=True),
                A.status == self.status,
                A.title.startswith(prefix, autoescape=True),
            )
            .order_by(func.random())
            .limit(self.limit)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [to_domain_attachment(r) for r in rows]
