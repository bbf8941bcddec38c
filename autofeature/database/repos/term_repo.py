from __future__ import annotations
from typing import Iterable, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from autofeature.common.naming.slugger import slugify
from autofeature.database.models.taxonomy import Term
from autofeature.domain.enums import Axis


class TermRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get_by_slug(self, axis: Axis, slug: str) -> Optional[Term]:
        stmt = select(Term).where(Term.axis == Axis(axis), Term.slug == slug).limit(1)
        return self.db.execute(stmt).scalars().first()

    def find_or_create(self, axis: Axis, name: str) -> Term:
        """
        Resolve a tag/category by its display name. The slug is derived with
        slugify(), so "Road Trip" and "road-trip" land on the same term.
        """
        slug = slugify(name)
        if not slug:
            raise ValueError(f"Cannot derive a slug from {name!r}")
        existing = self.get_by_slug(axis, slug)
        if existing:
            return existing
        t = Term(axis=Axis(axis), name=name.strip(), slug=slug)
        self.db.add(t)
        self.db.flush()
        return t

    def find_or_create_many(self, axis: Axis, names: Iterable[str]) -> List[Term]:
        out: List[Term] = []
        seen = set()
        for n in names or ():
            t = self.find_or_create(axis, n)
            if t.id not in seen:
                seen.add(t.id)
                out.append(t)
        return out
