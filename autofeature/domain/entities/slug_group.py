# autofeature/domain/entities/slug_group.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from autofeature.domain.enums.axis import Axis


@dataclass(frozen=True)
class SlugGroup:
    """Ordered slugs for one classification axis (a post's tags, or its categories)."""
    axis: Axis
    slugs: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, axis: Axis, slugs: Optional[Iterable[str]]) -> "SlugGroup":
        # None / empty are valid: the post simply has nothing on this axis
        return cls(axis=Axis(axis), slugs=tuple(s for s in (slugs or ()) if s))

    def sorted_slugs(self) -> Tuple[str, ...]:
        # sorted() is stable, duplicates are kept
        return tuple(sorted(self.slugs))

    def __bool__(self) -> bool:
        return bool(self.slugs)
