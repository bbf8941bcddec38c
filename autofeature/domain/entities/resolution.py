# autofeature/domain/entities/resolution.py
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional
from uuid import UUID

from autofeature.domain.enums.axis import Axis


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of a resolution: either the chosen attachment (with the axis/slug
    that produced it) or "none".
    """
    attachment_id: Optional[UUID] = None
    axis: Optional[Axis] = None
    slug: Optional[str] = None

    @classmethod
    def none(cls) -> "ResolutionResult":
        return cls()

    @property
    def found(self) -> bool:
        return self.attachment_id is not None

    def as_dict(self):
        return asdict(self)
