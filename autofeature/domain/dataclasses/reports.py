# autofeature/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import StrEnum
from typing import Any, Dict, Optional

from autofeature.domain.entities.resolution import ResolutionResult


# ---------------------------------------------------------------------------
# Base report (shared fields + utilities)
# ---------------------------------------------------------------------------
@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - helpers: start(), stop(), as_dict()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Featured-image assignment report
# ---------------------------------------------------------------------------
class AssignmentOutcome(StrEnum):
    skipped = "skipped"      # post already had a featured image
    assigned = "assigned"    # resolver found one and it was written
    no_match = "no_match"    # nothing eligible on either axis
    raced = "raced"          # found one, but another writer got there first


@dataclass
class AssignmentReport(BaseReport):
    post_id: Any = None
    outcome: AssignmentOutcome = AssignmentOutcome.no_match
    result: ResolutionResult = field(default_factory=ResolutionResult.none)

    @property
    def assigned(self) -> bool:
        return self.outcome is AssignmentOutcome.assigned
