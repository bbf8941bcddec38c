from __future__ import annotations
from typing import Protocol, Sequence
from autofeature.domain.entities.attachment import Attachment
from autofeature.domain.enums.axis import Axis


class MediaLookupPort(Protocol):
    # Eligible image attachments for (axis, slug), in no particular order.
    def lookup(self, axis: Axis, slug: str) -> Sequence[Attachment]: ...
