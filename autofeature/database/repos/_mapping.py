# autofeature/database/repos/_mapping.py
from __future__ import annotations
from autofeature.database.models.media import Attachment as DBAttachment
from autofeature.domain.entities.attachment import Attachment as DomainAttachment


def to_domain_attachment(row: DBAttachment) -> DomainAttachment:
    return DomainAttachment(
        id=row.id,
        title=row.title,
        mime_type=row.mime_type,
        status=row.status,
    )
