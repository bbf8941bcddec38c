from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from autofeature.common.settings import get_settings
from autofeature.database.repos.attachment_repo import AttachmentRepo
from autofeature.services.api.deps import get_db, transactional_session
from autofeature.services.schemas import AttachmentCreate, AttachmentRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/attachments", tags=["attachments"])


@router.post("", response_model=AttachmentRead, status_code=HTTPStatus.CREATED)
def create_attachment(payload: AttachmentCreate, db: Session = Depends(transactional_session)) -> AttachmentRead:
    obj = AttachmentRepo(db).create(data_origin="api", **payload.model_dump())
    db.refresh(obj)
    return AttachmentRead.model_validate(obj)


@router.get("/{attachment_id}", response_model=AttachmentRead)
def get_attachment(attachment_id: UUID, db: Session = Depends(get_db)) -> AttachmentRead:
    obj = AttachmentRepo(db).get(attachment_id)
    if not obj:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Attachment not found")
    return AttachmentRead.model_validate(obj)


@router.get("", response_model=List[AttachmentRead])
def list_attachments(
    q: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
) -> List[AttachmentRead]:
    rows = AttachmentRepo(db).list(q=q, limit=limit, offset=offset)
    return [AttachmentRead.model_validate(r) for r in rows]
