from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from autofeature.common.settings import get_settings
from autofeature.database.repos.media_lookup import MediaLookupRepo
from autofeature.domain.policies.image_resolver import ImageResolver
from autofeature.services.api.deps import get_db
from autofeature.services.schemas import ResolveRequest, ResolveResponse

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/resolve", tags=["resolve"])


@router.post("", response_model=ResolveResponse)
def preview_resolution(payload: ResolveRequest, db: Session = Depends(get_db)) -> ResolveResponse:
    """Which attachment would a post with these slugs get? Read-only."""
    resolver = ImageResolver(policy=payload.policy or cfg.resolver.policy)
    result = resolver.resolve(payload.tags, payload.categories, MediaLookupRepo.from_settings(db, cfg))
    return ResolveResponse(
        found=result.found,
        attachment_id=result.attachment_id,
        axis=result.axis,
        slug=result.slug,
        policy=resolver.policy,
    )
