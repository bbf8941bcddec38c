from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from autofeature.common.settings import get_settings
from autofeature.database.models import Post
from autofeature.database.repos.post_repo import PostRepo
from autofeature.services.api.deps import get_db, get_publisher
from autofeature.services.posts.publisher import PostPublisher
from autofeature.services.schemas import PostCreate, PostRead, PostStatusUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/posts", tags=["posts"])


def _to_out(repo: PostRepo, post: Post) -> PostRead:
    return PostRead(
        id=post.id,
        title=post.title,
        status=post.status,
        tags=repo.get_tags(post.id),
        categories=repo.get_categories(post.id),
        featured_image_id=repo.featured_image_id(post.id),
    )


@router.post("", response_model=PostRead, status_code=HTTPStatus.CREATED)
def create_post(payload: PostCreate, publisher: PostPublisher = Depends(get_publisher)) -> PostRead:
    try:
        post = publisher.create(
            title=payload.title,
            status=payload.status,
            tags=payload.tags,
            categories=payload.categories,
            data_origin="api",
        )
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    return _to_out(publisher.posts, post)


@router.get("/{post_id}", response_model=PostRead)
def get_post(post_id: UUID, db: Session = Depends(get_db)) -> PostRead:
    repo = PostRepo(db, thumbnail_key=cfg.resolver.meta_key)
    post = repo.get(post_id)
    if not post:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Post not found")
    return _to_out(repo, post)


@router.post("/{post_id}/status", response_model=PostRead)
def set_post_status(
    post_id: UUID,
    payload: PostStatusUpdate,
    publisher: PostPublisher = Depends(get_publisher),
) -> PostRead:
    if not publisher.posts.get(post_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Post not found")
    post = publisher.set_status(post_id, payload.status)
    return _to_out(publisher.posts, post)
