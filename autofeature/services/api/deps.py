# autofeature/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session

from autofeature.common.settings import get_settings
from autofeature.database.core.main import SessionLocal
from autofeature.database.repos.post_repo import PostRepo
from autofeature.services.events.hooks import HookRegistry
from autofeature.services.featured_image.service import FeaturedImageService
from autofeature.services.posts.publisher import PostPublisher


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction, so a failing publish hook rolls
    back the status change as well.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    with db.begin():
        yield db


def get_hooks(db: Session = Depends(transactional_session)) -> HookRegistry:
    """Per-request hook registry with the featured-image handler bound to this session."""
    cfg = get_settings()
    hooks = HookRegistry()
    FeaturedImageService.from_session(db, cfg).register(hooks)
    return hooks


def get_publisher(
    db: Session = Depends(transactional_session),
    hooks: HookRegistry = Depends(get_hooks),
) -> PostPublisher:
    cfg = get_settings()
    return PostPublisher(PostRepo(db, thumbnail_key=cfg.resolver.meta_key), hooks)
