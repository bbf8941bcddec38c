# autofeature/services/featured_image/service.py
from __future__ import annotations

import random
from typing import Any, Optional

from sqlalchemy.orm import Session

from autofeature.common.logging import get_logger
from autofeature.common.settings import Settings, get_settings
from autofeature.database.repos.media_lookup import MediaLookupRepo
from autofeature.database.repos.post_repo import PostRepo
from autofeature.domain.dataclasses.reports import AssignmentOutcome, AssignmentReport
from autofeature.domain.policies.image_resolver import ImageResolver
from autofeature.domain.ports.media_lookup import MediaLookupPort
from autofeature.domain.ports.posts import PostStorePort
from autofeature.services.events.hooks import (
    DEFAULT_PRIORITY,
    PUBLISH_POST,
    TRANSITION_POST_STATUS,
    HookRegistry,
)

logger = get_logger(__name__)


class FeaturedImageService:
    """
    Publish-event handler: give a freshly published post a featured image
    picked from the media library by its tags/categories.

    A post that already has a featured image is left alone, and the write is
    write-once, so firing the handler more than once for a post is harmless.
    """

    def __init__(
        self,
        posts: PostStorePort,
        media: MediaLookupPort,
        resolver: Optional[ImageResolver] = None,
        *,
        meta_key: str = "_thumbnail_id",
        publish_status: str = "publish",
        hook_priority: Optional[int] = None,
    ) -> None:
        self.posts = posts
        self.media = media
        self.resolver = resolver or ImageResolver()
        self.meta_key = meta_key
        self.publish_status = publish_status
        # transition_post_status priority; lower runs first
        self.hook_priority = get_settings().resolver.hook_priority if hook_priority is None else int(hook_priority)

    @classmethod
    def from_session(
        cls,
        session: Session,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> "FeaturedImageService":
        cfg = settings or get_settings()
        rc = cfg.resolver
        return cls(
            posts=PostRepo(session, thumbnail_key=rc.meta_key),
            media=MediaLookupRepo.from_settings(session, cfg),
            resolver=ImageResolver(policy=rc.policy, rng=rng),
            meta_key=rc.meta_key,
            publish_status=rc.publish_status,
            hook_priority=rc.hook_priority,
        )

    # --- hook wiring ---------------------------------------------------------

    def register(self, hooks: HookRegistry, priority: Optional[int] = None) -> HookRegistry:
        # transition_post_status runs ahead of handlers at the default priority
        prio = self.hook_priority if priority is None else priority
        hooks.add_action(TRANSITION_POST_STATUS, self.transition_post, priority=prio)
        hooks.add_action(PUBLISH_POST, self.publish_post, priority=DEFAULT_PRIORITY)
        return hooks

    # --- handlers ------------------------------------------------------------

    def transition_post(self, new_status: Any, old_status: Any, post_id: Any) -> Optional[AssignmentReport]:
        if str(new_status) != self.publish_status:
            return None
        return self.publish_post(post_id)

    def publish_post(self, post_id: Any) -> AssignmentReport:
        rep = AssignmentReport(post_id=post_id)
        rep.start()

        if self.posts.has_featured_image(post_id):
            logger.debug("post %s already has a featured image; skipping", post_id)
            rep.outcome = AssignmentOutcome.skipped
            rep.stop()
            return rep

        tags = self.posts.get_tags(post_id)
        categories = self.posts.get_categories(post_id)
        result = self.resolver.resolve(tags, categories, self.media)
        rep.result = result

        if not result.found:
            logger.debug("post %s: no eligible image for tags=%s categories=%s", post_id, tags, categories)
            rep.outcome = AssignmentOutcome.no_match
            rep.stop()
            return rep

        written = self.posts.add_meta(post_id, self.meta_key, str(result.attachment_id), unique=True)
        if written:
            logger.info(
                "post %s: featured image %s (%s %r, policy=%s)",
                post_id, result.attachment_id, result.axis, result.slug, self.resolver.policy,
            )
            rep.outcome = AssignmentOutcome.assigned
        else:
            logger.info("post %s: featured image already set by another writer", post_id)
            rep.outcome = AssignmentOutcome.raced

        rep.stop()
        return rep
