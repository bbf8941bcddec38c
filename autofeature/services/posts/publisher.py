# autofeature/services/posts/publisher.py
from __future__ import annotations

from typing import Iterable, Optional
from uuid import UUID

from autofeature.common.logging import get_logger
from autofeature.database.models import Post
from autofeature.database.repos.post_repo import PostRepo
from autofeature.domain.enums import PostStatus
from autofeature.services.events.hooks import PUBLISH_POST, TRANSITION_POST_STATUS, HookRegistry

logger = get_logger(__name__)

# old_status reported for a post that did not exist before
NEW_STATUS = "new"


class PostPublisher:
    """
    Stores post status changes and fires the matching hooks:
      - transition_post_status(new, old, post_id) on every status write
      - publish_post(post_id) whenever the new status is "publish"
    """

    def __init__(self, posts: PostRepo, hooks: HookRegistry) -> None:
        self.posts = posts
        self.hooks = hooks

    def create(
        self,
        *,
        title: str,
        status: PostStatus = PostStatus.draft,
        tags: Iterable[str] = (),
        categories: Iterable[str] = (),
        data_origin: Optional[str] = None,
    ) -> Post:
        post = self.posts.create_post(
            title=title, status=status, tags=tags, categories=categories, data_origin=data_origin
        )
        self._fire(post.id, PostStatus(post.status), NEW_STATUS)
        return post

    def set_status(self, post_id: UUID, status: PostStatus) -> Post:
        post, old = self.posts.set_status(post_id, status)
        self._fire(post.id, PostStatus(post.status), old)
        return post

    def _fire(self, post_id: UUID, new: PostStatus, old: PostStatus | str) -> None:
        logger.debug("post %s: %s -> %s", post_id, old, new)
        self.hooks.do_action(TRANSITION_POST_STATUS, new.value, str(old), post_id)
        if new is PostStatus.publish:
            self.hooks.do_action(PUBLISH_POST, post_id)
