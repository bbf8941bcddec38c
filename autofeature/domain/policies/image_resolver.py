# autofeature/domain/policies/image_resolver.py
from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from autofeature.common.logging import get_logger
from autofeature.domain.entities.attachment import Attachment
from autofeature.domain.entities.resolution import ResolutionResult
from autofeature.domain.entities.slug_group import SlugGroup
from autofeature.domain.enums.axis import Axis
from autofeature.domain.enums.resolution_policy import ResolutionPolicy
from autofeature.domain.ports.media_lookup import MediaLookupPort

logger = get_logger(__name__)

# Tags are more specific than categories, so they are tried first.
AXIS_ORDER: Tuple[Axis, ...] = (Axis.tag, Axis.category)


class ImageResolver:
    """
    Decides which attachment (if any) becomes a post's featured image.

    Rule:
      - Slugs of an axis are tried in ascending lexicographic order.
      - The tag axis is tried first; categories are only consulted when no
        tag slug produced an eligible attachment.
      - policy=first_match:   stop at the first slug with an eligible image.
      - policy=pooled_random: look up EVERY slug of the axis, keep one image
        per slug, then pick one from that pool at random.

    The lookup may hand back several eligible attachments for one slug; any
    of them is a valid representative, so one is picked with `rng`.
    Nothing is written here. Persisting the choice belongs to the caller.
    """

    def __init__(
        self,
        policy: ResolutionPolicy | str = ResolutionPolicy.first_match,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.policy = ResolutionPolicy.parse(policy) if isinstance(policy, str) else policy
        self._rng = rng or random.Random()

    # ---------------- public ----------------

    def resolve(
        self,
        tag_slugs: Optional[Iterable[str]],
        category_slugs: Optional[Iterable[str]],
        lookup: MediaLookupPort,
    ) -> ResolutionResult:
        groups = {
            Axis.tag: SlugGroup.of(Axis.tag, tag_slugs),
            Axis.category: SlugGroup.of(Axis.category, category_slugs),
        }
        for axis in AXIS_ORDER:
            result = self.resolve_group(groups[axis], lookup)
            if result.found:
                return result

        return ResolutionResult.none()

    def resolve_axis(
        self,
        axis: Axis,
        slugs: Optional[Iterable[str]],
        lookup: MediaLookupPort,
    ) -> ResolutionResult:
        return self.resolve_group(SlugGroup.of(axis, slugs), lookup)

    def resolve_group(self, group: SlugGroup, lookup: MediaLookupPort) -> ResolutionResult:
        if not group:
            return ResolutionResult.none()

        if self.policy is ResolutionPolicy.pooled_random:
            return self._pooled_random(group, lookup)
        return self._first_match(group, lookup)

    # ---------------- internals ----------------

    def _first_match(self, group: SlugGroup, lookup: MediaLookupPort) -> ResolutionResult:
        for slug in group.sorted_slugs():
            picked = self._pick(lookup.lookup(group.axis, slug))
            if picked is not None:
                logger.debug("first_match: %s %r -> %s", group.axis, slug, picked.id)
                return ResolutionResult(attachment_id=picked.id, axis=group.axis, slug=slug)
        return ResolutionResult.none()

    def _pooled_random(self, group: SlugGroup, lookup: MediaLookupPort) -> ResolutionResult:
        pool: List[Tuple[str, Attachment]] = []
        for slug in group.sorted_slugs():
            picked = self._pick(lookup.lookup(group.axis, slug))
            if picked is not None:
                pool.append((slug, picked))

        if not pool:
            return ResolutionResult.none()

        slug, picked = self._rng.choice(pool)
        logger.debug("pooled_random: %s pool=%d -> %r %s", group.axis, len(pool), slug, picked.id)
        return ResolutionResult(attachment_id=picked.id, axis=group.axis, slug=slug)

    def _pick(self, candidates: Optional[Sequence[Attachment]]) -> Optional[Attachment]:
        items = list(candidates or ())
        if not items:
            return None
        if len(items) == 1:
            return items[0]
        return self._rng.choice(items)
