# tests/domain/policies/test_image_resolver.py
from __future__ import annotations

import random
import uuid
from typing import List, Tuple

import pytest

from autofeature.domain.entities.attachment import Attachment
from autofeature.domain.enums import Axis, ResolutionPolicy
from autofeature.domain.policies.image_resolver import ImageResolver
from autofeature.domain.policies.title_prefix import is_eligible_title


class FakeMediaLibrary:
    """In-memory MediaLookupPort: applies the same title-prefix rule as the DB repo."""
    def __init__(self, *attachments: Attachment):
        self.attachments = list(attachments)
        self.calls: List[Tuple[Axis, str]] = []

    def lookup(self, axis, slug):
        self.calls.append((Axis(axis), slug))
        return [
            a for a in self.attachments
            if a.is_image and a.status == "inherit" and is_eligible_title(a.title, axis, slug)
        ]


class PickLast:
    """rng stand-in: always picks the last element, so tests can see choice() was used."""
    def __init__(self):
        self.seen: List[list] = []

    def choice(self, seq):
        self.seen.append(list(seq))
        return seq[-1]


def _img(title: str, mime: str = "image/jpeg", status: str = "inherit") -> Attachment:
    return Attachment(id=uuid.uuid4(), title=title, mime_type=mime, status=status)


# -------------------------
# ordering & axis precedence
# -------------------------

@pytest.mark.parametrize("policy", list(ResolutionPolicy))
def test_tags_sorted_before_lookup(policy):
    alpha = _img("active tag alpha hero.jpg")
    lib = FakeMediaLibrary(alpha)

    res = ImageResolver(policy=policy).resolve(["zeta", "alpha"], [], lib)

    assert res.attachment_id == alpha.id
    assert res.axis == Axis.tag
    assert res.slug == "alpha"


def test_first_match_stops_at_first_hit_in_sorted_order():
    sunset = _img("active tag sunset - beach.jpg")
    travel = _img("active tag travel - trip.jpg")
    lib = FakeMediaLibrary(sunset, travel)

    res = ImageResolver(policy=ResolutionPolicy.first_match).resolve(["travel", "sunset"], None, lib)

    assert res.attachment_id == sunset.id
    # "travel" is never looked up; categories never consulted
    assert lib.calls == [(Axis.tag, "sunset")]


@pytest.mark.parametrize("policy", list(ResolutionPolicy))
def test_tag_match_wins_over_category(policy):
    tag_img = _img("active tag x.jpg")
    cat_img = _img("active category y.jpg")
    lib = FakeMediaLibrary(tag_img, cat_img)

    res = ImageResolver(policy=policy).resolve(["x"], ["y"], lib)

    assert res.attachment_id == tag_img.id
    assert all(axis == Axis.tag for axis, _ in lib.calls)


def test_falls_back_to_categories_when_no_tag_matches():
    news = _img("active category news update.png", mime="image/png")
    lib = FakeMediaLibrary(news)

    res = ImageResolver().resolve(["unmatched"], ["news"], lib)

    assert res.found
    assert res.attachment_id == news.id
    assert res.axis == Axis.category
    assert lib.calls == [(Axis.tag, "unmatched"), (Axis.category, "news")]


def test_no_match_anywhere_returns_none():
    lib = FakeMediaLibrary(_img("active tag other.jpg"), _img("something else"))

    res = ImageResolver().resolve(["x"], ["y"], lib)

    assert not res.found
    assert res.attachment_id is None and res.axis is None and res.slug is None


@pytest.mark.parametrize("tags,cats", [([], []), (None, None), ([], None)])
def test_empty_inputs_are_valid_and_skip_lookups(tags, cats):
    lib = FakeMediaLibrary(_img("active tag a.jpg"))
    res = ImageResolver().resolve(tags, cats, lib)
    assert not res.found
    assert lib.calls == []


# -------------------------
# eligibility details
# -------------------------

def test_title_prefix_is_case_sensitive():
    lib = FakeMediaLibrary(_img("Active Tag sunset.jpg"), _img("active tag Sunset.jpg"))
    assert not ImageResolver().resolve(["sunset"], [], lib).found


def test_non_image_and_non_inherit_attachments_are_ignored():
    lib = FakeMediaLibrary(
        _img("active tag doc.pdf", mime="application/pdf"),
        _img("active tag doc draft.jpg", status="trash"),
    )
    assert not ImageResolver().resolve(["doc"], [], lib).found


def test_prefix_match_means_longer_slug_titles_also_match():
    # "active tag sun" is a prefix of "active tag sunset ..." - lexical rule, no word boundary
    sunset = _img("active tag sunset.jpg")
    lib = FakeMediaLibrary(sunset)
    assert ImageResolver().resolve(["sun"], [], lib).attachment_id == sunset.id


# -------------------------
# randomness
# -------------------------

def test_first_match_picks_among_several_candidates_with_rng():
    a = _img("active tag beach one.jpg")
    b = _img("active tag beach two.jpg")
    rng = PickLast()

    res = ImageResolver(policy=ResolutionPolicy.first_match, rng=rng).resolve(["beach"], [], FakeMediaLibrary(a, b))

    assert res.attachment_id == b.id
    assert rng.seen == [[a, b]]


def test_pooled_random_scans_every_slug_then_picks_from_pool():
    alpha = _img("active tag alpha.jpg")
    gamma = _img("active tag gamma.jpg")
    lib = FakeMediaLibrary(alpha, gamma)
    rng = PickLast()

    res = ImageResolver(policy=ResolutionPolicy.pooled_random, rng=rng).resolve(
        ["gamma", "beta", "alpha"], ["news"], lib
    )

    # all three tag slugs were looked up, in sorted order; categories untouched
    assert lib.calls == [(Axis.tag, "alpha"), (Axis.tag, "beta"), (Axis.tag, "gamma")]
    # pool is one entry per slug with a hit, in sorted order; PickLast chose gamma
    assert rng.seen[-1] == [("alpha", alpha), ("gamma", gamma)]
    assert res.attachment_id == gamma.id
    assert res.slug == "gamma"


def test_pooled_random_is_uniform_over_hits():
    imgs = {s: _img(f"active tag {s}.jpg") for s in ("a", "b", "c")}
    lib = FakeMediaLibrary(*imgs.values())
    resolver = ImageResolver(policy=ResolutionPolicy.pooled_random, rng=random.Random(1234))

    picked = {resolver.resolve(["a", "b", "c"], [], lib).slug for _ in range(200)}

    assert picked == {"a", "b", "c"}


def test_pooled_random_falls_back_to_categories():
    news = _img("active category news.jpg")
    lib = FakeMediaLibrary(news)
    res = ImageResolver(policy="pooled_random").resolve(["x"], ["news", "misc"], lib)
    assert res.attachment_id == news.id
    assert res.axis == Axis.category


def test_duplicate_slugs_are_harmless():
    img = _img("active tag dup.jpg")
    lib = FakeMediaLibrary(img)
    res = ImageResolver(policy=ResolutionPolicy.pooled_random).resolve(["dup", "dup"], [], lib)
    assert res.attachment_id == img.id


def test_policy_accepts_camel_case_names():
    assert ImageResolver(policy="pooledRandom").policy is ResolutionPolicy.pooled_random
    assert ImageResolver(policy="firstMatch").policy is ResolutionPolicy.first_match
    with pytest.raises(ValueError):
        ImageResolver(policy="best_guess")


def test_lookup_errors_propagate():
    class Broken:
        def lookup(self, axis, slug):
            raise RuntimeError("store unavailable")

    with pytest.raises(RuntimeError, match="store unavailable"):
        ImageResolver().resolve(["a"], [], Broken())


def test_resolve_axis_single_group():
    img = _img("active category travel.jpg")
    res = ImageResolver().resolve_axis(Axis.category, ["travel"], FakeMediaLibrary(img))
    assert res.attachment_id == img.id and res.axis == Axis.category
