import uuid

from autofeature.domain.entities.attachment import Attachment
from autofeature.domain.entities.resolution import ResolutionResult
from autofeature.domain.entities.slug_group import SlugGroup
from autofeature.domain.enums import Axis


def test_slug_group_sorts_and_keeps_duplicates():
    g = SlugGroup.of(Axis.tag, ["zeta", "alpha", "mid", "alpha"])
    assert g.sorted_slugs() == ("alpha", "alpha", "mid", "zeta")
    # original order untouched
    assert g.slugs == ("zeta", "alpha", "mid", "alpha")


def test_slug_group_empty_and_none():
    assert not SlugGroup.of(Axis.category, None)
    assert not SlugGroup.of(Axis.category, [])
    assert not SlugGroup.of(Axis.category, ["", ""])
    assert SlugGroup.of("category", ["news"]).axis is Axis.category


def test_resolution_result_none_and_found():
    none = ResolutionResult.none()
    assert not none.found
    assert none == ResolutionResult()

    aid = uuid.uuid4()
    hit = ResolutionResult(attachment_id=aid, axis=Axis.tag, slug="sunset")
    assert hit.found
    assert hit.as_dict() == {"attachment_id": aid, "axis": Axis.tag, "slug": "sunset"}


def test_attachment_is_image():
    assert Attachment(id=uuid.uuid4(), title="t", mime_type="image/png").is_image
    assert not Attachment(id=uuid.uuid4(), title="t", mime_type="application/pdf").is_image
