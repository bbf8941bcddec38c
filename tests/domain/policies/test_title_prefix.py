from autofeature.domain.enums import Axis
from autofeature.domain.policies.title_prefix import eligible_title_prefix, is_eligible_title


def test_prefix_format():
    assert eligible_title_prefix(Axis.tag, "sunset") == "active tag sunset"
    assert eligible_title_prefix("category", "news") == "active category news"
    assert eligible_title_prefix(Axis.tag, "sunset", word="live") == "live tag sunset"


def test_eligible_titles():
    assert is_eligible_title("active tag sunset - beach.jpg", Axis.tag, "sunset")
    assert is_eligible_title("active category news update.png", Axis.category, "news")
    assert is_eligible_title("active tag sunset", Axis.tag, "sunset")


def test_ineligible_titles():
    # wrong axis, wrong case, missing prefix, empty
    assert not is_eligible_title("active category sunset.jpg", Axis.tag, "sunset")
    assert not is_eligible_title("Active tag sunset.jpg", Axis.tag, "sunset")
    assert not is_eligible_title("sunset active tag sunset.jpg", Axis.tag, "sunset")
    assert not is_eligible_title("", Axis.tag, "sunset")
    assert not is_eligible_title(None, Axis.tag, "sunset")
