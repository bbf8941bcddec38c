# autofeature/domain/policies/title_prefix.py
from __future__ import annotations

from autofeature.domain.enums.axis import Axis

DEFAULT_PREFIX_WORD = "active"


def eligible_title_prefix(axis: Axis | str, slug: str, word: str = DEFAULT_PREFIX_WORD) -> str:
    """
    Literal title prefix an attachment must carry to be eligible for `slug`:

        eligible_title_prefix(Axis.tag, "sunset")  -> "active tag sunset"

    Anything may follow the prefix ("active tag sunset - beach.jpg").
    """
    return f"{word} {Axis(axis).value} {slug}"


def is_eligible_title(title: str | None, axis: Axis | str, slug: str, word: str = DEFAULT_PREFIX_WORD) -> bool:
    """Case-sensitive prefix check, same rule the store query applies."""
    if not title:
        return False
    return title.startswith(eligible_title_prefix(axis, slug, word))
