from __future__ import annotations
import re
from enum import StrEnum

_camel_re = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_sep_re = re.compile(r"[\s_-]+")


class ResolutionPolicy(StrEnum):
    """
    How a slug group picks its attachment:
      - first_match:   stop at the first slug (sorted) that has an eligible image
      - pooled_random: look up every slug, then pick one of the hits at random
    """
    first_match = "first_match"
    pooled_random = "pooled_random"

    @classmethod
    def parse(cls, value: str) -> "ResolutionPolicy":
        """Accepts 'first_match', 'firstMatch', 'FIRST_MATCH', 'First-Match', 'pooled random', ..."""
        raw = str(value or "").strip()
        if not any(c.islower() for c in raw):
            raw = raw.lower()
        # camelCase -> snake_case, any run of separators -> single '_'
        norm = _sep_re.sub("_", _camel_re.sub("_", raw)).strip("_").lower()
        try:
            return cls(norm)
        except ValueError:
            raise ValueError(f"Unknown resolution policy: {value!r}") from None
