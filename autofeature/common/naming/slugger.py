# autofeature/common/naming/slugger.py
from __future__ import annotations

import re
import unicodedata

_slug_re = re.compile(r"[^a-z0-9_]+")
_slug_re_unicode = re.compile(r"\s+")


def slugify(text: str, *, max_len: int = 200, allow_unicode: bool = False) -> str:
    """
    Deterministic, human-readable term slug:
      - lowercases
      - NFKD normalize; optionally strip to ASCII if allow_unicode=False
      - collapse separators to single '-'
      - trim leading/trailing '-'
      - truncate to `max_len`
      - returns '' if nothing remains (caller decides what to do)

    Examples:
      "Sunset Beach" -> "sunset-beach"
      "  Road Trip!! " -> "road-trip"
      "Éxämple" (ascii) -> "example"
    """
    if text is None:
        return ""

    value = str(text).strip().lower()

    if allow_unicode:
        # Normalize but keep unicode letters; collapse any whitespace to single dashes
        value = unicodedata.normalize("NFKC", value)
        value = _slug_re_unicode.sub("-", value)
        value = value.strip("-")
    else:
        # Normalize to ASCII
        value = unicodedata.normalize("NFKD", value)
        value = value.encode("ascii", "ignore").decode("ascii")
        value = _slug_re.sub("-", value).strip("-")

    if max_len > 0 and len(value) > max_len:
        value = value[:max_len].rstrip("-")

    return value
