from __future__ import annotations
from enum import StrEnum


class Axis(StrEnum):
    """Classification dimension a slug belongs to."""
    tag = "tag"
    category = "category"
