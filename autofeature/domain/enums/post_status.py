from __future__ import annotations
from enum import StrEnum


class PostStatus(StrEnum):
    draft = "draft"
    pending = "pending"
    private = "private"
    future = "future"
    publish = "publish"
    trash = "trash"
