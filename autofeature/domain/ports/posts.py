from __future__ import annotations
from typing import Any, List, Protocol


class PostStorePort(Protocol):
    def has_featured_image(self, post_id: Any) -> bool: ...

    def get_tags(self, post_id: Any) -> List[str]: ...

    def get_categories(self, post_id: Any) -> List[str]: ...

    # Returns True only if the value was actually written.
    def add_meta(self, post_id: Any, key: str, value: str, unique: bool = True) -> bool: ...
