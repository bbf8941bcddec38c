"""
Hook registry

Explicit, ordered event handlers. Handlers are attached to a hook name with a
priority; `do_action` calls them lowest priority first, and in registration
order for equal priorities.

Usage:
    hooks = HookRegistry()
    hooks.add_action("transition_post_status", service.transition_post, priority=5)
    hooks.add_action("publish_post", service.publish_post)
    hooks.do_action("transition_post_status", "publish", "draft", post_id)
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Dict, List

from autofeature.common.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PRIORITY = 10

TRANSITION_POST_STATUS = "transition_post_status"
PUBLISH_POST = "publish_post"


@dataclass(frozen=True)
class _Handler:
    priority: int
    seq: int
    callback: Callable[..., Any]


class HookRegistry:
    def __init__(self) -> None:
        self._handlers: Dict[str, List[_Handler]] = {}
        self._seq = count()

    def add_action(self, hook: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY) -> None:
        """Attach `callback` to `hook`. The same (callback, priority) pair is only kept once."""
        handlers = self._handlers.setdefault(hook, [])
        if any(h.callback == callback and h.priority == priority for h in handlers):
            return
        handlers.append(_Handler(priority=int(priority), seq=next(self._seq), callback=callback))
        handlers.sort(key=lambda h: (h.priority, h.seq))

    def remove_action(self, hook: str, callback: Callable[..., Any], priority: int | None = None) -> bool:
        handlers = self._handlers.get(hook, [])
        keep = [
            h for h in handlers
            if not (h.callback == callback and (priority is None or h.priority == priority))
        ]
        self._handlers[hook] = keep
        return len(keep) != len(handlers)

    def has_action(self, hook: str, callback: Callable[..., Any] | None = None) -> bool:
        handlers = self._handlers.get(hook, [])
        if callback is None:
            return bool(handlers)
        return any(h.callback == callback for h in handlers)

    def do_action(self, hook: str, *args: Any) -> List[Any]:
        """
        Run every handler of `hook` in order and return their results.
        A failing handler is logged and its exception re-raised; later handlers do not run.
        """
        results: List[Any] = []
        for h in list(self._handlers.get(hook, [])):
            try:
                results.append(h.callback(*args))
            except Exception:
                logger.exception("Handler %r for %s failed", h.callback, hook)
                raise
        return results
