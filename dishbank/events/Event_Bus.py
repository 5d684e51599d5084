"""Simple Event Bus / Observer implementation for planner notifications.

Event names used so far:
  menu.changed        -> payload {"count": int, "servings": int}
  catalog.loaded      -> payload {"count": int}
  catalog.load_failed -> payload {"error": str}
  dish.rejected       -> payload {"title": str, "message": str}
  dish.saved          -> payload {"title": str, "response": str}
  dish.save_failed    -> payload {"title": str, "error": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MENU_CHANGED = "menu.changed"
CATALOG_LOADED = "catalog.loaded"
CATALOG_LOAD_FAILED = "catalog.load_failed"
DISH_REJECTED = "dish.rejected"
DISH_SAVED = "dish.saved"
DISH_SAVE_FAILED = "dish.save_failed"

Subscriber = Callable[[str, Any], None]


class EventBus:
    """Named-event fan-out. A failing subscriber is logged and skipped."""

    def __init__(self):
        self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

    def subscribe(self, event_names: Union[str, Iterable[str]], callback: Optional[Subscriber] = None):
        """Register callback for one event name or several.

        Without a callback this returns a decorator, so a function can
        subscribe itself with @bus.subscribe(MENU_CHANGED).
        """
        if callback is None:
            return lambda cb: self.subscribe(event_names, cb)
        names = (event_names,) if isinstance(event_names, str) else tuple(event_names)
        for name in names:
            listeners = self._subscribers[name]
            if callback not in listeners:
                listeners.append(callback)
        return callback

    def publish(self, event_name: str, payload: Any = None) -> int:
        """Deliver payload to every subscriber of event_name; returns how many took it."""
        delivered = 0
        for cb in tuple(self._subscribers.get(event_name, ())):
            try:
                cb(event_name, payload)
            except Exception:
                logger.exception("Subscriber %r failed on %s", cb, event_name)
                continue
            delivered += 1
        return delivered


# Process-wide default; planners and menus accept their own bus too
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
    'EventBus', 'GLOBAL_EVENT_BUS',
    'MENU_CHANGED', 'CATALOG_LOADED', 'CATALOG_LOAD_FAILED',
    'DISH_REJECTED', 'DISH_SAVED', 'DISH_SAVE_FAILED',
]
