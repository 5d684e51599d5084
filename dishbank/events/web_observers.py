"""Web-facing observers for planner events.

An AlertFeed subscribes to an EventBus for:
  - catalog.load_failed
  - dish.rejected
  - dish.save_failed
  - dish.saved

and keeps a small in-memory ring buffer of recent alerts that the page polls
(/api/alerts?since=<cursor>) to show notifications without a reload.

  * Each alert gets an auto-increment integer id (cursor) so clients only
    fetch newer alerts.
  * A Lock guards the buffer; sync FastAPI endpoints run in a threadpool.
  * max_events caps memory use.
"""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Dict, List, Optional

from dishbank.utilities.constants import MAX_ALERT_EVENTS
from .Event_Bus import (
    CATALOG_LOAD_FAILED, DISH_REJECTED, DISH_SAVE_FAILED, DISH_SAVED, EventBus
)

logger = logging.getLogger(__name__)

_MESSAGES = {
    CATALOG_LOAD_FAILED: "Could not load dishes. Check DISHES_API_URL.",
    DISH_SAVE_FAILED: "Could not save dish. Check DISHES_API_URL.",
    DISH_SAVED: "Dish saved.",
}
_LEVELS = {
    CATALOG_LOAD_FAILED: "error",
    DISH_SAVE_FAILED: "error",
    DISH_REJECTED: "warning",
    DISH_SAVED: "info",
}


class AlertFeed:
    def __init__(self, max_events: int = MAX_ALERT_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._buses: List[EventBus] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        payload = payload if isinstance(payload, dict) else {}
        evt = {
            'type': event_name,
            'level': _LEVELS.get(event_name, 'info'),
            'message': payload.get('message') or _MESSAGES.get(event_name, event_name),
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        for k in ('title', 'error'):
            if payload.get(k):
                evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def attach(self, bus: EventBus):
        """Idempotent: subscribe to a bus once."""
        if bus in self._buses:
            return self
        bus.subscribe(_LEVELS, self.record)
        self._buses.append(bus)
        logger.debug("Alert feed attached to %r", bus)
        return self

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return alerts newer than 'since' (exclusive), plus next_cursor for the next poll."""
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['AlertFeed']
