"""Web-facing observers for inventory events.

Subscribes to the GLOBAL_EVENT_BUS for low stock, expiring soon and
persistence failures, and keeps a small in-memory ring buffer of recent
events that the API serves to the presentation layer.

  * Each event gets an auto-increment integer id (cursor) so clients can
    request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn may serve requests from a thread pool.
  * MAX_EVENTS caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    INVENTORY_LOW_STOCK, INVENTORY_EXPIRING_SOON, INVENTORY_LOAD_FAILED, INVENTORY_SAVE_FAILED
)

OBSERVED_EVENTS = (INVENTORY_LOW_STOCK, INVENTORY_EXPIRING_SOON, INVENTORY_LOAD_FAILED, INVENTORY_SAVE_FAILED)
MAX_EVENTS = 300

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
_started_on: Optional[EventBus] = None


def _record(event_name: str, payload: Any):
    global _next_id
    evt: Dict[str, Any] = {
        'type': event_name,
        'ts': datetime.now(timezone.utc).isoformat(),
    }
    if isinstance(payload, dict):
        product = payload.get('product')
        if product is not None:
            evt['product_id'] = getattr(product, 'id', '')
            evt['name'] = getattr(product, 'name', '')
            evt['quantity'] = getattr(product, 'quantity', None)
        for k in ('remaining', 'threshold', 'expiration_date', 'error', 'operation'):
            if k in payload:
                evt[k] = payload[k]
    with _lock:
        evt['id'] = _next_id
        _next_id += 1
        _events.append(evt)
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start(bus: Optional[EventBus] = None):
    """Idempotent start: subscribe observers once."""
    global _started_on
    target = bus if bus is not None else GLOBAL_EVENT_BUS
    if _started_on is target:
        return
    stop()
    for name in OBSERVED_EVENTS:
        target.subscribe(name, _record)
    _started_on = target


def stop():
    global _started_on
    if _started_on is None:
        return
    for name in OBSERVED_EVENTS:
        _started_on.unsubscribe(name, _record)
    _started_on = None


def clear():
    global _next_id
    with _lock:
        _events.clear()
        _next_id = 1


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the whole buffer. The response includes
    next_cursor (largest id) so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'stop', 'clear', 'get_events', 'MAX_EVENTS']
