"""Small in-process Event Bus / Observer implementation for inventory alerts.

Event names:
  inventory.low_stock      -> payload {"product": Product, "remaining": int, "threshold": int}
  inventory.expiring_soon  -> payload {"product": Product, "expiration_date": str}
  inventory.load_failed    -> payload {"error": str}
  inventory.save_failed    -> payload {"error": str, "operation": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

INVENTORY_LOW_STOCK = "inventory.low_stock"
INVENTORY_EXPIRING_SOON = "inventory.expiring_soon"
INVENTORY_LOAD_FAILED = "inventory.load_failed"
INVENTORY_SAVE_FAILED = "inventory.save_failed"

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber):
		if callback in self._subscribers.get(event_name, []):
			self._subscribers[event_name].remove(callback)

	def publish(self, event_name: str, payload: Any = None):
		# A failing subscriber must not break the operation that published the event
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# Process-wide instance used by the store and the web observers
GLOBAL_EVENT_BUS = EventBus()

__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'Subscriber',
	'INVENTORY_LOW_STOCK', 'INVENTORY_EXPIRING_SOON', 'INVENTORY_LOAD_FAILED', 'INVENTORY_SAVE_FAILED'
]
