"""Event helper utilities.

Publishing helpers for inventory events, so callers do not build payload
dictionaries by hand.

Quick import:
    from inventory.events.event_helpers import (
        publish_low_stock, publish_expiring_soon, publish_load_failed, publish_save_failed
    )
"""
from __future__ import annotations
from typing import Any, Optional

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    INVENTORY_LOW_STOCK, INVENTORY_EXPIRING_SOON, INVENTORY_LOAD_FAILED, INVENTORY_SAVE_FAILED
)

__all__ = [
    'publish_low_stock', 'publish_expiring_soon', 'publish_load_failed', 'publish_save_failed',
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_low_stock(product: Any, remaining: int, threshold: int, bus: Optional[EventBus] = None):
    """Publish an inventory.low_stock event."""
    _bus(bus).publish(INVENTORY_LOW_STOCK, {
        'product': product,
        'remaining': remaining,
        'threshold': threshold
    })


def publish_expiring_soon(product: Any, expiration_date: str, bus: Optional[EventBus] = None):
    """Publish an inventory.expiring_soon event."""
    _bus(bus).publish(INVENTORY_EXPIRING_SOON, {
        'product': product,
        'expiration_date': expiration_date
    })


def publish_load_failed(error: Exception, bus: Optional[EventBus] = None):
    _bus(bus).publish(INVENTORY_LOAD_FAILED, {'error': str(error)})


def publish_save_failed(error: Exception, operation: str, bus: Optional[EventBus] = None):
    """Publish an inventory.save_failed event (surfaced to the user as an alert)."""
    _bus(bus).publish(INVENTORY_SAVE_FAILED, {
        'error': str(error),
        'operation': operation
    })
