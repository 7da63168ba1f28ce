"""Alert helpers: expiring-soon and low-stock subsets of a product collection.

Both are recomputed from the collection on every call; nothing is cached.
"""
from __future__ import annotations
from datetime import date, datetime
from typing import Iterable, List, Union, Dict, Any

from inventory.domain.Product import Product
from inventory.logic.expiry.dates import EXPIRED, EXPIRING_SOON, classify_expiration

__all__ = ["compute_expiring_soon", "compute_expired", "compute_low_stock", "compute_alert_snapshot"]


def compute_expiring_soon(products: Iterable[Product], now: Union[date, datetime, None] = None) -> List[Product]:
    """Products expiring within one month from now (not already expired), in collection order."""
    return [p for p in products if classify_expiration(p.expiration_date, now) == EXPIRING_SOON]


def compute_expired(products: Iterable[Product], now: Union[date, datetime, None] = None) -> List[Product]:
    return [p for p in products if classify_expiration(p.expiration_date, now) == EXPIRED]


def compute_low_stock(products: Iterable[Product]) -> List[Product]:
    """Products with a threshold whose quantity is at or below it."""
    return [p for p in products if p.is_low_stock()]


def compute_alert_snapshot(products: Iterable[Product], now: Union[date, datetime, None] = None) -> Dict[str, Any]:
    items = list(products)
    expiring = compute_expiring_soon(items, now)
    low = compute_low_stock(items)
    return {
        'expiring_soon': expiring,
        'expiring_count': len(expiring),
        'low_stock': low,
        'low_stock_count': len(low),
    }
