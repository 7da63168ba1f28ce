"""Shopping list builder.

Provides build_shopping_list(products): every low-stock product with its
current quantity, the configured minimum and how many units are missing to
get back to that minimum.
"""
from typing import Dict, Iterable, List, Any

from inventory.domain.Product import Product
from inventory.logic.alerts.analysis import compute_low_stock
from inventory.logic.view.pipeline import name_sort_key


def build_shopping_list(products: Iterable[Product]) -> List[Dict[str, Any]]:
    """Return shopping entries sorted by name.

    Each entry: { id, name, category, current, minimum, missing }.
    `missing` is 0 when the quantity sits exactly on the threshold.
    """
    shopping_list: List[Dict[str, Any]] = []
    for p in compute_low_stock(products):
        shopping_list.append({
            'id': p.id,
            'name': p.name,
            'category': p.category,
            'current': p.quantity,
            'minimum': p.low_stock_threshold,
            'missing': p.low_stock_threshold - p.quantity,
        })
    shopping_list.sort(key=lambda x: name_sort_key(x['name']))
    return shopping_list

__all__ = ['build_shopping_list']
