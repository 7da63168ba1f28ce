"""View pipeline: the ordered product list the presentation layer renders.

derive() is a pure function of the collection and the view parameters.
Order of operations is fixed: sort, then category filter, then search
filter. Filtering keeps the relative order established by the sort.
"""
from __future__ import annotations
import unicodedata
from typing import Any, Callable, Iterable, List, NamedTuple, Optional

from inventory.domain.Product import Product
from inventory.logic.expiry.dates import parse_date
from inventory.utilities.constants import (
    ALL_CATEGORIES, DEFAULT_SORT_DIRECTION, DEFAULT_SORT_KEY, SORT_DIRECTIONS, SORT_KEYS
)

__all__ = ["SortConfig", "derive", "sort_products", "filter_by_category", "filter_by_search",
           "next_sort_config", "list_categories", "name_sort_key"]


class SortConfig(NamedTuple):
    key: str = DEFAULT_SORT_KEY
    direction: str = DEFAULT_SORT_DIRECTION


def name_sort_key(name: str):
    """Case- and accent-insensitive key, so 'Açúcar' sorts with the a's."""
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # Second element keeps the order deterministic between names differing only in accents/case
    return base.casefold(), name.casefold(), name


_SORT_VALUES: dict[str, Callable[[Product], Optional[Any]]] = {
    "name": lambda p: name_sort_key(p.name) if p.name else None,
    "quantity": lambda p: p.quantity,
    "expirationDate": lambda p: parse_date(p.expiration_date),
}


def sort_products(products: Iterable[Product], key: str = DEFAULT_SORT_KEY,
                  direction: str = DEFAULT_SORT_DIRECTION) -> List[Product]:
    """Stable sort by key; products without a usable value go last in either direction."""
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key}")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort direction: {direction}")
    value_of = _SORT_VALUES[key]
    with_value, missing = [], []
    for p in products:
        value = value_of(p)
        if value is None:
            missing.append(p)
        else:
            with_value.append((value, p))
    with_value.sort(key=lambda pair: pair[0], reverse=(direction == "desc"))
    return [p for _, p in with_value] + missing


def filter_by_category(products: Iterable[Product], active_category: Optional[str]) -> List[Product]:
    if not active_category or active_category == ALL_CATEGORIES:
        return list(products)
    return [p for p in products if p.category == active_category]


def filter_by_search(products: Iterable[Product], search_text: Optional[str]) -> List[Product]:
    if not search_text:
        return list(products)
    needle = search_text.casefold()
    return [p for p in products if needle in (p.name or "").casefold()]


def derive(products: Iterable[Product], *, search_text: str = "", active_category: Optional[str] = ALL_CATEGORIES,
           sort_key: str = DEFAULT_SORT_KEY, sort_direction: str = DEFAULT_SORT_DIRECTION) -> List[Product]:
    """Sort, then filter by category, then by search text. Never mutates the input."""
    ordered = sort_products(products, sort_key, sort_direction)
    ordered = filter_by_category(ordered, active_category)
    return filter_by_search(ordered, search_text)


def next_sort_config(current: SortConfig, key: str) -> SortConfig:
    """Selecting the active ascending key flips to descending; anything else starts ascending."""
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key}")
    if current.key == key and current.direction == "asc":
        return SortConfig(key, "desc")
    return SortConfig(key, "asc")


def list_categories(products: Iterable[Product]) -> List[str]:
    """Category bar entries: the 'all' sentinel, then distinct categories in first-seen order."""
    seen: List[str] = []
    for p in products:
        if p.category and p.category not in seen:
            seen.append(p.category)
    return [ALL_CATEGORIES, *seen]
