"""Shared FastAPI dependencies.

The application uses one process-wide ProductStore backed by the JSON file
in DATA_DIR. Tests swap it through app.dependency_overrides[get_store].
"""
from datetime import date
from typing import Any, Dict, Optional

from pydantic import ValidationError

from inventory.domain.Product import Product
from inventory.domain.Product_Store import ProductStore
from inventory.infra.Product_Repository import JsonProductRepository
from inventory.infra.paths import PRODUCTS_FILE
from inventory.logic.expiry.dates import classify_expiration
from inventory.utilities.config import MOCK_DATA_COUNT, MOCK_DATA_SEED, STORAGE_KEY

_store: Optional[ProductStore] = None


def get_store() -> ProductStore:
    global _store
    if _store is None:
        _store = ProductStore(
            JsonProductRepository(PRODUCTS_FILE, STORAGE_KEY),
            mock_count=MOCK_DATA_COUNT,
            mock_seed=MOCK_DATA_SEED,
        )
    _store.ensure_loaded()
    return _store


def get_today() -> date:
    return date.today()


def product_payload(product: Product, today: date) -> Dict[str, Any]:
    """Serialized product plus its expiration status for rendering."""
    data = product.to_dict()
    data['expirationStatus'] = classify_expiration(product.expiration_date, today)
    data['lowStock'] = product.is_low_stock()
    return data


def describe_validation_error(error: ValueError) -> str:
    """One readable line for a rejected submission."""
    if isinstance(error, ValidationError):
        parts = []
        for err in error.errors():
            field = '.'.join(str(loc) for loc in err.get('loc', ()))
            message = err.get('msg', '').removeprefix('Value error, ')
            parts.append(f"{field}: {message}" if field else message)
        return '; '.join(parts)
    return str(error)


__all__ = ['get_store', 'get_today', 'product_payload', 'describe_validation_error']
