"""Product store: the authoritative in-memory product collection.

Every mutation is written through the persistence collaborator before the
call returns. The store is guarded by a lock so the starter catalog is
generated at most once even if two loads overlap; callers are still expected
to issue mutations one at a time.
"""
import logging
import random
from datetime import date
from threading import RLock
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

from inventory.domain.Product import Product
from inventory.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from inventory.events.event_helpers import (
    publish_expiring_soon, publish_load_failed, publish_low_stock, publish_save_failed
)
from inventory.infra.Product_Repository import PersistenceError
from inventory.logic.expiry.dates import EXPIRING_SOON, classify_expiration
from inventory.utilities.mock_data import generate_mock_products
from inventory.utilities.validators import ProductInput

logger = logging.getLogger(__name__)

RESERVED_FIELDS = ("id", "history")


def _new_id() -> str:
    return uuid4().hex


class ProductStore:
    def __init__(self, repository, *, mock_count: int = 100, mock_seed: Optional[int] = None,
                 id_factory: Callable[[], str] = _new_id, event_bus: Optional[EventBus] = None,
                 today: Callable[[], date] = date.today):
        self.repository = repository
        self.mock_count = mock_count
        self.mock_seed = mock_seed
        self._id_factory = id_factory
        self._event_bus = event_bus if event_bus is not None else GLOBAL_EVENT_BUS
        self._today = today
        self._items: List[Product] = []
        self._loaded = False
        self._lock = RLock()

    # --- Loading -----------------------------------------------------------
    def _starter_catalog(self) -> List[Product]:
        rng = random.Random(self.mock_seed)
        return generate_mock_products(self.mock_count, today=self._today(), rng=rng)

    def load(self) -> List[Product]:
        '''
        Hydrates the store from persistence. An absent or empty collection is
        replaced by a generated starter catalog, which is persisted right away.
        An unreadable collection is replaced in memory only.
        '''
        with self._lock:
            try:
                stored = self.repository.load()
            except PersistenceError as e:
                logger.error("Failed to load products, using starter catalog: %s", e)
                publish_load_failed(e, bus=self._event_bus)
                self._items = self._starter_catalog()
                self._loaded = True
                return self.snapshot()

            if stored:
                self._items = stored
                logger.info("Loaded %d products", len(stored))
            else:
                self._items = self._starter_catalog()
                logger.info("No stored products, generated starter catalog of %d", len(self._items))
                try:
                    self._persist("load")
                except PersistenceError:
                    # Already logged and published; keep serving the in-memory catalog
                    pass
            self._loaded = True
            return self.snapshot()

    def ensure_loaded(self) -> List[Product]:
        with self._lock:
            if not self._loaded:
                return self.load()
            return self.snapshot()

    @property
    def loaded(self) -> bool:
        return self._loaded

    # --- Reads -------------------------------------------------------------
    def snapshot(self) -> List[Product]:
        '''Returns the current collection (a new list; do not mutate the products).'''
        with self._lock:
            return list(self._items)

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            return next((p for p in self._items if p.id == product_id), None)

    # --- Mutations ---------------------------------------------------------
    @staticmethod
    def _reject_reserved(fields: Dict[str, Any]):
        supplied = [k for k in RESERVED_FIELDS if k in fields]
        if supplied:
            raise ValueError(f"Fields managed by the store cannot be supplied: {', '.join(supplied)}")

    def create(self, fields: Dict[str, Any]) -> Product:
        '''
        Validates the submission, assigns a fresh id and appends the product.
        Not safe to retry blindly: every call creates a new product.
        '''
        self._reject_reserved(fields)
        data = ProductInput.model_validate(fields).model_dump()
        with self._lock:
            product = Product(id=self._id_factory(), name=data["name"])
            product.apply_fields(data)
            self._items.append(product)
            self._persist("create")
        logger.info("Created product %s (%s)", product.id, product.name)
        self._evaluate_item(product)
        return product

    def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Product]:
        '''
        Shallow-replaces the given fields of an existing product.
        Returns the updated product, or None when no product has this id (nothing changes).
        '''
        self._reject_reserved(fields)
        with self._lock:
            product = self.get(product_id)
            if product is None:
                logger.warning("Update ignored, product %s not found", product_id)
                return None
            merged = {**product.editable_dict(), **fields}
            data = ProductInput.model_validate(merged).model_dump()
            product.apply_fields({k: data[k] for k in fields})
            self._persist("update")
        logger.info("Updated product %s", product_id)
        self._evaluate_item(product)
        return product

    def delete(self, product_id: str) -> bool:
        '''Removes the product with this id. Returns False (and changes nothing) if it is absent.'''
        with self._lock:
            remaining = [p for p in self._items if p.id != product_id]
            if len(remaining) == len(self._items):
                return False
            self._items = remaining
            self._persist("delete")
        logger.info("Deleted product %s", product_id)
        return True

    def _persist(self, operation: str):
        try:
            self.repository.save(self._items)
        except PersistenceError as e:
            logger.error("Failed to persist products after %s: %s", operation, e)
            publish_save_failed(e, operation, bus=self._event_bus)
            raise

    # --- Alert evaluation --------------------------------------------------
    def _evaluate_item(self, product: Product):
        if product.is_low_stock():
            publish_low_stock(product, product.quantity, product.low_stock_threshold, bus=self._event_bus)
        if classify_expiration(product.expiration_date, self._today()) == EXPIRING_SOON:
            publish_expiring_soon(product, product.expiration_date, bus=self._event_bus)

    def __len__(self):
        return len(self._items)

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self._items)
        return f"Products:\n\t{items_str}"


__all__ = ['ProductStore', 'RESERVED_FIELDS']
