"""Product repositories (persistence collaborators for the product store).

The JSON repository keeps the whole collection under a single storage key of
a JSON document, so several keys can share one file.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Optional

from inventory.domain.Product import Product

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Reading or writing the persisted product collection failed."""


class JsonProductRepository:
    def __init__(self, path, storage_key: str):
        self.path = Path(path)
        self.storage_key = storage_key

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                document = json.load(f) or {}
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceError(f"Could not read {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise PersistenceError(f"Unexpected document in {self.path}")
        return document

    def load(self) -> Optional[List[Product]]:
        """Return the stored collection, or None when nothing is stored under the key."""
        raw = self._read_document().get(self.storage_key)
        if raw is None:
            return None
        if not isinstance(raw, list):
            raise PersistenceError(f"Value under '{self.storage_key}' is not a list")
        try:
            return [Product.from_dict(entry) for entry in raw]
        except (ValueError, TypeError, AttributeError) as e:
            raise PersistenceError(f"Malformed product record in {self.path}: {e}") from e

    def save(self, products: List[Product]) -> None:
        document = self._read_document()
        document[self.storage_key] = [p.to_dict() for p in products]
        try:
            self._atomic_write(document)
        except OSError as e:
            raise PersistenceError(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved %d products to %s", len(products), self.path)

    def _atomic_write(self, document: dict):
        os.makedirs(self.path.parent, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".products_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(document, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


class InMemoryProductRepository:
    """Keeps serialized snapshots in memory (tests, demos)."""

    def __init__(self, products: Optional[List[Product]] = None):
        self._stored = [p.to_dict() for p in products] if products is not None else None
        self.save_count = 0

    def load(self) -> Optional[List[Product]]:
        if self._stored is None:
            return None
        return [Product.from_dict(entry) for entry in self._stored]

    def save(self, products: List[Product]) -> None:
        self._stored = [p.to_dict() for p in products]
        self.save_count += 1

    @property
    def stored(self):
        return self._stored


__all__ = ['PersistenceError', 'JsonProductRepository', 'InMemoryProductRepository']
