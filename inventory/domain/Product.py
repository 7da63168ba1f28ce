"""Product domain entity: stock count, optional price, expiration, category and alert threshold."""
import math
from typing import Any, Dict, List, Optional

MOVEMENT_IN = "entrada"
MOVEMENT_OUT = "saida"


class Movement:
    """Stock movement record. Declared for forward compatibility; nothing appends them yet."""

    def __init__(self, id: str, date: str, type: str, quantity_change: int, reason: Optional[str] = None):
        if type not in (MOVEMENT_IN, MOVEMENT_OUT):
            raise ValueError(f"Unknown movement type: {type}")
        self.id = id
        self.date = date
        self.type = type
        self.quantity_change = quantity_change
        self.reason = reason

    @staticmethod
    def from_dict(data):
        return Movement(
            id=str(data.get("id", "")),
            date=str(data.get("date", "")),
            type=data.get("type", MOVEMENT_IN),
            quantity_change=int(data.get("quantityChange", 0) or 0),
            reason=data.get("reason"),
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "date": self.date,
            "type": self.type,
            "quantityChange": self.quantity_change,
        }
        if self.reason is not None:
            d["reason"] = self.reason
        return d

    def __eq__(self, other):
        return isinstance(other, Movement) and self.to_dict() == other.to_dict()


class Product:
    # Fields a form submission may replace; id and history are owned by the store
    EDITABLE_FIELDS = ("name", "quantity", "price", "expirationDate", "imageUri", "category", "lowStockThreshold")

    def __init__(self, id: str, name: str, quantity: int = 0, price: Optional[float] = None,
                 expiration_date: Optional[str] = None, image_uri: Optional[str] = None,
                 category: Optional[str] = None, low_stock_threshold: Optional[int] = None,
                 history: Optional[List[Movement]] = None):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.price = price
        self.expiration_date = expiration_date
        self.image_uri = image_uri
        self.category = category
        self.low_stock_threshold = low_stock_threshold
        self.history = history[:] if history else []

    def is_low_stock(self) -> bool:
        return self.low_stock_threshold is not None and self.quantity <= self.low_stock_threshold

    def apply_fields(self, fields: Dict[str, Any]):
        '''Shallow replace of editable fields given in their serialized (camelCase) names.'''
        for key, value in fields.items():
            if key not in self.EDITABLE_FIELDS:
                raise ValueError(f"Field '{key}' cannot be changed")
            setattr(self, _ATTRIBUTE_NAMES[key], value)
        return self

    def editable_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, _ATTRIBUTE_NAMES[key]) for key in self.EDITABLE_FIELDS}

    def __str__(self) -> str:
        parts = [f"{self.name} - Qtd: {self.quantity}"]
        if self.price is not None:
            parts.append(f"Preço: {self.price:.2f}")
        if self.expiration_date:
            parts.append(f"Val: {self.expiration_date}")
        if self.category:
            parts.append(f"Categoria: {self.category}")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other):
        return isinstance(other, Product) and self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''
        Creates a Product from its persisted dictionary. Ignores unknown keys.
        Raises ValueError for a record whose numbers cannot be read, including non-finite prices.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        price = d.get("price")
        if price is not None:
            price = float(price)
            if not math.isfinite(price):
                raise ValueError(f"Non-finite price for product {d.get('id')!r}")
        threshold = d.get("lowStockThreshold")
        return Product(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            quantity=int(d.get("quantity", 0) or 0),
            price=price,
            expiration_date=d.get("expirationDate") or None,
            image_uri=d.get("imageUri") or None,
            category=d.get("category") or None,
            low_stock_threshold=int(threshold) if threshold is not None else None,
            history=[Movement.from_dict(m) for m in d.get("history") or []],
        )

    def to_dict(self):
        '''Converts the Product to a dictionary for JSON persistence. Absent optional fields are omitted.'''
        d = {"id": self.id, "name": self.name, "quantity": self.quantity}
        for key in ("price", "expirationDate", "imageUri", "category", "lowStockThreshold"):
            value = getattr(self, _ATTRIBUTE_NAMES[key])
            if value is not None:
                d[key] = value
        d["history"] = [m.to_dict() for m in self.history]
        return d


_ATTRIBUTE_NAMES = {
    "name": "name",
    "quantity": "quantity",
    "price": "price",
    "expirationDate": "expiration_date",
    "imageUri": "image_uri",
    "category": "category",
    "lowStockThreshold": "low_stock_threshold",
}
