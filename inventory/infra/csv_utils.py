import csv
import io
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from inventory.domain.Product import Product
from inventory.logic.reporting.valuation import quantize_cents
from inventory.utilities.constants import CSV_HEADERS, EXPORT_FILENAME_PREFIX


def format_export_price(price: Optional[float]) -> str:
    """Two decimals with a comma separator (12.5 -> '12,50'); absent or non-finite price is an empty field."""
    if price is None:
        return ""
    amount = Decimal(str(price))
    if not amount.is_finite():
        return ""
    return f"{quantize_cents(amount):.2f}".replace(".", ",")


def _optional(value) -> str:
    return "" if value is None else str(value)


def products_to_csv(products: Iterable[Product]) -> str:
    """Serialize products, in the given order, as comma-delimited text with a header row.

    Every row (header included) ends with a newline. Fields holding a comma,
    quote or line break are quoted, so '12,50' prices and names such as
    'Bolo, fatia' survive a round trip through any CSV reader.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADERS)
    for p in products:
        writer.writerow([
            p.id,
            p.name,
            p.quantity,
            format_export_price(p.price),
            _optional(p.expiration_date),
            _optional(p.category),
            _optional(p.low_stock_threshold),
        ])
    return buf.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    """inventario_<YYYY-MM-DD>.csv"""
    return f"{EXPORT_FILENAME_PREFIX}{(today or date.today()).isoformat()}.csv"


__all__ = ['products_to_csv', 'export_filename', 'format_export_price']
