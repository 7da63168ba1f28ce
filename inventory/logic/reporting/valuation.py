"""Inventory valuation and summary reporting."""
from __future__ import annotations
from datetime import date, datetime
from decimal import MAX_PREC, Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, Iterable, Union

from inventory.domain.Product import Product
from inventory.logic.alerts.analysis import compute_expired, compute_expiring_soon, compute_low_stock
from inventory.utilities.constants import CURRENCY_PREFIX

__all__ = ["item_value", "total_value", "quantize_cents", "format_currency", "compute_inventory_summary"]

_CENT = Decimal("0.01")


def item_value(product: Product) -> Decimal:
    """price * quantity as an exact decimal; an absent price counts as zero."""
    if product.price is None:
        return Decimal(0)
    # str() keeps the price as typed (12.3 -> 12.3, not its binary expansion)
    price = Decimal(str(product.price))
    if not price.is_finite():
        return Decimal(0)
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return price * product.quantity


def total_value(products: Iterable[Product]) -> Decimal:
    # Unbounded precision: products and sums stay exact however large the prices
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return sum((item_value(p) for p in products), Decimal(0))


def quantize_cents(amount: Decimal) -> Decimal:
    """Round half-up to two decimals, for amounts of any magnitude."""
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Union[Decimal, float, int, None]) -> str:
    """Format as Brazilian real with two decimals: R$ 1.234,56. Non-finite values show as zero."""
    amount = Decimal(str(value)) if value is not None else Decimal(0)
    if not amount.is_finite():
        amount = Decimal(0)
    amount = quantize_cents(amount)
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,.2f}"  # 1,234.56
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_PREFIX} {localized}"


def compute_inventory_summary(products: Iterable[Product], now: Union[date, datetime, None] = None) -> Dict[str, Any]:
    """Aggregate report shown in the report bar."""
    items = list(products)
    total = total_value(items)
    return {
        'items': len(items),
        'units': sum(p.quantity for p in items),
        'total_value': total,
        'total_value_display': format_currency(total),
        'expired': len(compute_expired(items, now)),
        'expiring_soon': len(compute_expiring_soon(items, now)),
        'low_stock': len(compute_low_stock(items)),
    }
