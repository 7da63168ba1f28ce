"""Starter catalog generator used the first time the store finds no products."""
import calendar
import random
from datetime import date, timedelta
from typing import List, Optional

from inventory.domain.Product import Product
from inventory.logic.expiry.dates import format_date

PRODUCT_NAMES = ['Pão', 'Bolo', 'Torta', 'Leite', 'Queijo', 'Presunto', 'Suco', 'Refrigerante', 'Manteiga',
                 'Café', 'Farinha', 'Açúcar', 'Ovos', 'Croissant', 'Sonho', 'Biscoito', 'Rosca', 'Salgado']
PRODUCT_DESCRIPTORS = ['Francês', 'Integral', 'de Milho', 'de Fubá', 'de Chocolate', 'de Laranja', 'Holandês',
                       'Prato', 'Cozido', 'com Sal', 'Moído', 'Refinado', 'Caixa com 12', 'Garrafa 2L',
                       'Pote 250g', 'Polvilho', 'Doce', 'Assado']
CATEGORIES = ['Panificação', 'Confeitaria', 'Frios e Laticínios', 'Bebidas', 'Mercearia']

IMAGE_KEYWORDS = {
    'Pão': 'bread', 'Bolo': 'cake', 'Torta': 'pie', 'Leite': 'milk', 'Queijo': 'cheese', 'Presunto': 'ham',
    'Suco': 'juice', 'Refrigerante': 'soda', 'Manteiga': 'butter', 'Café': 'coffee', 'Farinha': 'flour',
    'Açúcar': 'sugar', 'Ovos': 'eggs', 'Croissant': 'croissant', 'Sonho': 'doughnut', 'Biscoito': 'cookie',
    'Rosca': 'bagel', 'Salgado': 'pastry',
}
DEFAULT_THRESHOLD = 10


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def _expiration_for(today: date, rng: random.Random) -> date:
    # ~10% already expired, ~20% inside the alert window, the rest well ahead
    roll = rng.random()
    if roll < 0.1:
        return today - timedelta(days=rng.randrange(30))
    if roll < 0.3:
        return today + timedelta(days=rng.randrange(28) + 1)
    return _add_months(today, rng.randrange(12) + 2)


def generate_mock_products(count: int, *, today: Optional[date] = None,
                           rng: Optional[random.Random] = None) -> List[Product]:
    """Build `count` bakery products with ids mock-1..mock-N.

    Args:
        count: Number of products to generate (negative counts yield nothing).
        today: Reference day for expiration dates (defaults to date.today()).
        rng: Random source; pass a seeded random.Random for reproducible catalogs.
    """
    today = today or date.today()
    rng = rng or random.Random()
    products: List[Product] = []
    for i in range(max(count, 0)):
        name_part = rng.choice(PRODUCT_NAMES)
        descriptor = rng.choice(PRODUCT_DESCRIPTORS)
        keyword = IMAGE_KEYWORDS.get(name_part, 'bakery')
        products.append(Product(
            id=f"mock-{i + 1}",
            name=f"{name_part} {descriptor}",
            quantity=rng.randint(1, 200),
            price=round(rng.uniform(1.5, 51.5), 2),
            expiration_date=format_date(_expiration_for(today, rng)),
            image_uri=f"https://picsum.photos/seed/{keyword}{i}/200",
            category=rng.choice(CATEGORIES),
            low_stock_threshold=DEFAULT_THRESHOLD if rng.random() > 0.7 else None,
        ))
    return products


__all__ = ['generate_mock_products', 'CATEGORIES']
