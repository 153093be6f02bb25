"""
Demo catalog used by the ``seed_products`` command and the test fixtures.
"""
from decimal import Decimal
from typing import Dict, List, Optional

from .filters import ProductFilter
from .models import Product

DEMO_PRODUCTS: List[Dict] = [
    {"name": "Coffee", "description": None, "price": Decimal("200")},
    {"name": "Tea", "description": None, "price": Decimal("100")},
    {"name": "Cocoa", "description": None, "price": Decimal("200")},
    {"name": "Chocolate", "description": None, "price": Decimal("300")},
    {"name": "Arabica", "description": None, "price": Decimal("250")},
]


def seed_products(repository, force: bool = False) -> Optional[List[Product]]:
    """
    Insert the demo products through ``repository``.

    Skipped when the catalog already has products, unless ``force`` is set.
    Returns the products that were added, or ``None`` when seeding was skipped.
    """
    if not force:
        _, existing = repository.list_filtered(ProductFilter(page_size=1))
        if existing:
            return None

    added = []
    for item in DEMO_PRODUCTS:
        product = Product.create(item["name"], item["description"], item["price"])
        result = repository.add(product)
        if result.ok:
            added.append(result.value)
    return added
