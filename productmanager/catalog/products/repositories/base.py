"""Storage contract shared by the product repository backends."""
import uuid
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from productmanager.catalog.products.filters import ProductFilter
from productmanager.catalog.products.models import Product
from productmanager.catalog.products.results import OperationResult


def coerce_product_id(value) -> Optional[uuid.UUID]:
    """Return ``value`` as a UUID, or ``None`` when it is not a valid product id."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class ProductRepository(ABC):
    """
    Reads and writes products.

    Implementations never let a database error escape: reads degrade to an
    empty result, writes report an ``OperationResult`` with the reason.
    """

    backend_name = ""

    @abstractmethod
    def list_filtered(self, product_filter: ProductFilter) -> Tuple[List[Product], int]:
        """Return one page of matching products and the total match count."""

    @abstractmethod
    def get_by_id(self, product_id) -> Optional[Product]:
        """Return the product or ``None`` when it does not exist."""

    @abstractmethod
    def add(self, product: Product) -> OperationResult:
        """Insert a product built by ``Product.create()``."""

    @abstractmethod
    def update(self, product: Product) -> OperationResult:
        """Write name, description, price and status of an existing product."""

    @abstractmethod
    def delete(self, product_id) -> OperationResult:
        """Remove a product by id."""

    @abstractmethod
    def set_status(self, product_id, is_active: bool) -> OperationResult:
        """Write only the active flag of a product."""
