"""
Product operations.

Views (API and admin UI) call ``ProductService``; it turns payloads into
entity operations, persists them through the configured repository and
hands back transfer shapes.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from django.core.exceptions import ValidationError

from productmanager.utils.exception_handler import normalize_validation_errors
from .filters import ProductFilter
from .models import Product
from .repositories import ProductRepository, get_product_repository
from .results import OperationResult
from .serializers import ProductFullSerializer, ProductShortSerializer

logger = logging.getLogger(__name__)


@dataclass
class ProductPage:
    products: List[Dict] = field(default_factory=list)
    total_count: int = 0

    def as_dict(self):
        return {"products": self.products, "totalCount": self.total_count}


def to_short_shape(product: Product) -> Dict:
    return ProductShortSerializer(product).data


def to_full_shape(product: Product) -> Dict:
    return ProductFullSerializer(product).data


class ProductService:
    def __init__(self, repository: Optional[ProductRepository] = None):
        self.repository = repository or get_product_repository()

    # -------------------------------------------------------
    # Reads
    # -------------------------------------------------------
    def list_products(self, product_filter: ProductFilter) -> ProductPage:
        products, total_count = self.repository.list_filtered(product_filter)
        return ProductPage(
            products=[to_short_shape(product) for product in products],
            total_count=total_count,
        )

    def get_product(self, product_id) -> Optional[Dict]:
        logger.info("Fetching product by id=%s", product_id)
        product = self.repository.get_by_id(product_id)
        if product is None:
            logger.warning("Product with id=%s not found", product_id)
            return None
        return to_full_shape(product)

    # -------------------------------------------------------
    # Writes
    # -------------------------------------------------------
    def create_product(self, data) -> OperationResult:
        try:
            product = Product.create(
                name=data.get("name"),
                description=data.get("description"),
                price=data.get("price"),
                is_active=data.get("is_active", False),
            )
        except ValidationError as exc:
            return OperationResult.invalid(normalize_validation_errors(exc))

        result = self.repository.add(product)
        if not result.ok:
            logger.error("Product was not created: %s", result.reason)
            return result

        logger.info("Product created with id=%s", product.id)
        return result.with_value(to_full_shape(result.value))

    def update_product(self, product_id, data) -> OperationResult:
        product = self.repository.get_by_id(product_id)
        if product is None:
            logger.warning("Update failed: product with id=%s not found", product_id)
            return OperationResult.not_found(f"Product {product_id} not found")

        try:
            product.update(
                name=data.get("name"),
                description=data.get("description"),
                price=data.get("price"),
                is_active=data.get("is_active", False),
            )
        except ValidationError as exc:
            return OperationResult.invalid(normalize_validation_errors(exc))

        result = self.repository.update(product)
        if not result.ok:
            logger.error("Product %s was not updated: %s", product_id, result.outcome.value)
            return result

        logger.info("Product updated with id=%s", product.id)
        return result.with_value(to_full_shape(product))

    def delete_product(self, product_id) -> OperationResult:
        result = self.repository.delete(product_id)
        if result.ok:
            logger.info("Product deleted with id=%s", product_id)
        else:
            logger.warning("Product %s was not deleted: %s", product_id, result.outcome.value)
        return result

    def set_product_status(self, product_id, is_active: bool) -> OperationResult:
        product = self.repository.get_by_id(product_id)
        if product is None:
            logger.warning("Status update failed: product with id=%s not found", product_id)
            return OperationResult.not_found(f"Product {product_id} not found")

        product.set_status(is_active)
        result = self.repository.set_status(product.id, product.is_active)
        if not result.ok:
            logger.error("Status of product %s was not updated: %s", product_id, result.outcome.value)
            return result

        logger.info("Product %s is_active set to %s", product.id, product.is_active)
        return result.with_value(to_full_shape(product))

    def toggle_product_status(self, product_id) -> OperationResult:
        product = self.repository.get_by_id(product_id)
        if product is None:
            logger.warning("Status toggle failed: product with id=%s not found", product_id)
            return OperationResult.not_found(f"Product {product_id} not found")
        return self.set_product_status(product.id, not product.is_active)
