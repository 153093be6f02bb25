"""Django ORM implementation of the product repository."""
import logging

from django.db import DatabaseError, transaction
from django.utils import timezone

from productmanager.catalog.products.models import Product
from productmanager.catalog.products.results import OperationResult
from .base import ProductRepository, coerce_product_id

logger = logging.getLogger(__name__)


class OrmProductRepository(ProductRepository):
    """
    Lets the database filter, sort and page the listing.

    The total is a separate ``COUNT`` over the filtered queryset, taken
    before ordering and slicing.
    """

    backend_name = "orm"

    def list_filtered(self, product_filter):
        logger.info(
            "Fetching products with filter: name=%s, minPrice=%s, maxPrice=%s, isActive=%s, page=%s, pageSize=%s",
            product_filter.name, product_filter.min_price, product_filter.max_price,
            product_filter.is_active, product_filter.page, product_filter.page_size,
        )
        try:
            qs = Product.objects.all()

            if product_filter.is_active is not None:
                qs = qs.filter(is_active=product_filter.is_active)

            if product_filter.name:
                qs = qs.filter(name__icontains=product_filter.name)

            if product_filter.min_price is not None:
                qs = qs.filter(price__gte=product_filter.min_price)

            if product_filter.max_price is not None:
                qs = qs.filter(price__lte=product_filter.max_price)

            total_count = qs.count()

            start = product_filter.offset
            if start >= total_count:
                return [], total_count

            sort_field = product_filter.sort_field
            if product_filter.descending:
                sort_field = f"-{sort_field}"
            qs = qs.order_by(sort_field, "created_at", "id")

            # LIMIT/OFFSET stay within the row count
            limit = min(product_filter.page_size, total_count - start)
            products = list(qs[start:start + limit])
        except DatabaseError:
            logger.exception("Error fetching products with filter %s", product_filter)
            return [], 0

        logger.info("Returning %s of %s products", len(products), total_count)
        return products, total_count

    def get_by_id(self, product_id):
        pk = coerce_product_id(product_id)
        if pk is None:
            return None
        try:
            return Product.objects.filter(id=pk).first()
        except DatabaseError:
            logger.exception("Error fetching product by id %s", product_id)
            return None

    def add(self, product):
        try:
            with transaction.atomic():
                product.save(force_insert=True)
        except DatabaseError as exc:
            logger.exception("Error adding product %s", product.id)
            return OperationResult.failure(str(exc))

        logger.info("Added product %s", product.id)
        return OperationResult.success(product)

    def update(self, product):
        try:
            with transaction.atomic():
                affected = Product.objects.filter(id=product.id).update(
                    name=product.name,
                    description=product.description,
                    price=product.price,
                    is_active=product.is_active,
                    updated_at=timezone.now(),
                )
        except DatabaseError as exc:
            logger.exception("Error updating product %s", product.id)
            return OperationResult.failure(str(exc))

        logger.info("Updated product %s, affected rows: %s", product.id, affected)
        if not affected:
            return OperationResult.not_found(f"Product {product.id} not found")
        return OperationResult.success(product)

    def delete(self, product_id):
        pk = coerce_product_id(product_id)
        if pk is None:
            return OperationResult.not_found(f"Product {product_id} not found")
        try:
            with transaction.atomic():
                deleted, _ = Product.objects.filter(id=pk).delete()
        except DatabaseError as exc:
            logger.exception("Error deleting product %s", product_id)
            return OperationResult.failure(str(exc))

        logger.info("Deleted product %s, affected rows: %s", pk, deleted)
        if not deleted:
            return OperationResult.not_found(f"Product {pk} not found")
        return OperationResult.success()

    def set_status(self, product_id, is_active):
        pk = coerce_product_id(product_id)
        if pk is None:
            return OperationResult.not_found(f"Product {product_id} not found")
        try:
            with transaction.atomic():
                affected = Product.objects.filter(id=pk).update(
                    is_active=is_active,
                    updated_at=timezone.now(),
                )
        except DatabaseError as exc:
            logger.exception("Error updating status of product %s", product_id)
            return OperationResult.failure(str(exc))

        logger.info("Updated is_active for product %s to %s, affected rows: %s", pk, is_active, affected)
        if not affected:
            return OperationResult.not_found(f"Product {pk} not found")
        return OperationResult.success()
