"""
Raw SQL implementation of the product repository.

Every user value goes through a bound ``%s`` parameter; the ORDER BY column
is looked up in ``ORDER_COLUMNS`` and never taken from the request.

The listing fetches every matching row and pages in memory, which is only
reasonable for small catalogs.
"""
import logging

from django.db import DatabaseError, connection, transaction
from django.utils import timezone

from productmanager.catalog.products.filters import paginate
from productmanager.catalog.products.models import Product
from productmanager.catalog.products.results import OperationResult
from .base import ProductRepository, coerce_product_id

logger = logging.getLogger(__name__)

TABLE = Product._meta.db_table
COLUMNS = ("id", "name", "description", "price", "is_active", "created_at", "updated_at")
ORDER_COLUMNS = {"name": "name", "price": "price"}

SELECT_PRODUCTS = f"SELECT {', '.join(COLUMNS)} FROM {TABLE}"
INSERT_PRODUCT = (
    f"INSERT INTO {TABLE} ({', '.join(COLUMNS)}) "
    f"VALUES ({', '.join(['%s'] * len(COLUMNS))})"
)
UPDATE_PRODUCT = (
    f"UPDATE {TABLE} "
    "SET name = %s, description = %s, price = %s, is_active = %s, updated_at = %s "
    "WHERE id = %s"
)
UPDATE_STATUS = f"UPDATE {TABLE} SET is_active = %s, updated_at = %s WHERE id = %s"
DELETE_PRODUCT = f"DELETE FROM {TABLE} WHERE id = %s"


def db_value(field_name, value):
    """Prepare ``value`` the way the model field would for the active database."""
    return Product._meta.get_field(field_name).get_db_prep_save(value, connection)


class SqlProductRepository(ProductRepository):
    backend_name = "sql"

    def _fetch(self, sql, params):
        return list(Product.objects.raw(sql, tuple(params)))

    def _execute(self, sql, params):
        with transaction.atomic():
            with connection.cursor() as cursor:
                cursor.execute(sql, params)
                return cursor.rowcount

    def list_filtered(self, product_filter):
        sql = [SELECT_PRODUCTS, "WHERE 1=1"]
        params = []

        if product_filter.is_active is not None:
            sql.append("AND is_active = %s")
            params.append(db_value("is_active", product_filter.is_active))

        if product_filter.name:
            sql.append("AND LOWER(name) LIKE LOWER(%s) ESCAPE '\\'")
            params.append(product_filter.name_pattern)

        if product_filter.min_price is not None:
            sql.append("AND price >= %s")
            params.append(db_value("price", product_filter.min_price))

        if product_filter.max_price is not None:
            sql.append("AND price <= %s")
            params.append(db_value("price", product_filter.max_price))

        direction = "DESC" if product_filter.descending else "ASC"
        sql.append(f"ORDER BY {ORDER_COLUMNS[product_filter.sort_field]} {direction}, created_at ASC, id ASC")

        try:
            products = self._fetch(" ".join(sql), params)
        except DatabaseError:
            logger.exception("Error fetching products with filter %s", product_filter)
            return [], 0

        total_count = len(products)
        page = paginate(products, product_filter)
        logger.info("Returning %s of %s products", len(page), total_count)
        return page, total_count

    def get_by_id(self, product_id):
        pk = coerce_product_id(product_id)
        if pk is None:
            return None
        try:
            rows = self._fetch(f"{SELECT_PRODUCTS} WHERE id = %s", [db_value("id", pk)])
        except DatabaseError:
            logger.exception("Error fetching product by id %s", product_id)
            return None
        return rows[0] if rows else None

    def add(self, product):
        product.updated_at = timezone.now()
        params = [db_value(column, getattr(product, column)) for column in COLUMNS]
        try:
            self._execute(INSERT_PRODUCT, params)
        except DatabaseError as exc:
            logger.exception("Error adding product %s", product.id)
            return OperationResult.failure(str(exc))

        logger.info("Added product %s", product.id)
        return OperationResult.success(product)

    def update(self, product):
        product.updated_at = timezone.now()
        params = [
            db_value("name", product.name),
            db_value("description", product.description),
            db_value("price", product.price),
            db_value("is_active", product.is_active),
            db_value("updated_at", product.updated_at),
            db_value("id", product.id),
        ]
        try:
            affected = self._execute(UPDATE_PRODUCT, params)
        except DatabaseError as exc:
            logger.exception("Error updating product %s", product.id)
            return OperationResult.failure(str(exc))

        logger.info("Updated product %s, affected rows: %s", product.id, affected)
        if affected < 1:
            return OperationResult.not_found(f"Product {product.id} not found")
        return OperationResult.success(product)

    def delete(self, product_id):
        pk = coerce_product_id(product_id)
        if pk is None:
            return OperationResult.not_found(f"Product {product_id} not found")
        try:
            affected = self._execute(DELETE_PRODUCT, [db_value("id", pk)])
        except DatabaseError as exc:
            logger.exception("Error deleting product %s", product_id)
            return OperationResult.failure(str(exc))

        logger.info("Deleted product %s, affected rows: %s", pk, affected)
        if affected < 1:
            return OperationResult.not_found(f"Product {pk} not found")
        return OperationResult.success()

    def set_status(self, product_id, is_active):
        pk = coerce_product_id(product_id)
        if pk is None:
            return OperationResult.not_found(f"Product {product_id} not found")
        params = [
            db_value("is_active", is_active),
            db_value("updated_at", timezone.now()),
            db_value("id", pk),
        ]
        try:
            affected = self._execute(UPDATE_STATUS, params)
        except DatabaseError as exc:
            logger.exception("Error updating status of product %s", product_id)
            return OperationResult.failure(str(exc))

        logger.info("Updated is_active for product %s to %s, affected rows: %s", pk, is_active, affected)
        if affected < 1:
            return OperationResult.not_found(f"Product {pk} not found")
        return OperationResult.success()
