"""
Product repositories.

- orm.py: Django ORM queries, filtering/sorting/paging done by the database
- sql.py: raw parameterized SQL, paging done in memory

The backend is picked with the PRODUCT_REPOSITORY_BACKEND setting:
    from productmanager.catalog.products.repositories import get_product_repository
"""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import ProductRepository, coerce_product_id
from .orm import OrmProductRepository
from .sql import SqlProductRepository

REPOSITORY_BACKENDS = {
    OrmProductRepository.backend_name: OrmProductRepository,
    SqlProductRepository.backend_name: SqlProductRepository,
}


def get_product_repository(backend=None) -> ProductRepository:
    backend = (backend or getattr(settings, "PRODUCT_REPOSITORY_BACKEND", "orm")).lower()
    try:
        return REPOSITORY_BACKENDS[backend]()
    except KeyError:
        raise ImproperlyConfigured(
            f"Unknown PRODUCT_REPOSITORY_BACKEND '{backend}'. "
            f"Expected one of: {', '.join(sorted(REPOSITORY_BACKENDS))}"
        ) from None


__all__ = [
    'ProductRepository',
    'OrmProductRepository',
    'SqlProductRepository',
    'coerce_product_id',
    'get_product_repository',
]
