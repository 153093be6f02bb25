"""Repository tests, run against both the ORM and the raw SQL backend."""
import uuid
from decimal import Decimal
from unittest import mock

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, connection

from productmanager.catalog.products.filters import ProductFilter
from productmanager.catalog.products.models import Product
from productmanager.catalog.products.repositories import (
    OrmProductRepository,
    SqlProductRepository,
    get_product_repository,
)
from productmanager.catalog.products.results import Outcome
from productmanager.catalog.products.seed import seed_products


def names(products):
    return [product.name for product in products]


class TestListFiltered:
    def test_default_listing(self, repository, seeded):
        products, total = repository.list_filtered(ProductFilter())
        assert names(products) == ["Arabica", "Chocolate", "Cocoa", "Coffee", "Tea"]
        assert total == 5

    def test_empty_catalog(self, repository):
        assert repository.list_filtered(ProductFilter()) == ([], 0)

    def test_price_range(self, repository, seeded):
        products, total = repository.list_filtered(
            ProductFilter(min_price=Decimal("100"), max_price=Decimal("200"))
        )
        assert sorted(names(products)) == ["Cocoa", "Coffee", "Tea"]
        assert total == 3

    def test_first_page_of_two(self, repository, seeded):
        products, total = repository.list_filtered(ProductFilter(page=1, page_size=2))
        assert names(products) == ["Arabica", "Chocolate"]
        assert total == 5

    def test_page_past_the_end(self, repository, seeded):
        assert repository.list_filtered(ProductFilter(page=9, page_size=2)) == ([], 5)

    def test_huge_page_keeps_total(self, repository, seeded):
        assert repository.list_filtered(ProductFilter(page=10**19, page_size=10**19)) == ([], 5)
        assert repository.list_filtered(ProductFilter(page=10**19, page_size=2)) == ([], 5)

    def test_huge_page_size_returns_everything(self, repository, seeded):
        products, total = repository.list_filtered(ProductFilter(page=1, page_size=10**19))
        assert names(products) == ["Arabica", "Chocolate", "Cocoa", "Coffee", "Tea"]
        assert total == 5

    def test_last_partial_page(self, repository, seeded):
        products, total = repository.list_filtered(ProductFilter(page=3, page_size=2))
        assert names(products) == ["Tea"]
        assert total == 5

    def test_name_filter_is_case_insensitive(self, repository, seeded):
        products, total = repository.list_filtered(ProductFilter(name="cO"))
        assert names(products) == ["Chocolate", "Cocoa", "Coffee"]
        assert total == 3

    @pytest.mark.skipif(connection.vendor != "sqlite", reason="SQLite folds case for ASCII only")
    def test_non_ascii_case_is_not_folded_on_sqlite(self, repository, seeded):
        repository.add(Product.create("Éclair", None, 4))

        assert repository.list_filtered(ProductFilter(name="éclair")) == ([], 0)
        assert names(repository.list_filtered(ProductFilter(name="Éclair"))[0]) == ["Éclair"]
        assert names(repository.list_filtered(ProductFilter(name="CLAIR"))[0]) == ["Éclair"]

    def test_name_wildcards_are_literal(self, repository, seeded):
        repository.add(Product.create("100% Arabica", None, 10))
        repository.add(Product.create("Cold_brew", None, 10))

        assert names(repository.list_filtered(ProductFilter(name="%"))[0]) == ["100% Arabica"]
        assert names(repository.list_filtered(ProductFilter(name="_"))[0]) == ["Cold_brew"]

    def test_price_descending(self, repository, seeded):
        products, _ = repository.list_filtered(ProductFilter(sort_by="price", ascending=False))
        prices = [product.price for product in products]
        assert all(a >= b for a, b in zip(prices, prices[1:]))
        assert products[0].name == "Chocolate"

    def test_equal_prices_keep_insertion_order(self, repository, seeded):
        products, _ = repository.list_filtered(ProductFilter(sort_by="price"))
        assert names(products) == ["Tea", "Coffee", "Cocoa", "Arabica", "Chocolate"]

    def test_active_flag(self, repository, seeded):
        repository.set_status(seeded[0].id, True)

        active, active_total = repository.list_filtered(ProductFilter(is_active=True))
        inactive, inactive_total = repository.list_filtered(ProductFilter(is_active=False))

        assert names(active) == ["Coffee"]
        assert active_total == 1
        assert inactive_total == 4

    def test_hostile_sort_key_falls_back_to_name(self, repository, seeded):
        products, total = repository.list_filtered(
            ProductFilter(sort_by="price; DROP TABLE catalog_products; --", ascending=False)
        )
        assert names(products) == ["Arabica", "Chocolate", "Cocoa", "Coffee", "Tea"]
        assert total == 5
        assert Product.objects.count() == 5

    def test_hostile_name_is_just_a_value(self, repository, seeded):
        assert repository.list_filtered(ProductFilter(name="' OR '1'='1")) == ([], 0)
        assert Product.objects.count() == 5


@pytest.mark.django_db
@pytest.mark.parametrize("product_filter", [
    ProductFilter(),
    ProductFilter(sort_by="price", ascending=False, page=2, page_size=2),
    ProductFilter(name="a", min_price=Decimal("150")),
    ProductFilter(max_price=Decimal("250"), sort_by="price"),
    ProductFilter(is_active=False, page=3, page_size=2),
])
def test_backends_return_identical_results(product_filter):

    seed_products(OrmProductRepository())

    orm_products, orm_total = OrmProductRepository().list_filtered(product_filter)
    sql_products, sql_total = SqlProductRepository().list_filtered(product_filter)

    assert [p.id for p in orm_products] == [p.id for p in sql_products]
    assert [p.price for p in orm_products] == [p.price for p in sql_products]
    assert orm_total == sql_total


class TestGetById:
    def test_found(self, repository, seeded):
        product = repository.get_by_id(seeded[1].id)
        assert product.name == "Tea"
        assert product.price == Decimal("100")
        assert product.is_active is False

    def test_accepts_string_id(self, repository, seeded):
        assert repository.get_by_id(str(seeded[1].id)).name == "Tea"

    def test_missing(self, repository, seeded):
        assert repository.get_by_id(uuid.uuid4()) is None

    def test_malformed_id(self, repository):
        assert repository.get_by_id("not-a-uuid") is None


class TestWrites:
    def test_add_persists_every_field(self, repository):
        product = Product.create("Latte", "With milk", Decimal("12345.67"), is_active=True)

        result = repository.add(product)

        assert result.ok
        stored = Product.objects.get(id=product.id)
        assert (stored.name, stored.description, stored.price, stored.is_active) == (
            "Latte", "With milk", Decimal("12345.67"), True,
        )

    def test_update(self, repository, seeded):
        product = repository.get_by_id(seeded[0].id)
        product.update("Espresso", "Short", Decimal("180.25"), True)

        result = repository.update(product)

        assert result.ok
        stored = repository.get_by_id(product.id)
        assert (stored.name, stored.description, stored.price, stored.is_active) == (
            "Espresso", "Short", Decimal("180.25"), True,
        )

    def test_update_missing(self, repository):
        result = repository.update(Product.create("Ghost", None, 1))
        assert result.outcome is Outcome.NOT_FOUND

    def test_delete(self, repository, seeded):
        assert repository.delete(seeded[0].id).ok
        assert repository.get_by_id(seeded[0].id) is None
        assert repository.delete(seeded[0].id).outcome is Outcome.NOT_FOUND

    def test_delete_malformed_id(self, repository):
        assert repository.delete("nope").outcome is Outcome.NOT_FOUND

    def test_set_status_changes_only_the_flag(self, repository, seeded):
        assert repository.set_status(seeded[2].id, True).ok

        stored = repository.get_by_id(seeded[2].id)
        assert stored.is_active is True
        assert stored.name == "Cocoa"
        assert stored.price == Decimal("200")

    def test_set_status_missing(self, repository):
        assert repository.set_status(uuid.uuid4(), True).outcome is Outcome.NOT_FOUND


class TestDatabaseFailures:
    """Database errors are logged and reported, never raised."""

    @pytest.fixture
    def broken(self, repository):
        if isinstance(repository, SqlProductRepository):
            patches = [
                mock.patch.object(SqlProductRepository, "_fetch", side_effect=DatabaseError("db down")),
                mock.patch.object(SqlProductRepository, "_execute", side_effect=DatabaseError("db down")),
            ]
        else:
            objects = mock.MagicMock()
            objects.all.side_effect = DatabaseError("db down")
            objects.filter.side_effect = DatabaseError("db down")
            patches = [mock.patch.object(Product, "objects", objects)]
        for patcher in patches:
            patcher.start()
        yield repository
        for patcher in patches:
            patcher.stop()

    def test_list_degrades_to_empty(self, broken):
        assert broken.list_filtered(ProductFilter()) == ([], 0)

    def test_get_degrades_to_none(self, broken):
        assert broken.get_by_id(uuid.uuid4()) is None

    def test_update_reports_failure(self, broken):
        result = broken.update(Product.create("Tea", None, 1))
        assert result.outcome is Outcome.FAILED
        assert "db down" in result.reason

    def test_delete_reports_failure(self, broken):
        result = broken.delete(uuid.uuid4())
        assert result.outcome is Outcome.FAILED
        assert "db down" in result.reason

    def test_set_status_reports_failure(self, broken):
        result = broken.set_status(uuid.uuid4(), True)
        assert result.outcome is Outcome.FAILED

    def test_failure_is_logged(self, broken, caplog):
        broken.delete(uuid.uuid4())
        assert any("Error deleting product" in record.getMessage() for record in caplog.records)


def test_add_reports_constraint_violation(repository, seeded):
    duplicate = Product.create("Copy", None, 1)
    duplicate.id = seeded[0].id

    result = repository.add(duplicate)

    assert result.outcome is Outcome.FAILED
    assert result.reason
    assert Product.objects.count() == 5


def test_unknown_backend_is_rejected(settings):
    settings.PRODUCT_REPOSITORY_BACKEND = "mongo"
    with pytest.raises(ImproperlyConfigured):
        get_product_repository()


def test_backend_follows_settings(settings):
    settings.PRODUCT_REPOSITORY_BACKEND = "sql"
    assert isinstance(get_product_repository(), SqlProductRepository)
    settings.PRODUCT_REPOSITORY_BACKEND = "orm"
    assert isinstance(get_product_repository(), OrmProductRepository)
