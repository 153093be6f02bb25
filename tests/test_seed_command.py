"""Tests for the seed_products management command."""
from io import StringIO

import pytest
from django.core.management import call_command

from productmanager.catalog.products.models import Product


def run(*args):
    out = StringIO()
    call_command("seed_products", *args, stdout=out)
    return out.getvalue()


@pytest.mark.parametrize("backend_option", ["orm", "sql"])
def test_seeds_empty_catalog(db, backend_option):
    output = run("--backend", backend_option)

    assert "Seeded 5 products." in output
    assert sorted(Product.objects.values_list("name", flat=True)) == [
        "Arabica", "Chocolate", "Cocoa", "Coffee", "Tea",
    ]
    assert not Product.objects.filter(is_active=True).exists()


def test_skips_when_catalog_has_products(db):
    run()
    output = run()

    assert "nothing to do" in output
    assert Product.objects.count() == 5


def test_force_inserts_again(db):
    run()
    run("--force")

    assert Product.objects.count() == 10


def test_uses_configured_backend(db, settings):
    settings.PRODUCT_REPOSITORY_BACKEND = "sql"
    assert "with the sql backend" in run()
