"""Shared fixtures: both repository backends, seeded catalog, API and admin clients."""
import pytest
from django.test import Client
from django.urls import reverse
from rest_framework.test import APIClient

from productmanager.catalog.products.repositories import get_product_repository
from productmanager.catalog.products.seed import seed_products

ADMIN_LOGIN = "admin"
ADMIN_PASSWORD = "S3cret-pass"


@pytest.fixture(params=["orm", "sql"])
def backend(request, settings):
    settings.PRODUCT_REPOSITORY_BACKEND = request.param
    return request.param


@pytest.fixture
def repository(db, backend):
    return get_product_repository(backend)


@pytest.fixture
def seeded(repository):
    """The five demo products, inserted in order: Coffee, Tea, Cocoa, Chocolate, Arabica."""
    return seed_products(repository)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def logged_in_client(db):
    client = Client()
    response = client.post(reverse("accounts:login"), {"username": ADMIN_LOGIN, "password": ADMIN_PASSWORD})
    assert response.status_code == 302
    return client
