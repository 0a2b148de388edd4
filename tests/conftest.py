"""
Pytest configuration and shared fixtures.
"""

import pytest
from asgiref.sync import async_to_sync

from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def product_payload():
    """Fixture for a valid create payload."""
    return {
        "name": "Wireless Mouse",
        "description": "Ergonomic mouse with a silent click",
        "price": 25,
        "quantity": 40,
        "category": "electronics",
    }


@pytest.fixture
def create_product(db, product_repository, product_payload):
    """Factory fixture saving a product; keyword arguments override the payload."""

    def _create(**overrides):
        payload = {**product_payload, **overrides}
        return async_to_sync(product_repository.create)(payload)

    return _create


@pytest.fixture
def db_product(create_product):
    """Fixture for a Product saved in database."""
    return create_product()


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()
