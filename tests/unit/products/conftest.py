"""
Fixtures for product domain unit tests.
"""
import pytest

from core.domain.value_objects import Category
from products.domain.product import Product


@pytest.fixture
def product_factory():
    """Factory building Product entities without touching the database."""

    def _build(**overrides):
        fields = {
            "name": "Trail Shoes",
            "description": "Lightweight shoes for rough terrain",
            "price": 80,
            "category": Category.SPORTS,
            "quantity": 12,
        }
        fields.update(overrides)
        return Product.create(**fields)

    return _build
