"""
Unit tests for core value objects.
"""
import uuid

import pytest

from core.domain.exceptions import MalformedProductIdError
from core.domain.value_objects import Category, ProductId


class TestCategory:
    """Tests for Category value object."""

    def test_values_in_order(self):
        """Test the closed category set."""
        assert Category.values() == [
            "electronics",
            "clothing",
            "books",
            "home",
            "sports",
            "other",
        ]

    def test_is_valid(self):
        """Test membership checks."""
        assert Category.is_valid("books")
        assert not Category.is_valid("toys")
        assert not Category.is_valid("BOOKS")
        assert not Category.is_valid(None)

    def test_str(self):
        """Test string form is the value."""
        assert str(Category.HOME) == "home"


class TestProductId:
    """Tests for ProductId value object."""

    def test_parse_string(self):
        """Test parsing a UUID string."""
        raw = uuid.uuid4()
        assert ProductId.parse(str(raw)).value == raw
        assert str(ProductId.parse(raw)) == str(raw)

    @pytest.mark.parametrize("raw", ["abc", "", "123", None])
    def test_parse_malformed(self, raw):
        """Test malformed identifiers raise."""
        with pytest.raises(MalformedProductIdError) as exc_info:
            ProductId.parse(raw)
        assert exc_info.value.code == "INVALID_PRODUCT_ID"
