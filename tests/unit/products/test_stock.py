"""
Unit tests for stock invariant rules.
"""
import pytest

from core.domain.exceptions import InsufficientStockError
from products.domain.filters import low_stock
from products.domain.stock import derive_in_stock, is_low_stock, reduced_quantity


class TestStockRules:
    """Tests for the stock derivation and classification rules."""

    @pytest.mark.parametrize("quantity,expected", [(0, False), (1, True), (500, True)])
    def test_derive_in_stock(self, quantity, expected):
        """Test inStock is true exactly when quantity is positive."""
        assert derive_in_stock(quantity) is expected

    @pytest.mark.parametrize(
        "quantity,expected", [(0, False), (1, True), (9, True), (10, False), (11, False)]
    )
    def test_is_low_stock(self, quantity, expected):
        """Test read-time classification excludes the ceiling."""
        assert is_low_stock(quantity) is expected

    def test_low_stock_thresholds_differ_at_ten(self, product_factory):
        """A quantity of 10 is matched by the low-stock query but not classified low."""
        product = product_factory(quantity=10)
        assert low_stock().matches(product) is True
        assert product.is_low_stock is False

    def test_reduced_quantity(self):
        """Test a successful reduction."""
        assert reduced_quantity(5, 2) == 3
        assert reduced_quantity(5, 5) == 0

    def test_reduced_quantity_insufficient(self):
        """Test reducing more than available."""
        with pytest.raises(InsufficientStockError) as exc_info:
            reduced_quantity(2, 3)
        assert exc_info.value.available == 2
        assert exc_info.value.requested == 3
        assert exc_info.value.code == "INSUFFICIENT_STOCK"

    @pytest.mark.parametrize("amount", [0, -1, 1.5, True, "2"])
    def test_reduced_quantity_rejects_bad_amount(self, amount):
        """Test the amount must be a positive integer."""
        with pytest.raises(ValueError, match="Amount must be a positive integer"):
            reduced_quantity(5, amount)
