"""
Integration tests for product command/query handlers and the stock service.
"""

import pytest
from asgiref.sync import async_to_sync
from prometheus_client import REGISTRY

from core.domain.exceptions import InsufficientStockError, ProductValidationError
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.reduce_stock import ReduceStockCommand
from products.application.handlers.product_command_handlers import (
    CreateProductHandler,
    ReduceStockHandler,
)
from products.application.handlers.product_query_handlers import (
    ListLowStockProductsHandler,
    ListProductsHandler,
)
from products.application.queries.list_low_stock_products import ListLowStockProductsQuery
from products.application.queries.list_products import ListProductsQuery
from products.domain.filters import parse_query_params
from products.domain.services import StockManager


def _counter_value(outcome):
    return REGISTRY.get_sample_value("stock_reductions_total", {"outcome": outcome}) or 0.0


@pytest.mark.django_db
@pytest.mark.integration
class TestStockManager:
    """Tests for StockManager service."""

    def test_reduce_stock(self, product_repository, create_product):
        """Test a reduction through the domain service."""
        product = create_product(quantity=4)

        reduced = async_to_sync(StockManager.reduce_stock)(
            str(product.id), 4, product_repository
        )

        assert reduced.quantity == 0
        assert reduced.in_stock is False

    def test_reduce_stock_insufficient(self, product_repository, create_product):
        """Test the entity check rejects an obviously insufficient request."""
        product = create_product(quantity=1)

        with pytest.raises(InsufficientStockError):
            async_to_sync(StockManager.reduce_stock)(product.id, 5, product_repository)

    def test_reduce_stock_invalid_amount(self, product_repository, db_product):
        """Test a non-positive amount becomes a validation error."""
        with pytest.raises(ProductValidationError) as exc_info:
            async_to_sync(StockManager.reduce_stock)(db_product.id, -2, product_repository)
        assert exc_info.value.errors == ["Amount must be a positive integer"]


@pytest.mark.django_db
@pytest.mark.integration
class TestProductHandlers:
    """Tests for application handlers."""

    def test_create_handler_returns_dto(self, product_repository, product_payload):
        """Test the create handler returns a DTO with computed flags."""
        product_payload["quantity"] = 5
        handler = CreateProductHandler(product_repository=product_repository)

        dto = async_to_sync(handler.handle)(CreateProductCommand(payload=product_payload))

        assert dto.category == "electronics"
        assert dto.in_stock is True
        assert dto.is_low_stock is True

    def test_list_handler_reports_page_and_total(self, product_repository, create_product):
        """Test the list handler echoes pagination and counts."""
        for index in range(3):
            create_product(name=f"Item {index}")
        criteria, pagination = parse_query_params({"limit": "2"})
        handler = ListProductsHandler(product_repository=product_repository)

        result = async_to_sync(handler.handle)(
            ListProductsQuery(criteria=criteria, pagination=pagination)
        )

        assert result.count == 2
        assert result.total == 3
        assert (result.limit, result.skip) == (2, 0)

    def test_low_stock_handler_is_unpaginated(self, product_repository, create_product):
        """Test the canned low-stock query returns every match."""
        for index in range(12):
            create_product(name=f"Item {index}", quantity=3)
        handler = ListLowStockProductsHandler(product_repository=product_repository)

        result = async_to_sync(handler.handle)(ListLowStockProductsQuery())

        assert result.count == 12

    def test_reduce_stock_handler_counts_outcomes(self, product_repository, create_product):
        """Test reductions are recorded per outcome."""
        product = create_product(quantity=1)
        handler = ReduceStockHandler(product_repository=product_repository)
        reduced_before = _counter_value("reduced")
        insufficient_before = _counter_value("insufficient")

        async_to_sync(handler.handle)(ReduceStockCommand(product_id=str(product.id), amount=1))
        with pytest.raises(InsufficientStockError):
            async_to_sync(handler.handle)(
                ReduceStockCommand(product_id=str(product.id), amount=1)
            )

        assert _counter_value("reduced") == reduced_before + 1
        assert _counter_value("insufficient") == insufficient_before + 1
