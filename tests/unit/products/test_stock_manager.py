"""
Unit tests for StockManager and the query handlers against an in-memory repository.
"""

import pytest

from core.domain.exceptions import (
    InsufficientStockError,
    MalformedProductIdError,
    ProductNotFoundError,
    ProductValidationError,
)
from core.domain.value_objects import ProductId
from products.application.handlers.product_query_handlers import (
    ListLowStockProductsHandler,
    ListProductsByCategoryHandler,
    ListProductsHandler,
)
from products.application.queries.list_low_stock_products import ListLowStockProductsQuery
from products.application.queries.list_products import ListProductsQuery
from products.application.queries.list_products_by_category import (
    ListProductsByCategoryQuery,
)
from products.domain.filters import parse_query_params
from products.domain.services import StockManager
from products.ports.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """Dictionary-backed repository evaluating predicates in Python."""

    def __init__(self, *products):
        self.products = {product.id: product for product in products}
        self.reductions = []

    async def create(self, payload):
        raise NotImplementedError

    async def find_by_id(self, product_id):
        pid = ProductId.parse(product_id)
        if pid.value not in self.products:
            raise ProductNotFoundError()
        return self.products[pid.value]

    async def find(self, product_filter, pagination):
        matches = [product for product in self.products.values() if product_filter.matches(product)]
        by_id = sorted(matches, key=lambda product: str(product.id))
        ordered = sorted(by_id, key=lambda product: product.created_at, reverse=True)
        if pagination.limit is None:
            return ordered[pagination.skip :], len(ordered)
        return ordered[pagination.skip : pagination.skip + pagination.limit], len(ordered)

    async def update(self, product_id, changes):
        raise NotImplementedError

    async def delete(self, product_id):
        raise NotImplementedError

    async def reduce_stock(self, product_id, amount):
        product = (await self.find_by_id(product_id)).reduce_stock(amount)
        self.products[product.id] = product
        self.reductions.append((product.id, amount))
        return product


@pytest.mark.asyncio
class TestStockManager:
    """Tests for StockManager service."""

    async def test_reduce_stock(self, product_factory):
        """Test the reduction is delegated to the repository."""
        product = product_factory(quantity=5)
        repository = InMemoryProductRepository(product)

        reduced = await StockManager.reduce_stock(str(product.id), 5, repository)

        assert reduced.quantity == 0
        assert reduced.in_stock is False
        assert repository.reductions == [(product.id, 5)]

    async def test_insufficient_stock_skips_repository_write(self, product_factory):
        """Test an oversized request fails before the repository is asked to write."""
        product = product_factory(quantity=1)
        repository = InMemoryProductRepository(product)

        with pytest.raises(InsufficientStockError):
            await StockManager.reduce_stock(product.id, 2, repository)
        assert repository.reductions == []

    @pytest.mark.parametrize("amount", [0, -4, 1.5])
    async def test_invalid_amount(self, product_factory, amount):
        """Test bad amounts become validation errors."""
        repository = InMemoryProductRepository(product_factory())

        with pytest.raises(ProductValidationError) as exc_info:
            await StockManager.reduce_stock(
                next(iter(repository.products)), amount, repository
            )
        assert exc_info.value.errors == ["Amount must be a positive integer"]

    async def test_missing_and_malformed_ids(self):
        """Test identifier errors propagate from the repository."""
        repository = InMemoryProductRepository()

        with pytest.raises(MalformedProductIdError):
            await StockManager.reduce_stock("abc", 1, repository)
        with pytest.raises(ProductNotFoundError):
            await StockManager.reduce_stock("6f1c3c8e-6d0b-4a53-8f5e-0e7b8f2a9c11", 1, repository)


@pytest.mark.asyncio
class TestQueryHandlersInMemory:
    """Tests for the query handlers over a repository that evaluates ProductFilter."""

    async def test_list_products_filters_and_pages(self, product_factory):
        """Test parsed criteria select and page the matching products."""
        repository = InMemoryProductRepository(
            product_factory(name="Cheap Book", category="books", price=9),
            product_factory(name="Good Book", category="books", price=15),
            product_factory(name="Sold Out Book", category="books", price=20, quantity=0),
            product_factory(name="Headset", category="electronics", price=40),
        )
        criteria, pagination = parse_query_params(
            {"category": "books", "minPrice": "10", "inStock": "true"}
        )

        result = await ListProductsHandler(product_repository=repository).handle(
            ListProductsQuery(criteria=criteria, pagination=pagination)
        )

        assert result.total == 1
        assert [item.name for item in result.items] == ["Good Book"]

    async def test_low_stock_includes_ceiling(self, product_factory):
        """Test the low-stock query returns quantity 10 while classifying it not low."""
        repository = InMemoryProductRepository(
            *(
                product_factory(name=f"Qty {quantity}", quantity=quantity)
                for quantity in (0, 3, 10, 11)
            )
        )

        result = await ListLowStockProductsHandler(product_repository=repository).handle(
            ListLowStockProductsQuery()
        )

        flags = {item.quantity: item.is_low_stock for item in result.items}
        assert flags == {3: True, 10: False}

    async def test_by_category_requires_stock(self, product_factory):
        """Test the category query skips out-of-stock products."""
        repository = InMemoryProductRepository(
            product_factory(name="Lamp", category="home", quantity=2),
            product_factory(name="Rug", category="home", quantity=0),
        )

        result = await ListProductsByCategoryHandler(product_repository=repository).handle(
            ListProductsByCategoryQuery(category="home")
        )

        assert [item.name for item in result.items] == ["Lamp"]
