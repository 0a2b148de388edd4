"""
Product query handlers.
"""

from products.application.dto.product_dto import ProductDTO, ProductListDTO
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_low_stock_products import ListLowStockProductsQuery
from products.application.queries.list_products import ListProductsQuery
from products.application.queries.list_products_by_category import (
    ListProductsByCategoryQuery,
)
from products.domain.filters import (
    Pagination,
    build_filter,
    in_stock_by_category,
    low_stock,
)
from products.ports.product_repository import ProductRepository

UNPAGINATED = Pagination(limit=None, skip=0)


class GetProductHandler:
    """Handler for GetProductQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: GetProductQuery) -> ProductDTO:
        """
        Handle get product query.

        Raises:
            MalformedProductIdError: If the identifier is malformed
            ProductNotFoundError: If the product does not exist
        """
        product = await self.product_repository.find_by_id(query.product_id)
        return ProductDTO.from_entity(product)


class ListProductsHandler:
    """Handler for ListProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: ListProductsQuery) -> ProductListDTO:
        """
        Handle list products query.

        Args:
            query: ListProductsQuery

        Returns:
            ProductListDTO with the requested page and the total match count
        """
        items, total = await self.product_repository.find(
            build_filter(query.criteria), query.pagination
        )
        return ProductListDTO(
            items=[ProductDTO.from_entity(product) for product in items],
            total=total,
            limit=query.pagination.limit,
            skip=query.pagination.skip,
        )


class ListLowStockProductsHandler:
    """Handler for ListLowStockProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: ListLowStockProductsQuery) -> ProductListDTO:
        """Handle low stock query."""
        items, total = await self.product_repository.find(low_stock(), UNPAGINATED)
        return ProductListDTO(
            items=[ProductDTO.from_entity(product) for product in items],
            total=total,
        )


class ListProductsByCategoryHandler:
    """Handler for ListProductsByCategoryQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: ListProductsByCategoryQuery) -> ProductListDTO:
        """Handle in-stock-by-category query."""
        items, total = await self.product_repository.find(
            in_stock_by_category(query.category), UNPAGINATED
        )
        return ProductListDTO(
            items=[ProductDTO.from_entity(product) for product in items],
            total=total,
        )
