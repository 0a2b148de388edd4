"""
Product domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""

from core.domain.exceptions import ProductValidationError
from products.domain.product import Product
from products.ports.product_repository import ProductRepository, RawProductId


class StockManager:
    """Domain service for guarded stock reduction."""

    @staticmethod
    async def reduce_stock(
        product_id: RawProductId,
        amount: int,
        repository: ProductRepository,
    ) -> Product:
        """
        Remove amount units from a product's stock.

        The entity check rejects obviously insufficient requests up front;
        the repository then re-checks against the stored quantity inside a
        single atomic update, so a concurrent reduction cannot slip between
        the read and the write.

        Args:
            product_id: Product identifier
            amount: Units to remove (positive integer)
            repository: Product repository

        Returns:
            Updated Product entity

        Raises:
            ProductValidationError: If amount is not a positive integer
            MalformedProductIdError: If product_id is not a valid identifier
            ProductNotFoundError: If the product does not exist
            InsufficientStockError: If amount exceeds the stored quantity
        """
        product = await repository.find_by_id(product_id)
        try:
            product.reduce_stock(amount)
        except ValueError as exc:
            raise ProductValidationError([str(exc)]) from exc
        return await repository.reduce_stock(product.id, amount)
