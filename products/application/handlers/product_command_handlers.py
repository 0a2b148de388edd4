"""
Product command handlers.

Handlers for create, update, delete and reduce-stock commands.
"""
import logging

from core.domain.exceptions import InsufficientStockError
from core.metrics import (
    products_created_total,
    products_deleted_total,
    products_updated_total,
    stock_reductions_total,
)
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.reduce_stock import ReduceStockCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.dto.product_dto import ProductDTO
from products.domain.services import StockManager
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:
    """Handler for CreateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: CreateProductCommand) -> ProductDTO:
        """
        Handle create product command.

        Args:
            command: CreateProductCommand

        Returns:
            ProductDTO of the created product

        Raises:
            ProductValidationError: If the payload breaks a field rule
        """
        product = await self.product_repository.create(command.payload)

        products_created_total.labels(category=product.category.value).inc()
        logger.info(
            "Product created",
            extra={"product_id": str(product.id), "category": product.category.value},
        )
        return ProductDTO.from_entity(product)


class UpdateProductHandler:
    """Handler for UpdateProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: UpdateProductCommand) -> ProductDTO:
        """
        Handle update product command.

        Raises:
            MalformedProductIdError: If the identifier is malformed
            ProductValidationError: If a supplied field breaks a rule
            ProductNotFoundError: If the product does not exist
        """
        product = await self.product_repository.update(command.product_id, command.changes)

        products_updated_total.inc()
        logger.info(
            "Product updated",
            extra={"product_id": str(product.id), "fields": sorted(command.changes)},
        )
        return ProductDTO.from_entity(product)


class DeleteProductHandler:
    """Handler for DeleteProductCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: DeleteProductCommand) -> None:
        """
        Handle delete product command.

        Raises:
            MalformedProductIdError: If the identifier is malformed
            ProductNotFoundError: If the product does not exist
        """
        await self.product_repository.delete(command.product_id)

        products_deleted_total.inc()
        logger.info("Product deleted", extra={"product_id": command.product_id})


class ReduceStockHandler:
    """Handler for ReduceStockCommand."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, command: ReduceStockCommand) -> ProductDTO:
        """
        Handle reduce stock command.

        Returns:
            ProductDTO with the reduced quantity

        Raises:
            ProductValidationError: If amount is not a positive integer
            MalformedProductIdError: If the identifier is malformed
            ProductNotFoundError: If the product does not exist
            InsufficientStockError: If amount exceeds the available quantity
        """
        try:
            product = await StockManager.reduce_stock(
                command.product_id, command.amount, self.product_repository
            )
        except InsufficientStockError:
            stock_reductions_total.labels(outcome="insufficient").inc()
            raise

        stock_reductions_total.labels(outcome="reduced").inc()
        logger.info(
            "Stock reduced",
            extra={
                "product_id": str(product.id),
                "amount": command.amount,
                "quantity": product.quantity,
            },
        )
        return ProductDTO.from_entity(product)
