"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
import uuid
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Tuple, Union

from products.domain.filters import Pagination, ProductFilter
from products.domain.product import Product

RawProductId = Union[str, uuid.UUID]


class ProductRepository(ABC):
    """
    Abstract repository for Product entities.

    Every write runs the validation rules and re-derives in_stock before
    committing. Identifiers that are not valid UUIDs raise
    MalformedProductIdError; unknown identifiers raise ProductNotFoundError.
    """

    @abstractmethod
    async def create(self, payload: Mapping[str, Any]) -> Product:
        """
        Validate and persist a new product.

        Args:
            payload: Raw product fields

        Returns:
            Created Product entity

        Raises:
            ProductValidationError: If any field rule is violated
        """

    @abstractmethod
    async def find_by_id(self, product_id: RawProductId) -> Product:
        """
        Find a product by ID.

        Raises:
            MalformedProductIdError: If product_id is not a valid identifier
            ProductNotFoundError: If no product has this ID
        """

    @abstractmethod
    async def find(
        self, product_filter: ProductFilter, pagination: Pagination
    ) -> Tuple[List[Product], int]:
        """
        Find products matching a predicate.

        Args:
            product_filter: Predicate to apply
            pagination: Offset/limit window

        Returns:
            Tuple of (page of products newest first, total match count)
        """

    @abstractmethod
    async def update(self, product_id: RawProductId, changes: Mapping[str, Any]) -> Product:
        """
        Validate a partial payload and apply it atomically.

        Raises:
            MalformedProductIdError, ProductValidationError, ProductNotFoundError
        """

    @abstractmethod
    async def delete(self, product_id: RawProductId) -> None:
        """
        Delete a product.

        Raises:
            MalformedProductIdError, ProductNotFoundError
        """

    @abstractmethod
    async def reduce_stock(self, product_id: RawProductId, amount: int) -> Product:
        """
        Remove amount units, atomically with respect to concurrent reductions.

        Quantity is left unchanged when the reduction fails.

        Raises:
            MalformedProductIdError, ProductNotFoundError, InsufficientStockError
        """
