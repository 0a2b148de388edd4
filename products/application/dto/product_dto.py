"""
Product DTOs for API responses.
"""
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from products.domain.product import Product


@dataclass
class ProductDTO:
    """DTO for product information."""

    id: uuid.UUID
    name: str
    description: str
    price: int
    quantity: int
    category: str
    in_stock: bool
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        """Build a DTO from a Product entity."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            category=product.category.value,
            in_stock=product.in_stock,
            is_low_stock=product.is_low_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass
class ProductListDTO:
    """DTO for a list of products, optionally paginated."""

    items: List[ProductDTO]
    total: int
    limit: Optional[int] = None
    skip: int = 0

    @property
    def count(self) -> int:
        """Number of products in this page."""
        return len(self.items)
