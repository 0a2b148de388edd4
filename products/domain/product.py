"""
Product domain entity.

This is the core domain entity representing a catalog product.
It contains business logic and is independent of infrastructure.
"""
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from core.domain.value_objects import Category
from products.domain.stock import derive_in_stock, is_low_stock, reduced_quantity


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    This is an immutable value object; every change returns a new
    instance with in_stock re-derived from quantity.
    """

    id: uuid.UUID
    name: str
    description: str
    price: int
    quantity: int
    category: Category
    in_stock: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self):
        """Enforce the product invariants."""
        if self.price < 0:
            raise ValueError("Price cannot be negative")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative")
        if self.in_stock != derive_in_stock(self.quantity):
            raise ValueError("Stock flag does not match quantity")

    @property
    def is_low_stock(self) -> bool:
        """Whether the product is low on stock (computed, never stored)."""
        return is_low_stock(self.quantity)

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: int,
        category: Category,
        quantity: int = 0,
        product_id: Optional[uuid.UUID] = None,
    ) -> "Product":
        """
        Create a new Product entity.

        Args:
            name: Product name (trimmed)
            description: Product description
            price: Integral, non-negative price
            category: Product category
            quantity: Units available
            product_id: Optional UUID (generated if not provided)

        Returns:
            Product entity instance
        """
        now = datetime.now(timezone.utc)
        return cls(
            id=product_id or uuid.uuid4(),
            name=name.strip(),
            description=description,
            price=price,
            quantity=quantity,
            category=Category(category),
            in_stock=derive_in_stock(quantity),
            created_at=now,
            updated_at=now,
        )

    def apply_changes(self, **changes) -> "Product":
        """
        Create a new Product instance with the given fields changed.

        Identity and timestamps are not changeable; in_stock is re-derived.
        """
        for protected in ("id", "created_at", "updated_at", "in_stock"):
            changes.pop(protected, None)
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        if "category" in changes:
            changes["category"] = Category(changes["category"])
        quantity = changes.get("quantity", self.quantity)
        return replace(
            self,
            in_stock=derive_in_stock(quantity),
            updated_at=datetime.now(timezone.utc),
            **changes,
        )

    def reduce_stock(self, amount: int) -> "Product":
        """
        Create a new Product instance with amount units removed.

        Raises:
            InsufficientStockError: If amount exceeds the quantity
        """
        return self.apply_changes(quantity=reduced_quantity(self.quantity, amount))
