"""
Value objects for the domain.

Value objects are immutable objects that are defined by their attributes
rather than their identity. They have no identity and are compared by value.
"""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Union

from core.domain.exceptions import MalformedProductIdError


class Category(Enum):
    """Product category value object. The set is closed."""

    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"
    SPORTS = "sports"
    OTHER = "other"

    def __str__(self) -> str:
        """Return category as string."""
        return self.value

    @classmethod
    def values(cls):
        """Return the allowed category values in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def is_valid(cls, value) -> bool:
        """Check whether a raw value names a category."""
        return isinstance(value, str) and value in cls.values()


@dataclass(frozen=True)
class ProductId:
    """Product identifier value object."""

    value: uuid.UUID

    @classmethod
    def parse(cls, raw: Union[str, uuid.UUID]) -> "ProductId":
        """
        Parse a raw identifier.

        Args:
            raw: UUID or its string form

        Returns:
            ProductId instance

        Raises:
            MalformedProductIdError: If raw is not a valid UUID
        """
        if isinstance(raw, uuid.UUID):
            return cls(raw)
        try:
            return cls(uuid.UUID(str(raw)))
        except (TypeError, ValueError, AttributeError) as exc:
            raise MalformedProductIdError() from exc

    def __str__(self) -> str:
        """Return identifier as string."""
        return str(self.value)
