"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ProductException(DomainException):
    """Base exception for product-related errors."""

    pass


class ProductValidationError(ProductException):
    """Raised when a product payload violates one or more field rules."""

    def __init__(self, errors: List[str], message: str = "Validation failed"):
        super().__init__(message, code="VALIDATION_FAILED")
        self.errors = list(errors)


class MalformedProductIdError(ProductException):
    """Raised when a product identifier is not syntactically valid."""

    def __init__(self, message: str = "Invalid product ID format"):
        super().__init__(message, code="INVALID_PRODUCT_ID")


class ProductNotFoundError(ProductException):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class InsufficientStockError(ProductException):
    """Raised when a stock reduction exceeds the available quantity."""

    def __init__(
        self,
        message: str = "Insufficient stock",
        available: Optional[int] = None,
        requested: Optional[int] = None,
    ):
        super().__init__(message, code="INSUFFICIENT_STOCK")
        self.available = available
        self.requested = requested


class StorageError(DomainException):
    """Raised when the storage backend fails unexpectedly."""

    def __init__(self, message: str = "Storage backend failure"):
        super().__init__(message, code="STORAGE_ERROR")
