"""
Stock invariant rules.

inStock is always derived from quantity; a client cannot set it.
Low stock has two thresholds that intentionally differ:
- read-time classification: 0 < quantity < LOW_STOCK_CEILING
- canned low-stock query:   0 < quantity <= LOW_STOCK_QUERY_CEILING
"""

from core.domain.exceptions import InsufficientStockError

LOW_STOCK_CEILING = 10
LOW_STOCK_QUERY_CEILING = 10


def derive_in_stock(quantity: int) -> bool:
    """Return the stock flag for a quantity."""
    return quantity > 0


def is_low_stock(quantity: int) -> bool:
    """Read-time low-stock classification (exclusive of the ceiling)."""
    return 0 < quantity < LOW_STOCK_CEILING


def reduced_quantity(quantity: int, amount: int) -> int:
    """
    Compute the quantity left after removing amount units.

    Args:
        quantity: Current quantity
        amount: Units to remove

    Returns:
        Remaining quantity

    Raises:
        ValueError: If amount is not a positive integer
        InsufficientStockError: If amount exceeds quantity
    """
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
        raise ValueError("Amount must be a positive integer")
    if amount > quantity:
        raise InsufficientStockError(
            f"Insufficient stock: requested {amount}, available {quantity}",
            available=quantity,
            requested=amount,
        )
    return quantity - amount
