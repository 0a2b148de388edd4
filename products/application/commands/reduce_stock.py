"""
ReduceStockCommand.

Command to remove units from a product's stock.
"""

from dataclasses import dataclass


@dataclass
class ReduceStockCommand:
    """Command to reduce a product's quantity by amount."""

    product_id: str
    amount: int
