"""
ListLowStockProductsQuery.
"""

from dataclasses import dataclass


@dataclass
class ListLowStockProductsQuery:
    """Query for every product with 0 < quantity <= the low-stock query ceiling."""
