"""
GetProductQuery.
"""

from dataclasses import dataclass


@dataclass
class GetProductQuery:
    """Query to fetch a single product by identifier."""

    product_id: str
