"""
DeleteProductCommand.
"""

from dataclasses import dataclass


@dataclass
class DeleteProductCommand:
    """Command to delete a product."""

    product_id: str
