"""
UpdateProductCommand.

Command to change some fields of an existing product.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class UpdateProductCommand:
    """Command to update a product with a partial payload."""

    product_id: str
    changes: Dict[str, Any] = field(default_factory=dict)
