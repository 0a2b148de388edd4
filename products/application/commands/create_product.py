"""
CreateProductCommand.

Command to create a catalog product.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class CreateProductCommand:
    """
    Command to create a product.

    The payload is passed as received; validation happens on the write path.
    """

    payload: Dict[str, Any] = field(default_factory=dict)
