"""
ListProductsQuery.

Query to list products with optional criteria and pagination.
"""

from dataclasses import dataclass, field

from products.domain.filters import Pagination, ProductCriteria


@dataclass
class ListProductsQuery:
    """
    Query to list products.

    Criteria and pagination are already coerced from the raw query string.
    """

    criteria: ProductCriteria = field(default_factory=ProductCriteria)
    pagination: Pagination = field(default_factory=Pagination)
