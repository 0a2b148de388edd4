"""
ListProductsByCategoryQuery.
"""

from dataclasses import dataclass


@dataclass
class ListProductsByCategoryQuery:
    """
    Query for in-stock products of one category.

    The category is not checked against the enum; unknown values match nothing.
    """

    category: str
