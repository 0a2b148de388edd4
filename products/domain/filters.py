"""
Product query filters.

Loosely typed query parameters are coerced into a ProductCriteria struct and
a Pagination window; build_filter turns criteria into a ProductFilter predicate
the repository translates for its storage. All coercion policy lives here:
unparsable values are treated as absent, never as zero.
"""
import math
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from products.domain.product import Product
from products.domain.stock import LOW_STOCK_QUERY_CEILING

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100
# Offsets stay well inside a signed 64-bit LIMIT/OFFSET, even after adding a page
MAX_SKIP = 2**62

# Newest first; identifier breaks ties so pages are deterministic
ORDERING = ("-created_at", "id")

_NON_NEGATIVE_INT = re.compile(r"^\s*\d+\s*$")


@dataclass(frozen=True)
class ProductCriteria:
    """Well-typed optional list criteria. None means no constraint."""

    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    in_stock: Optional[bool] = None


@dataclass(frozen=True)
class Pagination:
    """Offset/limit page window. limit=None returns every match."""

    limit: Optional[int] = DEFAULT_PAGE_LIMIT
    skip: int = 0


@dataclass(frozen=True)
class ProductFilter:
    """Storage-independent product predicate."""

    category: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    in_stock: Optional[bool] = None
    quantity_above: Optional[int] = None
    quantity_at_most: Optional[int] = None

    def matches(self, product: Product) -> bool:
        """Evaluate the predicate against a product."""
        if self.category is not None and product.category.value != self.category:
            return False
        if self.min_price is not None and product.price < self.min_price:
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        if self.quantity_above is not None and product.quantity <= self.quantity_above:
            return False
        if self.quantity_at_most is not None and product.quantity > self.quantity_at_most:
            return False
        return True


def parse_price(raw: Optional[str]) -> Optional[float]:
    """Coerce a price bound; unparsable or non-finite input is absent."""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_bool(raw: Optional[str]) -> Optional[bool]:
    """Only the literals "true" and "false" count; anything else is absent."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def parse_non_negative_int(raw: Optional[str], default: int, maximum: int) -> int:
    """Coerce a non-negative integer, falling back to default and clamping to maximum."""
    if raw is None or not _NON_NEGATIVE_INT.match(str(raw)):
        return default
    digits = str(raw).strip().lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        return maximum
    return min(int(digits), maximum)


def parse_query_params(
    params: Mapping[str, str],
    default_limit: int = DEFAULT_PAGE_LIMIT,
    max_limit: int = MAX_PAGE_LIMIT,
) -> Tuple[ProductCriteria, Pagination]:
    """
    Coerce raw list query parameters.

    Args:
        params: category, minPrice, maxPrice, inStock, limit, skip (all optional)
        default_limit: Page size used when limit is absent, invalid or zero
        max_limit: Upper bound on the page size

    Returns:
        Tuple of (ProductCriteria, Pagination)
    """
    category = params.get("category") or None

    limit = parse_non_negative_int(params.get("limit"), default_limit, max_limit)
    if limit == 0:
        limit = default_limit

    criteria = ProductCriteria(
        category=category,
        min_price=parse_price(params.get("minPrice")),
        max_price=parse_price(params.get("maxPrice")),
        in_stock=parse_bool(params.get("inStock")),
    )
    pagination = Pagination(
        limit=min(limit, max_limit),
        skip=parse_non_negative_int(params.get("skip"), 0, MAX_SKIP),
    )
    return criteria, pagination


def build_filter(criteria: ProductCriteria) -> ProductFilter:
    """Translate list criteria into a product predicate."""
    return ProductFilter(
        category=criteria.category,
        min_price=criteria.min_price,
        max_price=criteria.max_price,
        in_stock=criteria.in_stock,
    )


def in_stock_by_category(category: str) -> ProductFilter:
    """Canned predicate: products of one category that are in stock."""
    return ProductFilter(category=category, in_stock=True)


def low_stock() -> ProductFilter:
    """Canned predicate: 0 < quantity <= LOW_STOCK_QUERY_CEILING."""
    return ProductFilter(quantity_above=0, quantity_at_most=LOW_STOCK_QUERY_CEILING)
