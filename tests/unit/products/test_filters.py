"""
Unit tests for the product filter builder.
"""
import pytest

from products.domain.filters import (
    MAX_PAGE_LIMIT,
    MAX_SKIP,
    Pagination,
    ProductCriteria,
    ProductFilter,
    build_filter,
    in_stock_by_category,
    low_stock,
    parse_bool,
    parse_price,
    parse_query_params,
)


class TestParseQueryParams:
    """Tests for parse_query_params."""

    def test_defaults(self):
        """Test no parameters means no constraints and the default page."""
        criteria, pagination = parse_query_params({})
        assert criteria == ProductCriteria()
        assert pagination == Pagination(limit=10, skip=0)

    def test_all_parameters(self):
        """Test every parameter is coerced."""
        criteria, pagination = parse_query_params(
            {
                "category": "books",
                "minPrice": "10",
                "maxPrice": "99.5",
                "inStock": "true",
                "limit": "5",
                "skip": "20",
            }
        )
        assert criteria == ProductCriteria(
            category="books", min_price=10.0, max_price=99.5, in_stock=True
        )
        assert pagination == Pagination(limit=5, skip=20)

    def test_unparsable_values_are_absent(self):
        """Test garbage input imposes no constraint instead of becoming zero."""
        criteria, pagination = parse_query_params(
            {"minPrice": "abc", "maxPrice": "", "inStock": "maybe", "limit": "x", "skip": "-3"}
        )
        assert criteria == ProductCriteria()
        assert pagination == Pagination(limit=10, skip=0)

    def test_empty_category_is_absent(self):
        """Test an empty category string does not filter."""
        criteria, _ = parse_query_params({"category": ""})
        assert criteria.category is None

    @pytest.mark.parametrize("raw", ["0", "-1", "2.5"])
    def test_invalid_limit_falls_back_to_default(self, raw):
        """Test zero, negative and fractional limits use the default page size."""
        _, pagination = parse_query_params({"limit": raw})
        assert pagination.limit == 10

    def test_limit_is_capped(self):
        """Test the page size is bounded."""
        _, pagination = parse_query_params({"limit": "5000"}, max_limit=100)
        assert pagination.limit == 100

    @pytest.mark.parametrize("raw", ["99999999999999999999999", "9" * 5000])
    def test_huge_values_are_clamped(self, raw):
        """Test oversized offsets and page sizes stay within the storable range."""
        _, pagination = parse_query_params({"limit": raw, "skip": raw})
        assert pagination.limit == MAX_PAGE_LIMIT
        assert pagination.skip == MAX_SKIP

    def test_leading_zeros(self):
        """Test zero-padded numbers parse normally."""
        _, pagination = parse_query_params({"limit": "005", "skip": "000"})
        assert pagination == Pagination(limit=5, skip=0)

    def test_configured_default_limit(self):
        """Test the default page size is configurable."""
        _, pagination = parse_query_params({}, default_limit=25)
        assert pagination.limit == 25

    def test_min_price_above_max_price_is_kept(self):
        """Test inverted price bounds are passed through and match nothing."""
        criteria, _ = parse_query_params({"minPrice": "50", "maxPrice": "10"})
        assert criteria.min_price == 50.0
        assert criteria.max_price == 10.0


class TestParsers:
    """Tests for individual coercion helpers."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("false", False), ("True", None), ("1", None), ("", None), (None, None)],
    )
    def test_parse_bool_only_literals(self, raw, expected):
        """Test only the exact strings 'true' and 'false' count."""
        assert parse_bool(raw) is expected

    @pytest.mark.parametrize(
        "raw,expected", [("0", 0.0), ("12.75", 12.75), ("nan", None), ("ten", None), (None, None)]
    )
    def test_parse_price(self, raw, expected):
        """Test price bounds coercion."""
        assert parse_price(raw) == expected


class TestPredicates:
    """Tests for ProductFilter and the canned predicates."""

    def test_build_filter_copies_criteria(self):
        """Test criteria map onto the predicate."""
        criteria = ProductCriteria(category="home", min_price=1, max_price=9, in_stock=False)
        assert build_filter(criteria) == ProductFilter(
            category="home", min_price=1, max_price=9, in_stock=False
        )

    def test_empty_filter_matches_everything(self, product_factory):
        """Test an unconstrained predicate."""
        assert ProductFilter().matches(product_factory(quantity=0))

    def test_price_bounds_are_inclusive(self, product_factory):
        """Test min and max price include the bound."""
        product = product_factory(price=80)
        assert ProductFilter(min_price=80, max_price=80).matches(product)
        assert not ProductFilter(min_price=81).matches(product)
        assert not ProductFilter(max_price=79).matches(product)

    def test_inverted_bounds_match_nothing(self, product_factory):
        """Test min greater than max yields no match."""
        assert not ProductFilter(min_price=50, max_price=10).matches(product_factory(price=30))

    def test_in_stock_by_category(self, product_factory):
        """Test the canned category predicate requires stock."""
        predicate = in_stock_by_category("sports")
        assert predicate.matches(product_factory(quantity=1))
        assert not predicate.matches(product_factory(quantity=0))
        assert not predicate.matches(product_factory(category="books"))

    @pytest.mark.parametrize(
        "quantity,expected", [(0, False), (1, True), (10, True), (11, False)]
    )
    def test_low_stock_query_includes_ceiling(self, product_factory, quantity, expected):
        """Test the canned low-stock predicate is 0 < quantity <= 10."""
        assert low_stock().matches(product_factory(quantity=quantity)) is expected
