"""
Unit tests for request middleware.
"""
from django.http import HttpResponse
from django.test import RequestFactory

from core.middleware.metrics import normalize_endpoint
from core.middleware.observability import ObservabilityMiddleware


class TestNormalizeEndpoint:
    """Tests for metric label normalisation."""

    def test_uuid_segments_collapse(self):
        """Test product identifiers are replaced."""
        path = "/api/products/3f2b8a10-2c1d-4e5f-9a8b-7c6d5e4f3a2b/reduce-stock"
        assert normalize_endpoint(path) == "/api/products/{id}/reduce-stock"

    def test_category_segment_collapses(self):
        """Test category names are replaced."""
        assert normalize_endpoint("/api/products/category/books") == (
            "/api/products/category/{category}"
        )

    def test_other_paths_unchanged(self):
        """Test paths without identifiers are kept."""
        assert normalize_endpoint("/api/products/low-stock") == "/api/products/low-stock"


class TestObservabilityMiddleware:
    """Tests for ObservabilityMiddleware."""

    def test_adds_request_headers(self):
        """Test correlation, status and duration headers are set."""
        middleware = ObservabilityMiddleware(lambda request: HttpResponse(status=404))
        response = middleware(RequestFactory().get("/api/products"))

        assert response["X-Correlation-ID"]
        assert response["X-Request-Status"] == "client_error"
        assert float(response["X-Request-Duration"]) >= 0

    def test_reuses_incoming_correlation_id(self):
        """Test a caller-supplied correlation id is propagated."""
        middleware = ObservabilityMiddleware(lambda request: HttpResponse())
        request = RequestFactory().get("/health/", HTTP_X_CORRELATION_ID="abc-123")
        response = middleware(request)

        assert response["X-Correlation-ID"] == "abc-123"
        assert request.correlation_id == "abc-123"
