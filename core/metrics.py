"""
Prometheus metrics for the catalog service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Catalog metrics
products_created_total = Counter(
    "products_created_total",
    "Total products created",
    ["category"],
)

products_updated_total = Counter(
    "products_updated_total",
    "Total products updated",
)

products_deleted_total = Counter(
    "products_deleted_total",
    "Total products deleted",
)

stock_reductions_total = Counter(
    "stock_reductions_total",
    "Total stock reduction attempts",
    ["outcome"],
)
