"""
URL configuration for product API endpoints.

Mounted under /api/. Canned routes come before the identifier route, and
every route answers with or without a trailing slash.
"""

from django.urls import path

from api.products import views


def _both_slash_forms(route, view, name):
    """Register a route with and without its trailing slash."""
    return [path(route, view, name=name), path(f"{route}/", view)]


app_name = "products"

urlpatterns = [
    *_both_slash_forms("products", views.ProductCollectionView.as_view(), "product-list"),
    *_both_slash_forms(
        "products/low-stock", views.LowStockProductsView.as_view(), "product-low-stock"
    ),
    *_both_slash_forms(
        "products/category/<str:category>",
        views.ProductsByCategoryView.as_view(),
        "product-by-category",
    ),
    *_both_slash_forms(
        "products/<str:product_id>", views.ProductDetailView.as_view(), "product-detail"
    ),
    *_both_slash_forms(
        "products/<str:product_id>/reduce-stock",
        views.ReduceStockView.as_view(),
        "product-reduce-stock",
    ),
]
