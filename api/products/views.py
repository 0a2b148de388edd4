"""
Product API views.

These endpoints let clients:
- List and filter the catalog, and run the canned low-stock / category queries
- Fetch, create, update and delete products
- Reduce a product's stock
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.products.serializers import (
    ErrorResponseSerializer,
    ProductListResponseSerializer,
    ProductPayloadSerializer,
    ProductResponseSerializer,
    ProductSerializer,
    ReduceStockRequestSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from products.application.commands.create_product import CreateProductCommand
from products.application.commands.delete_product import DeleteProductCommand
from products.application.commands.reduce_stock import ReduceStockCommand
from products.application.commands.update_product import UpdateProductCommand
from products.application.dto.product_dto import ProductListDTO
from products.application.handlers.product_command_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    ReduceStockHandler,
    UpdateProductHandler,
)
from products.application.handlers.product_query_handlers import (
    GetProductHandler,
    ListLowStockProductsHandler,
    ListProductsByCategoryHandler,
    ListProductsHandler,
)
from products.application.queries.get_product import GetProductQuery
from products.application.queries.list_low_stock_products import ListLowStockProductsQuery
from products.application.queries.list_products import ListProductsQuery
from products.application.queries.list_products_by_category import (
    ListProductsByCategoryQuery,
)
from products.domain.filters import parse_query_params
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()

tracer = get_tracer(__name__)

ERROR_RESPONSES = {
    400: ErrorResponseSerializer,
    404: ErrorResponseSerializer,
    500: ErrorResponseSerializer,
}


def _list_body(result: ProductListDTO) -> dict:
    return {
        "success": True,
        "count": result.count,
        "data": ProductSerializer(result.items, many=True).data,
    }


class ProductCollectionView(APIView):
    """View for listing and creating products."""

    @extend_schema(
        operation_id="list_products",
        summary="List Products",
        description=(
            "List products newest first. Absent or unparsable filters impose no "
            "constraint; inStock only honours the literals 'true' and 'false'."
        ),
        tags=["Products"],
        parameters=[
            OpenApiParameter(name="category", type=str, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="minPrice", type=float, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="maxPrice", type=float, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="inStock", type=str, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="limit", type=int, location=OpenApiParameter.QUERY),
            OpenApiParameter(name="skip", type=int, location=OpenApiParameter.QUERY),
        ],
        responses={200: ProductListResponseSerializer, 500: ErrorResponseSerializer},
    )
    def get(self, request: Request) -> Response:
        """List products with optional filters and pagination."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        with tracer.start_as_current_span("list_products") as span:
            span.set_attribute("operation", "list_products")

            criteria, pagination = parse_query_params(
                request.query_params,
                default_limit=settings.CATALOG["DEFAULT_PAGE_LIMIT"],
                max_limit=settings.CATALOG["MAX_PAGE_LIMIT"],
            )
            if criteria.category is not None:
                span.set_attribute("filter.category", criteria.category)
            if criteria.in_stock is not None:
                span.set_attribute("filter.in_stock", criteria.in_stock)
            span.set_attribute("pagination.limit", pagination.limit)
            span.set_attribute("pagination.skip", pagination.skip)

            handler = ListProductsHandler(product_repository=_product_repo)
            result = await handler.handle(
                ListProductsQuery(criteria=criteria, pagination=pagination)
            )

            span.set_attribute("products.count", result.count)
            span.set_attribute("products.total", result.total)
            span.set_status(Status(StatusCode.OK))

            body = _list_body(result)
            body["total"] = result.total
            body["pagination"] = {"limit": result.limit, "skip": result.skip}
            return Response(body, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description=(
            "Create a product. inStock is derived from quantity; any client value "
            "is ignored. All field violations are reported together."
        ),
        tags=["Products"],
        request=ProductPayloadSerializer,
        responses={201: ProductResponseSerializer, **ERROR_RESPONSES},
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("create_product") as span:
            span.set_attribute("operation", "create_product")

            handler = CreateProductHandler(product_repository=_product_repo)
            result = await handler.handle(CreateProductCommand(payload=request.data))

            span.set_attribute("product.id", str(result.id))
            span.set_attribute("product.category", result.category)
            span.set_status(Status(StatusCode.OK))

            return Response(
                {
                    "success": True,
                    "message": "Product created successfully",
                    "data": ProductSerializer(result).data,
                },
                status=status.HTTP_201_CREATED,
            )


class ProductDetailView(APIView):
    """View for fetching, updating and deleting one product."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        tags=["Products"],
        responses={200: ProductResponseSerializer, **ERROR_RESPONSES},
    )
    def get(self, request: Request, product_id: str) -> Response:
        """Fetch a product by identifier."""
        return async_to_sync(self._handle_get_product)(request, product_id)

    async def _handle_get_product(self, request: Request, product_id: str) -> Response:
        """Async handler for get product."""
        with tracer.start_as_current_span("get_product") as span:
            span.set_attribute("operation", "get_product")
            span.set_attribute("product.id", product_id)

            handler = GetProductHandler(product_repository=_product_repo)
            result = await handler.handle(GetProductQuery(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return Response(
                {"success": True, "data": ProductSerializer(result).data},
                status=status.HTTP_200_OK,
            )

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description=(
            "Change some fields of a product. Only supplied fields are validated; "
            "inStock is re-derived from the resulting quantity."
        ),
        tags=["Products"],
        request=ProductPayloadSerializer(partial=True),
        responses={200: ProductResponseSerializer, **ERROR_RESPONSES},
    )
    def put(self, request: Request, product_id: str) -> Response:
        """Update a product."""
        return async_to_sync(self._handle_update_product)(request, product_id)

    async def _handle_update_product(self, request: Request, product_id: str) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("operation", "update_product")
            span.set_attribute("product.id", product_id)

            handler = UpdateProductHandler(product_repository=_product_repo)
            result = await handler.handle(
                UpdateProductCommand(product_id=product_id, changes=request.data)
            )

            span.set_status(Status(StatusCode.OK))
            return Response(
                {
                    "success": True,
                    "message": "Product updated successfully",
                    "data": ProductSerializer(result).data,
                },
                status=status.HTTP_200_OK,
            )

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        tags=["Products"],
        responses={
            200: OpenApiResponse(description="Product deleted successfully"),
            **ERROR_RESPONSES,
        },
    )
    def delete(self, request: Request, product_id: str) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request, product_id)

    async def _handle_delete_product(self, request: Request, product_id: str) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("operation", "delete_product")
            span.set_attribute("product.id", product_id)

            handler = DeleteProductHandler(product_repository=_product_repo)
            await handler.handle(DeleteProductCommand(product_id=product_id))

            span.set_status(Status(StatusCode.OK))
            return Response(
                {"success": True, "message": "Product deleted successfully"},
                status=status.HTTP_200_OK,
            )


class LowStockProductsView(APIView):
    """View for the canned low-stock query."""

    @extend_schema(
        operation_id="list_low_stock_products",
        summary="List Low Stock Products",
        description="Products with 0 < quantity <= 10.",
        tags=["Products"],
        responses={200: ProductListResponseSerializer, 500: ErrorResponseSerializer},
    )
    def get(self, request: Request) -> Response:
        """List low stock products."""
        return async_to_sync(self._handle_low_stock)(request)

    async def _handle_low_stock(self, request: Request) -> Response:
        """Async handler for low stock products."""
        with tracer.start_as_current_span("list_low_stock_products") as span:
            span.set_attribute("operation", "list_low_stock_products")

            handler = ListLowStockProductsHandler(product_repository=_product_repo)
            result = await handler.handle(ListLowStockProductsQuery())

            span.set_attribute("products.count", result.count)
            span.set_status(Status(StatusCode.OK))
            return Response(_list_body(result), status=status.HTTP_200_OK)


class ProductsByCategoryView(APIView):
    """View for the canned in-stock-by-category query."""

    @extend_schema(
        operation_id="list_products_by_category",
        summary="List In-Stock Products By Category",
        description="In-stock products of one category. Unknown categories match nothing.",
        tags=["Products"],
        responses={200: ProductListResponseSerializer, 500: ErrorResponseSerializer},
    )
    def get(self, request: Request, category: str) -> Response:
        """List in-stock products of a category."""
        return async_to_sync(self._handle_by_category)(request, category)

    async def _handle_by_category(self, request: Request, category: str) -> Response:
        """Async handler for products by category."""
        with tracer.start_as_current_span("list_products_by_category") as span:
            span.set_attribute("operation", "list_products_by_category")
            span.set_attribute("filter.category", category)

            handler = ListProductsByCategoryHandler(product_repository=_product_repo)
            result = await handler.handle(ListProductsByCategoryQuery(category=category))

            span.set_attribute("products.count", result.count)
            span.set_status(Status(StatusCode.OK))
            return Response(_list_body(result), status=status.HTTP_200_OK)


class ReduceStockView(APIView):
    """View for reducing a product's stock."""

    @extend_schema(
        operation_id="reduce_stock",
        summary="Reduce Stock",
        description=(
            "Remove units from a product's quantity. Fails without changing the "
            "quantity when the amount exceeds the available stock."
        ),
        tags=["Products"],
        request=ReduceStockRequestSerializer,
        responses={
            200: ProductResponseSerializer,
            409: ErrorResponseSerializer,
            **ERROR_RESPONSES,
        },
    )
    def post(self, request: Request, product_id: str) -> Response:
        """Reduce a product's stock."""
        return async_to_sync(self._handle_reduce_stock)(request, product_id)

    async def _handle_reduce_stock(self, request: Request, product_id: str) -> Response:
        """Async handler for reduce stock."""
        with tracer.start_as_current_span("reduce_stock") as span:
            span.set_attribute("operation", "reduce_stock")
            span.set_attribute("product.id", product_id)

            serializer = ReduceStockRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                serializer.is_valid(raise_exception=True)

            amount = serializer.validated_data["amount"]
            span.set_attribute("amount", amount)

            handler = ReduceStockHandler(product_repository=_product_repo)
            result = await handler.handle(
                ReduceStockCommand(product_id=product_id, amount=amount)
            )

            span.set_attribute("quantity", result.quantity)
            span.set_status(Status(StatusCode.OK))
            return Response(
                {
                    "success": True,
                    "message": "Stock reduced successfully",
                    "data": ProductSerializer(result).data,
                },
                status=status.HTTP_200_OK,
            )
