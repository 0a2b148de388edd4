"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models and is
the single place where validation and the stock invariant meet the database.
"""

import contextlib
import logging
from typing import Any, Iterator, List, Mapping, Tuple

from asgiref.sync import sync_to_async
from django.db import DatabaseError, transaction
from django.db.models import Case, F, Q, Value, When
from django.utils import timezone

from core.domain.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    ProductValidationError,
    StorageError,
)
from core.domain.value_objects import Category, ProductId
from products.domain.filters import ORDERING, Pagination, ProductFilter
from products.domain.product import Product
from products.domain.validation import PRICE_MAX, clean_product_payload, validate_product
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository, RawProductId

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """Wrap unexpected backend faults in StorageError."""
    try:
        yield
    except DatabaseError as exc:
        logger.error("Storage failure during %s", operation, exc_info=True)
        raise StorageError(f"Storage failure during {operation}") from exc


def _not_found(product_id: ProductId) -> ProductNotFoundError:
    return ProductNotFoundError(f"Product with id {product_id} not found")


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Runs validation and stock derivation on every write
    3. Serializes concurrent writes per product (row lock on update,
       conditional UPDATE on stock reduction)
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            quantity=model.quantity,
            category=Category(model.category),
            in_stock=model.in_stock,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply_to_model(self, product: Product, model: ProductModel) -> ProductModel:
        """Copy writable entity fields onto a model."""
        model.name = product.name
        model.description = product.description
        model.price = product.price
        model.quantity = product.quantity
        model.category = product.category.value
        model.in_stock = product.in_stock
        return model

    def _to_q(self, product_filter: ProductFilter) -> Q:
        """Translate a domain predicate into an ORM lookup."""
        q = Q()
        if product_filter.category is not None:
            q &= Q(category=product_filter.category)
        if product_filter.min_price is not None:
            # Bounds outside the stored price range cannot match
            if product_filter.min_price > PRICE_MAX:
                return Q(pk__in=[])
            q &= Q(price__gte=max(product_filter.min_price, 0))
        if product_filter.max_price is not None:
            if product_filter.max_price < 0:
                return Q(pk__in=[])
            q &= Q(price__lte=min(product_filter.max_price, PRICE_MAX))
        if product_filter.in_stock is not None:
            q &= Q(in_stock=product_filter.in_stock)
        if product_filter.quantity_above is not None:
            q &= Q(quantity__gt=product_filter.quantity_above)
        if product_filter.quantity_at_most is not None:
            q &= Q(quantity__lte=product_filter.quantity_at_most)
        return q

    @sync_to_async
    def create(self, payload: Mapping[str, Any]) -> Product:
        """Validate and persist a new product."""
        result = validate_product(payload)
        if not result.is_valid:
            raise ProductValidationError(result.errors)

        product = Product.create(**clean_product_payload(payload))
        with _storage_errors("create"):
            model = self._apply_to_model(product, ProductModel(id=product.id))
            model.save(force_insert=True)
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, product_id: RawProductId) -> Product:
        """Find a product by ID."""
        pid = ProductId.parse(product_id)
        with _storage_errors("find_by_id"):
            model = ProductModel.objects.filter(id=pid.value).first()
        if model is None:
            raise _not_found(pid)
        return self._to_domain(model)

    @sync_to_async
    def find(
        self, product_filter: ProductFilter, pagination: Pagination
    ) -> Tuple[List[Product], int]:
        """Find products matching a predicate, newest first."""
        with _storage_errors("find"):
            queryset = ProductModel.objects.filter(self._to_q(product_filter)).order_by(*ORDERING)
            total = queryset.count()
            if pagination.limit is None:
                page = queryset[pagination.skip :]
            else:
                page = queryset[pagination.skip : pagination.skip + pagination.limit]
            items = [self._to_domain(model) for model in page]
        return items, total

    @sync_to_async
    def update(self, product_id: RawProductId, changes: Mapping[str, Any]) -> Product:
        """Validate a partial payload and apply it under a row lock."""
        pid = ProductId.parse(product_id)
        result = validate_product(changes, partial=True)
        if not result.is_valid:
            raise ProductValidationError(result.errors)
        cleaned = clean_product_payload(changes, partial=True)

        with _storage_errors("update"), transaction.atomic():
            model = ProductModel.objects.select_for_update().filter(id=pid.value).first()
            if model is None:
                raise _not_found(pid)
            product = self._to_domain(model).apply_changes(**cleaned)
            self._apply_to_model(product, model).save()
        return self._to_domain(model)

    @sync_to_async
    def delete(self, product_id: RawProductId) -> None:
        """Delete a product."""
        pid = ProductId.parse(product_id)
        with _storage_errors("delete"):
            deleted, _ = ProductModel.objects.filter(id=pid.value).delete()
        if not deleted:
            raise _not_found(pid)

    @sync_to_async
    def reduce_stock(self, product_id: RawProductId, amount: int) -> Product:
        """
        Remove amount units with a single conditional UPDATE.

        The quantity guard and the in_stock recomputation run in the same
        statement, against the row's current values, so two concurrent
        reductions can never both pass the guard on a stale quantity.
        """
        pid = ProductId.parse(product_id)
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
            raise ProductValidationError(["Amount must be a positive integer"])

        with _storage_errors("reduce_stock"), transaction.atomic():
            updated = ProductModel.objects.filter(id=pid.value, quantity__gte=amount).update(
                quantity=F("quantity") - amount,
                in_stock=Case(
                    When(quantity__gt=amount, then=Value(True)),
                    default=Value(False),
                ),
                updated_at=timezone.now(),
            )
            model = ProductModel.objects.filter(id=pid.value).first()

        if model is None:
            raise _not_found(pid)
        if not updated:
            raise InsufficientStockError(
                f"Insufficient stock: requested {amount}, available {model.quantity}",
                available=model.quantity,
                requested=amount,
            )
        return self._to_domain(model)
