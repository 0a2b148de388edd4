"""
Serializers for Product API endpoints.
"""

from rest_framework import serializers

from core.domain.value_objects import Category


class ProductSerializer(serializers.Serializer):
    """Serializer for ProductDTO (wire names are camelCase)."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.IntegerField()
    quantity = serializers.IntegerField()
    category = serializers.CharField()
    inStock = serializers.BooleanField(source="in_stock")
    isLowStock = serializers.BooleanField(source="is_low_stock")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class ProductPayloadSerializer(serializers.Serializer):
    """
    Schema-only description of a create/update body.

    Bodies are checked by the product validation rules, not by this serializer,
    so that every violation is reported with the same messages.
    """

    name = serializers.CharField(min_length=2, max_length=100)
    description = serializers.CharField(min_length=10, max_length=1000)
    price = serializers.IntegerField(min_value=0)
    quantity = serializers.IntegerField(min_value=0, required=False, default=0)
    category = serializers.ChoiceField(choices=Category.values())


class ReduceStockRequestSerializer(serializers.Serializer):
    """Serializer for reduce stock request."""

    amount = serializers.IntegerField(min_value=1)


class PaginationSerializer(serializers.Serializer):
    """Serializer for the pagination block of a list response."""

    limit = serializers.IntegerField()
    skip = serializers.IntegerField()


class ProductResponseSerializer(serializers.Serializer):
    """Envelope for single-product responses."""

    success = serializers.BooleanField()
    message = serializers.CharField(required=False)
    data = ProductSerializer()


class ProductListResponseSerializer(serializers.Serializer):
    """Envelope for product list responses."""

    success = serializers.BooleanField()
    count = serializers.IntegerField()
    total = serializers.IntegerField(required=False)
    pagination = PaginationSerializer(required=False)
    data = ProductSerializer(many=True)


class ErrorResponseSerializer(serializers.Serializer):
    """Envelope for failures."""

    success = serializers.BooleanField()
    code = serializers.CharField()
    error = serializers.CharField()
    details = serializers.JSONField(required=False)
