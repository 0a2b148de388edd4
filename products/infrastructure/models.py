"""
Product model.
"""
import uuid

from django.db import models

from core.domain.value_objects import Category


class Product(models.Model):
    """
    Represents a catalog product.

    in_stock is written by the repository from quantity; the check
    constraint keeps the two consistent at the database level too.
    """

    CATEGORY_CHOICES = [(category.value, category.value.title()) for category in Category]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, help_text="Product display name")
    description = models.TextField(max_length=1000)
    price = models.PositiveBigIntegerField(help_text="Integral price")
    quantity = models.PositiveIntegerField(default=0)
    category = models.CharField(max_length=20, choices=CATEGORY_CHOICES)
    in_stock = models.BooleanField(default=False, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "id"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
            models.Index(fields=["category"], name="products_category_idx"),
            models.Index(fields=["price"], name="products_price_idx"),
            models.Index(fields=["-created_at", "id"], name="products_newest_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(in_stock=True, quantity__gt=0)
                    | models.Q(in_stock=False, quantity=0)
                ),
                name="products_in_stock_matches_quantity",
            ),
        ]

    def __str__(self):
        return self.name
