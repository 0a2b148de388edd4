"""
Django management command to seed the catalog with sample products.

Products are created through the repository, so every seeded record passes
the validation rules and carries a derived stock flag.
"""

import logging

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand

from core.domain.exceptions import ProductValidationError
from products.infrastructure.models import Product as ProductModel
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "Over-ear bluetooth headphones with noise cancelling",
        "price": 199,
        "quantity": 25,
        "category": "electronics",
    },
    {
        "name": "USB-C Charger",
        "description": "65W fast charger with a single USB-C port",
        "price": 39,
        "quantity": 4,
        "category": "electronics",
    },
    {
        "name": "Cotton T-Shirt",
        "description": "Plain crew neck t-shirt in organic cotton",
        "price": 15,
        "quantity": 0,
        "category": "clothing",
    },
    {
        "name": "The Pragmatic Programmer",
        "description": "Classic book on software craftsmanship",
        "price": 42,
        "quantity": 10,
        "category": "books",
    },
    {
        "name": "Ceramic Mug",
        "description": "Stoneware coffee mug, dishwasher safe",
        "price": 9,
        "quantity": 60,
        "category": "home",
    },
    {
        "name": "Yoga Mat",
        "description": "Non-slip 6mm exercise mat with carry strap",
        "price": 29,
        "quantity": 7,
        "category": "sports",
    },
    {
        "name": "Pen",
        "description": "A blue ink pen",
        "price": 2,
        "quantity": 0,
        "category": "other",
    },
]


class Command(BaseCommand):
    """Command to seed sample products."""

    help = "Create sample catalog products"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete every existing product first",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        if options["flush"]:
            deleted, _ = ProductModel.objects.all().delete()
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"Deleted {deleted} products"))

        repository = DjangoProductRepository()
        created = 0
        for payload in SAMPLE_PRODUCTS:
            try:
                product = async_to_sync(repository.create)(payload)
            except ProductValidationError as exc:
                logger.error("Sample product rejected: %s", exc.errors)
                # pylint: disable=no-member
                self.stderr.write(self.style.ERROR(f"Skipped {payload['name']}: {exc.errors}"))
                continue
            created += 1
            # pylint: disable=no-member
            self.stdout.write(f"  {product.name} ({product.category.value}) -> {product.id}")

        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS(f"Created {created} products"))
