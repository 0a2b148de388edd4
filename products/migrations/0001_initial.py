import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(help_text="Product display name", max_length=100)),
                ("description", models.TextField(max_length=1000)),
                ("price", models.PositiveBigIntegerField(help_text="Integral price")),
                ("quantity", models.PositiveIntegerField(default=0)),
                (
                    "category",
                    models.CharField(
                        choices=[
                            ("electronics", "Electronics"),
                            ("clothing", "Clothing"),
                            ("books", "Books"),
                            ("home", "Home"),
                            ("sports", "Sports"),
                            ("other", "Other"),
                        ],
                        max_length=20,
                    ),
                ),
                ("in_stock", models.BooleanField(default=False, editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["-created_at", "id"],
                "indexes": [
                    models.Index(fields=["name"], name="products_name_idx"),
                    models.Index(fields=["category"], name="products_category_idx"),
                    models.Index(fields=["price"], name="products_price_idx"),
                    models.Index(fields=["-created_at", "id"], name="products_newest_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(("in_stock", True), ("quantity__gt", 0)),
                            models.Q(("in_stock", False), ("quantity", 0)),
                            _connector="OR",
                        ),
                        name="products_in_stock_matches_quantity",
                    ),
                ],
            },
        ),
    ]
