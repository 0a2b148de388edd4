"""
Django admin configuration for products app.
"""

from django import forms
from django.contrib import admin

from products.domain.stock import derive_in_stock, is_low_stock
from products.domain.validation import validate_product
from products.infrastructure.models import Product


class ProductAdminForm(forms.ModelForm):
    """Admin form applying the same validation rules as the API."""

    class Meta:
        model = Product
        fields = ["name", "description", "price", "quantity", "category"]

    def clean(self):
        """Run the product validation rules over the fields that passed form cleaning."""
        cleaned_data = super().clean()
        submitted = {
            field_name: cleaned_data[field_name]
            for field_name in self.Meta.fields
            if field_name in cleaned_data
        }
        result = validate_product(submitted, partial=True)
        if not result.is_valid:
            raise forms.ValidationError(result.errors)
        if "quantity" in cleaned_data:
            self.instance.in_stock = derive_in_stock(cleaned_data["quantity"])
        return cleaned_data


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    form = ProductAdminForm
    list_display = ["name", "category", "price", "quantity", "in_stock", "low_stock", "created_at"]
    list_filter = ["category", "in_stock", "created_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["id", "in_stock", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "description", "category"),
            },
        ),
        (
            "Pricing & Stock",
            {
                "fields": ("price", "quantity", "in_stock"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(boolean=True, description="Low stock")
    def low_stock(self, obj):
        """Display the read-time low-stock classification."""
        return is_low_stock(obj.quantity)

    def save_model(self, request, obj, form, change):
        """Re-derive the stock flag before saving from the admin."""
        obj.in_stock = derive_in_stock(obj.quantity)
        super().save_model(request, obj, form, change)
