"""
Products module admin configuration.
"""
from django.contrib import admin

from .models import (
    ProductModel,
    ProductSizeModel,
    ProductTemperatureModel,
    ProductVariantModel,
)


@admin.register(ProductModel)
class ProductAdmin(admin.ModelAdmin):
    """Admin configuration for Product model."""
    list_display = ('id', 'name', 'price', 'stock', 'is_active', 'is_flash_sale', 'created_at')
    list_filter = ('is_active', 'is_flash_sale', 'created_at')
    search_fields = ('name',)
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')


@admin.register(ProductSizeModel, ProductTemperatureModel, ProductVariantModel)
class VariantOptionAdmin(admin.ModelAdmin):
    """Admin configuration for size / temperature / variant options."""
    list_display = ('id', 'name', 'price_adjustment', 'created_at')
    search_fields = ('name',)
    ordering = ('id',)
