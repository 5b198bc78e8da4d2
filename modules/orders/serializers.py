"""
Orders module serializers.
"""
from rest_framework import serializers

from .models import OrderModel


# Cart (장바구니) Serializers

class CartItemCreateSerializer(serializers.Serializer):
    """Serializer for adding an item to the cart."""
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)
    size_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    temperature_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    variant_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for a stored cart line."""
    id = serializers.IntegerField(read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    size_id = serializers.IntegerField(read_only=True, allow_null=True)
    temperature_id = serializers.IntegerField(read_only=True, allow_null=True)
    variant_id = serializers.IntegerField(read_only=True, allow_null=True)


class CartLineSerializer(serializers.Serializer):
    """Serializer for a cart line priced with current catalog data."""
    id = serializers.IntegerField(source='cart_item_id', read_only=True)
    product_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(source='product_name', read_only=True)
    base_price = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    size = serializers.CharField(source='size_name', read_only=True, allow_null=True)
    temperature = serializers.CharField(source='temperature_name', read_only=True, allow_null=True)
    variant = serializers.CharField(source='variant_name', read_only=True, allow_null=True)
    unit_price = serializers.IntegerField(source='effective_unit_price', read_only=True)
    subtotal = serializers.IntegerField(source='line_total', read_only=True)


# Checkout Serializers

class CheckoutSerializer(serializers.Serializer):
    """Checkout overrides; every field is optional and falls back to the profile."""
    email = serializers.EmailField(required=False, allow_blank=True, max_length=255)
    full_name = serializers.CharField(required=False, allow_blank=True, max_length=100)
    address = serializers.CharField(required=False, allow_blank=True)
    delivery_method = serializers.CharField(required=False, allow_blank=True, max_length=20)
    payment_method_id = serializers.IntegerField(required=False, min_value=1, default=1)


class CheckoutResultSerializer(serializers.Serializer):
    """Serializer for a freshly placed order."""
    id = serializers.IntegerField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    subtotal = serializers.IntegerField(read_only=True)
    delivery_fee = serializers.IntegerField(read_only=True)
    tax_amount = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    email = serializers.EmailField(read_only=True)
    full_name = serializers.CharField(read_only=True)
    address = serializers.CharField(source='delivery_address', read_only=True)
    delivery_method = serializers.CharField(read_only=True)
    payment_method_id = serializers.IntegerField(read_only=True)
    order_date = serializers.DateTimeField(read_only=True)


# Order History Serializers

class OrderHistorySerializer(serializers.Serializer):
    """Serializer for an order history row."""
    id = serializers.IntegerField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    order_date = serializers.DateTimeField(read_only=True)
    status = serializers.CharField(read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    total = serializers.IntegerField(read_only=True)


class OrderItemSerializer(serializers.Serializer):
    """Serializer for an order item as charged."""
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    size = serializers.CharField(source='size.name', read_only=True, allow_null=True)
    temperature = serializers.CharField(source='temperature.name', read_only=True, allow_null=True)
    variant = serializers.CharField(source='variant.name', read_only=True, allow_null=True)
    unit_price = serializers.IntegerField(read_only=True)
    total_price = serializers.IntegerField(source='line_total', read_only=True)
    is_flash_sale = serializers.BooleanField(read_only=True)


class OrderDetailSerializer(CheckoutResultSerializer):
    """Serializer for order detail with items."""
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    delivery_method_display = serializers.CharField(source='get_delivery_method_display', read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)


class OrderStatusUpdateSerializer(serializers.Serializer):
    """Serializer for an administrative status change."""
    status = serializers.ChoiceField(choices=OrderModel.Status.choices)
