"""
Orders module admin configuration.
"""
from django.contrib import admin, messages

from shared.domain.exceptions import DomainException

from .models import CartItemModel, OrderModel, OrderItemModel
from .services import OrderService


order_service = OrderService()


class OrderItemInline(admin.TabularInline):
    """Inline admin for order items."""
    model = OrderItemModel
    extra = 0
    can_delete = False
    readonly_fields = (
        'product', 'product_name', 'quantity', 'size', 'temperature', 'variant',
        'unit_price', 'is_flash_sale', 'created_at',
    )


def _transition_action(new_status: str):
    def action(modeladmin, request, queryset):
        changed = 0
        for order in queryset:
            try:
                order_service.change_status(order.id, new_status)
                changed += 1
            except DomainException as e:
                modeladmin.message_user(request, f"{order.order_number}: {e.message}", level=messages.WARNING)
        if changed:
            modeladmin.message_user(request, f"{changed} order(s) marked as {new_status}.")

    action.__name__ = f"mark_{new_status}"
    action.short_description = f"Mark selected orders as {new_status}"
    return action


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('id', 'order_number', 'user', 'status', 'delivery_method', 'total', 'order_date')
    list_filter = ('status', 'delivery_method', 'order_date')
    search_fields = ('order_number', 'user__email', 'email', 'full_name')
    ordering = ('-order_date',)
    readonly_fields = (
        'order_number', 'user', 'status', 'subtotal', 'delivery_fee', 'tax_amount', 'total',
        'order_date', 'created_at', 'updated_at',
    )
    inlines = [OrderItemInline]
    actions = [
        _transition_action(OrderModel.Status.SHIPPING.value),
        _transition_action(OrderModel.Status.DONE.value),
        _transition_action(OrderModel.Status.CANCELLED.value),
    ]


@admin.register(CartItemModel)
class CartItemAdmin(admin.ModelAdmin):
    """Admin configuration for Cart Item (장바구니) model."""
    list_display = ('id', 'user', 'product', 'quantity', 'size', 'temperature', 'variant', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('user__email', 'product__name')
    ordering = ('-created_at',)
    readonly_fields = ('created_at', 'updated_at')
