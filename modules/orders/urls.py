"""
Orders module URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CheckoutView,
    OrderHistoryView,
    OrderDetailView,
    AdminOrderStatusView,
    AdminOrderDeleteView,
)

urlpatterns = [
    path('cart', CartView.as_view(), name='cart'),
    path('transactions/checkout', CheckoutView.as_view(), name='transaction-checkout'),
    path('history', OrderHistoryView.as_view(), name='order-history'),
    path('orders/<int:order_id>/detail', OrderDetailView.as_view(), name='order-detail'),

    # Admin
    path('admin/orders/<int:order_id>/status', AdminOrderStatusView.as_view(), name='admin-order-status'),
    path('admin/orders/<int:order_id>', AdminOrderDeleteView.as_view(), name='admin-order-delete'),
]
