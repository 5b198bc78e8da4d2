"""
Orders module configuration.
장바구니, 결제(체크아웃), 주문 내역 관련 기능.
"""
from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'modules.orders'
    verbose_name = 'Orders'
