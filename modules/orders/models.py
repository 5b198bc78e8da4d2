"""
Orders module Django ORM models.
"""
from django.db import models
from django.utils import timezone


class CartItemModel(models.Model):
    """Shopping cart (장바구니) line."""

    user = models.ForeignKey(
        'users.UserModel',
        on_delete=models.CASCADE,
        related_name='cart_items',
        verbose_name='회원번호'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.CASCADE,
        related_name='cart_items',
        verbose_name='상품번호'
    )
    quantity = models.PositiveIntegerField(
        verbose_name='수량'
    )
    size = models.ForeignKey(
        'products.ProductSizeModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cart_items',
        verbose_name='사이즈'
    )
    temperature = models.ForeignKey(
        'products.ProductTemperatureModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cart_items',
        verbose_name='온도'
    )
    variant = models.ForeignKey(
        'products.ProductVariantModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cart_items',
        verbose_name='옵션'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )

    class Meta:
        db_table = 'cart_items'
        verbose_name = 'Cart Item'
        verbose_name_plural = 'Cart Items'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'product']),
        ]

    def __str__(self):
        return f"User {self.user_id} - Product {self.product_id} x {self.quantity}"


class OrderModel(models.Model):
    """Order (주문) model created by checkout."""

    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        SHIPPING = 'shipping', 'Shipping'
        DONE = 'done', 'Done'
        CANCELLED = 'cancelled', 'Cancelled'

    class DeliveryMethod(models.TextChoices):
        DINE_IN = 'dine_in', 'Dine In'
        DOOR_DELIVERY = 'door_delivery', 'Door Delivery'
        PICK_UP = 'pick_up', 'Pick Up'

    # pending -> shipping -> done, or -> cancelled before completion.
    ALLOWED_TRANSITIONS = {
        'pending': {'shipping', 'cancelled'},
        'shipping': {'done', 'cancelled'},
        'done': set(),
        'cancelled': set(),
    }

    order_number = models.CharField(
        max_length=50,
        unique=True,
        verbose_name='주문번호'
    )
    user = models.ForeignKey(
        'users.UserModel',
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='회원번호'
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
        verbose_name='주문상태'
    )
    email = models.EmailField(
        max_length=255,
        verbose_name='연락 이메일'
    )
    full_name = models.CharField(
        max_length=100,
        verbose_name='수령인'
    )
    delivery_address = models.TextField(
        verbose_name='배송지'
    )
    delivery_method = models.CharField(
        max_length=20,
        choices=DeliveryMethod.choices,
        default=DeliveryMethod.DINE_IN,
        verbose_name='수령 방법'
    )
    payment_method_id = models.PositiveIntegerField(
        default=1,
        verbose_name='결제수단'
    )
    subtotal = models.PositiveIntegerField(
        verbose_name='상품 합계'
    )
    delivery_fee = models.PositiveIntegerField(
        default=0,
        verbose_name='배송비'
    )
    tax_amount = models.PositiveIntegerField(
        default=0,
        verbose_name='세금'
    )
    total = models.PositiveIntegerField(
        verbose_name='총 결제금액'
    )
    order_date = models.DateTimeField(
        default=timezone.now,
        verbose_name='주문일시'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='수정시각'
    )

    class Meta:
        db_table = 'orders'
        verbose_name = 'Order'
        verbose_name_plural = 'Orders'
        ordering = ['-order_date', '-id']
        indexes = [
            models.Index(fields=['user', 'order_date']),
        ]

    def __str__(self):
        return self.order_number

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether the lifecycle allows moving to new_status."""
        return str(new_status) in self.ALLOWED_TRANSITIONS.get(str(self.status), set())


class OrderItemModel(models.Model):
    """Order item (주문 상품): the price charged at checkout, frozen."""

    order = models.ForeignKey(
        OrderModel,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='주문번호'
    )
    product = models.ForeignKey(
        'products.ProductModel',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name='상품번호'
    )
    product_name = models.CharField(
        max_length=200,
        verbose_name='주문 당시 상품명'
    )
    quantity = models.PositiveIntegerField(
        verbose_name='수량'
    )
    size = models.ForeignKey(
        'products.ProductSizeModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_items',
        verbose_name='사이즈'
    )
    temperature = models.ForeignKey(
        'products.ProductTemperatureModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_items',
        verbose_name='온도'
    )
    variant = models.ForeignKey(
        'products.ProductVariantModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order_items',
        verbose_name='옵션'
    )
    unit_price = models.PositiveIntegerField(
        verbose_name='결제 단가'
    )
    is_flash_sale = models.BooleanField(
        default=False,
        verbose_name='플래시 세일'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='생성시각'
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Order Item'
        verbose_name_plural = 'Order Items'
        ordering = ['id']

    def __str__(self):
        return f"Order {self.order_id} - {self.product_name} x {self.quantity}"

    @property
    def line_total(self) -> int:
        return self.unit_price * self.quantity
