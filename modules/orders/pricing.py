"""
Checkout pricing and field-resolution helpers.

Everything here is pure: no queries, no writes. The checkout transaction
feeds it rows it has already locked and persists what it returns.
"""
import random
import string
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from django.utils import timezone

from modules.products.services import variant_adjustment
from shared.domain.exceptions import ValidationError

from .models import OrderModel


DeliveryMethod = OrderModel.DeliveryMethod

DEFAULT_DELIVERY_METHOD = DeliveryMethod.DINE_IN.value

DELIVERY_FEES = {
    DeliveryMethod.DINE_IN.value: 0,
    DeliveryMethod.DOOR_DELIVERY.value: 10000,
    DeliveryMethod.PICK_UP.value: 0,
}


@dataclass(frozen=True)
class PricedLine:
    """A cart line resolved against live catalog prices."""
    cart_item_id: int
    product_id: int
    product_name: str
    quantity: int
    base_price: int
    adjustment: int = 0
    size_id: Optional[int] = None
    size_name: Optional[str] = None
    temperature_id: Optional[int] = None
    temperature_name: Optional[str] = None
    variant_id: Optional[int] = None
    variant_name: Optional[str] = None
    is_flash_sale: bool = False

    @property
    def effective_unit_price(self) -> int:
        return self.base_price + self.adjustment

    @property
    def line_total(self) -> int:
        return self.effective_unit_price * self.quantity

    @classmethod
    def from_cart_item(cls, item) -> 'PricedLine':
        """Price a cart item using its joined product and option rows."""
        product = item.product
        return cls(
            cart_item_id=item.id,
            product_id=product.id,
            product_name=product.name,
            quantity=item.quantity,
            base_price=product.price,
            adjustment=variant_adjustment(item.size, item.temperature, item.variant),
            size_id=item.size_id,
            size_name=item.size.name if item.size else None,
            temperature_id=item.temperature_id,
            temperature_name=item.temperature.name if item.temperature else None,
            variant_id=item.variant_id,
            variant_name=item.variant.name if item.variant else None,
            is_flash_sale=product.is_flash_sale,
        )


@dataclass(frozen=True)
class OrderTotals:
    subtotal: int
    delivery_fee: int
    tax_amount: int
    total: int


def resolve_field(explicit: Optional[str], fallback: Optional[str] = None) -> str:
    """Explicit input wins, then the stored fallback; empty string when both are blank."""
    value = (explicit or '').strip()
    if value:
        return value
    return (fallback or '').strip()


def normalize_delivery_method(value: Optional[str]) -> str:
    """
    Normalize a delivery method and check it against the allowed values.

    Blank input falls back to dine-in.

    Raises:
        ValidationError: If the method is not one of dine_in, door_delivery, pick_up
    """
    method = (value or '').strip().lower() or DEFAULT_DELIVERY_METHOD
    if method not in DELIVERY_FEES:
        raise ValidationError(
            f"Invalid delivery method '{method}'. Allowed: {', '.join(DELIVERY_FEES)}",
            field='delivery_method',
        )
    return method


def delivery_fee_for(delivery_method: str) -> int:
    return DELIVERY_FEES[delivery_method]


def calculate_subtotal(lines: Iterable[PricedLine]) -> int:
    return sum(line.line_total for line in lines)


def calculate_tax(subtotal: int, rate: Decimal) -> int:
    """Flat-rate tax on the subtotal, rounded half up to a whole unit."""
    if not rate:
        return 0
    return int((Decimal(subtotal) * Decimal(rate)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def calculate_totals(lines: Iterable[PricedLine], delivery_method: str, tax_rate: Decimal) -> OrderTotals:
    subtotal = calculate_subtotal(lines)
    delivery_fee = delivery_fee_for(delivery_method)
    tax_amount = calculate_tax(subtotal, tax_rate)
    return OrderTotals(
        subtotal=subtotal,
        delivery_fee=delivery_fee,
        tax_amount=tax_amount,
        total=subtotal + delivery_fee + tax_amount,
    )


def generate_order_number(now: Optional[datetime] = None) -> str:
    """Generate an order number like ORD-20250114-7KQ2ZD."""
    date_part = (now or timezone.now()).strftime("%Y%m%d")
    random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
    return f"ORD-{date_part}-{random_part}"
