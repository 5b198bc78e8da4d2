"""
Orders module service layer.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from django.conf import settings
from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import F, QuerySet
from django.utils import timezone

from modules.products.exceptions import ProductNotFoundError
from modules.products.models import ProductModel
from modules.products.services import ProductService
from modules.users.services import UserService
from shared.domain.exceptions import (
    InsufficientStockError,
    PersistenceError,
    ValidationError,
)

from .models import CartItemModel, OrderModel, OrderItemModel
from .exceptions import EmptyCartError, OrderNotFoundError, InvalidOrderStateError
from .pricing import (
    PricedLine,
    OrderTotals,
    calculate_subtotal,
    calculate_totals,
    generate_order_number,
    normalize_delivery_method,
    resolve_field,
)


logger = logging.getLogger(__name__)


def _shortage(product: ProductModel, requested: int, available: int) -> dict:
    return {
        'product_id': product.id,
        'product_name': product.name,
        'requested': requested,
        'available': available,
    }


class CartService:
    """
    Cart (장바구니) business logic service.
    """

    def __init__(self):
        self.product_service = ProductService()

    def get_cart_lines(self, user_id: int) -> List[CartItemModel]:
        """Get all cart lines of a user with their product and options joined."""
        return list(
            CartItemModel.objects.filter(user_id=user_id)
            .select_related('product', 'size', 'temperature', 'variant')
            .order_by('-created_at', '-id')
        )

    def get_priced_cart(self, user_id: int) -> Tuple[List[PricedLine], int]:
        """Price the user's cart with current catalog data, skipping unavailable products."""
        lines = [
            PricedLine.from_cart_item(item)
            for item in self.get_cart_lines(user_id)
            if item.product.is_purchasable
        ]
        return lines, calculate_subtotal(lines)

    @transaction.atomic
    def add_item(
        self,
        user_id: int,
        product_id: int,
        quantity: int = 1,
        size_id: Optional[int] = None,
        temperature_id: Optional[int] = None,
        variant_id: Optional[int] = None,
    ) -> Tuple[CartItemModel, bool]:
        """
        Add a product to the cart, merging with an identical line if one exists.

        Returns:
            Tuple of (CartItemModel, created)

        Raises:
            ValidationError: If quantity is not positive
            ProductNotFoundError: If the product is missing or inactive
            InsufficientStockError: If the merged quantity exceeds stock
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than zero", field='quantity')

        product = (
            ProductModel.objects.select_for_update()
            .filter(id=product_id, is_active=True, deleted_at__isnull=True)
            .first()
        )
        if not product:
            raise ProductNotFoundError(str(product_id))

        size = self.product_service.get_option('size', size_id)
        temperature = self.product_service.get_option('temperature', temperature_id)
        variant = self.product_service.get_option('variant', variant_id)

        existing = (
            CartItemModel.objects.select_for_update()
            .filter(
                user_id=user_id,
                product=product,
                size=size,
                temperature=temperature,
                variant=variant,
            )
            .first()
        )
        new_quantity = quantity + (existing.quantity if existing else 0)
        if new_quantity > product.stock:
            raise InsufficientStockError([_shortage(product, new_quantity, product.stock)])

        if existing:
            existing.quantity = new_quantity
            existing.save(update_fields=['quantity', 'updated_at'])
            return existing, False

        item = CartItemModel.objects.create(
            user_id=user_id,
            product=product,
            quantity=quantity,
            size=size,
            temperature=temperature,
            variant=variant,
        )
        return item, True

    def clear_cart(self, user_id: int) -> int:
        """Delete every cart line of a user. Returns the number of lines removed."""
        deleted, _ = CartItemModel.objects.filter(user_id=user_id).delete()
        return deleted


@dataclass(frozen=True)
class CheckoutRequest:
    """Optional checkout overrides; blanks fall back to the user's profile."""
    email: str = ''
    full_name: str = ''
    address: str = ''
    delivery_method: str = ''
    payment_method_id: int = 1


@dataclass(frozen=True)
class DeliveryContact:
    email: str
    full_name: str
    address: str


class CheckoutService:
    """
    Turns a user's cart into an order in a single transaction.

    Cart and product rows are locked up front, so two checkouts racing for
    the same stock serialize on the database and the second one sees the
    decremented quantity.
    """

    def __init__(self):
        self.user_service = UserService()
        self.cart_service = CartService()

    def checkout(self, user_id: int, request: CheckoutRequest) -> OrderModel:
        """
        Place an order from the user's cart.

        Args:
            user_id: Authenticated user ID
            request: Delivery/payment overrides

        Returns:
            The created OrderModel with status pending

        Raises:
            EmptyCartError: If the cart has no lines
            InsufficientStockError: If any product cannot cover its quantity
            ValidationError: If delivery fields are missing or the method is invalid
            PersistenceError: If the database fails; nothing is written
        """
        try:
            with transaction.atomic():
                order = self._place_order(user_id, request)
        except DatabaseError as e:
            logger.error(f"Checkout for user {user_id} rolled back: storage failure", exc_info=True)
            raise PersistenceError("Failed to create order, please try again", operation='checkout') from e

        logger.info(
            f"Order {order.order_number} placed by user {user_id}: "
            f"subtotal={order.subtotal} delivery_fee={order.delivery_fee} total={order.total}"
        )
        return order

    def _place_order(self, user_id: int, request: CheckoutRequest) -> OrderModel:
        items = self._lock_cart_lines(user_id)
        if not items:
            logger.warning(f"Checkout rejected for user {user_id}: cart is empty")
            raise EmptyCartError()

        self._check_stock(user_id, items)

        contact = self._resolve_contact(user_id, request)
        delivery_method = normalize_delivery_method(request.delivery_method)

        lines = [PricedLine.from_cart_item(item) for item in items]
        self._check_prices(lines)
        totals = calculate_totals(lines, delivery_method, settings.ORDER_TAX_RATE)

        order = self._create_order(user_id, contact, delivery_method, request.payment_method_id, totals)

        OrderItemModel.objects.bulk_create([
            OrderItemModel(
                order=order,
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity,
                size_id=line.size_id,
                temperature_id=line.temperature_id,
                variant_id=line.variant_id,
                unit_price=line.effective_unit_price,
                is_flash_sale=line.is_flash_sale,
            )
            for line in lines
        ])

        for line in lines:
            self._decrement_stock(line)

        self.cart_service.clear_cart(user_id)
        return order

    def _lock_cart_lines(self, user_id: int) -> List[CartItemModel]:
        # Lock only cart and product rows; option tables sit on the nullable side of outer joins.
        return list(
            CartItemModel.objects.select_for_update(of=('self', 'product'))
            .select_related('product', 'size', 'temperature', 'variant')
            .filter(user_id=user_id)
            .order_by('product_id', 'id')
        )

    def _check_stock(self, user_id: int, items: List[CartItemModel]) -> None:
        requested = {}
        for item in items:
            product, quantity = requested.get(item.product_id, (item.product, 0))
            requested[item.product_id] = (product, quantity + item.quantity)

        shortages = []
        for product, quantity in requested.values():
            available = product.stock if product.is_purchasable else 0
            if quantity > available:
                shortages.append(_shortage(product, quantity, available))

        if shortages:
            logger.warning(
                f"Checkout rejected for user {user_id}: insufficient stock for "
                f"{[s['product_id'] for s in shortages]}"
            )
            raise InsufficientStockError(shortages)

    def _check_prices(self, lines: List[PricedLine]) -> None:
        negative = [line for line in lines if line.effective_unit_price < 0]
        if negative:
            names = ', '.join(line.product_name for line in negative)
            logger.warning(f"Checkout rejected: negative unit price for {names}")
            raise ValidationError(f"Price options make the unit price negative for {names}", field='price')

    def _resolve_contact(self, user_id: int, request: CheckoutRequest) -> DeliveryContact:
        email = resolve_field(request.email)
        full_name = resolve_field(request.full_name)
        address = resolve_field(request.address)

        if not (email and full_name and address):
            profile = self.user_service.get_checkout_profile(user_id)
            email = resolve_field(email, profile.email)
            full_name = resolve_field(full_name, profile.full_name)
            address = resolve_field(address, profile.address)

        missing = [
            name for name, value in (('email', email), ('full_name', full_name), ('address', address))
            if not value
        ]
        if missing:
            raise ValidationError(
                f"Email, full name, and address are required (missing: {', '.join(missing)})",
                field=','.join(missing),
            )
        return DeliveryContact(email=email, full_name=full_name, address=address)

    def _create_order(
        self,
        user_id: int,
        contact: DeliveryContact,
        delivery_method: str,
        payment_method_id: int,
        totals: OrderTotals,
    ) -> OrderModel:
        max_attempts = settings.ORDER_NUMBER_MAX_ATTEMPTS
        for attempt in range(1, max_attempts + 1):
            order_number = generate_order_number()
            try:
                # Savepoint so a duplicate order number does not poison the outer transaction.
                with transaction.atomic():
                    return OrderModel.objects.create(
                        order_number=order_number,
                        user_id=user_id,
                        status=OrderModel.Status.PENDING,
                        email=contact.email,
                        full_name=contact.full_name,
                        delivery_address=contact.address,
                        delivery_method=delivery_method,
                        payment_method_id=payment_method_id or 1,
                        subtotal=totals.subtotal,
                        delivery_fee=totals.delivery_fee,
                        tax_amount=totals.tax_amount,
                        total=totals.total,
                    )
            except IntegrityError:
                if not OrderModel.objects.filter(order_number=order_number).exists():
                    raise
                logger.warning(f"Order number {order_number} already taken (attempt {attempt}/{max_attempts})")

        raise PersistenceError("Could not allocate a unique order number", operation='checkout')

    def _decrement_stock(self, line: PricedLine) -> None:
        updated = ProductModel.objects.filter(
            id=line.product_id,
            stock__gte=line.quantity,
        ).update(stock=F('stock') - line.quantity, updated_at=timezone.now())

        if updated != 1:
            product = ProductModel.objects.get(id=line.product_id)
            raise InsufficientStockError([_shortage(product, line.quantity, product.stock)])


class OrderService:
    """
    Order history and lifecycle service.
    """

    def get_user_orders(self, user_id: int, status: Optional[str] = None) -> QuerySet:
        """Get a user's orders, newest first, optionally filtered by status."""
        queryset = OrderModel.objects.filter(user_id=user_id)
        if status:
            if status not in OrderModel.Status.values:
                raise ValidationError(f"Unknown order status '{status}'", field='status')
            queryset = queryset.filter(status=status)
        return queryset.order_by('-order_date', '-id')

    def get_user_order(self, user_id: int, order_id: int) -> OrderModel:
        """Get one of the user's orders with its items; other users' orders are not found."""
        try:
            return (
                OrderModel.objects.prefetch_related(
                    'items__size', 'items__temperature', 'items__variant'
                ).get(id=order_id, user_id=user_id)
            )
        except OrderModel.DoesNotExist:
            raise OrderNotFoundError(str(order_id))

    @transaction.atomic
    def change_status(self, order_id: int, new_status: str) -> OrderModel:
        """
        Move an order along its lifecycle.

        Raises:
            OrderNotFoundError: If the order does not exist
            ValidationError: If new_status is not a known status
            InvalidOrderStateError: If the transition is not allowed
        """
        if new_status not in OrderModel.Status.values:
            raise ValidationError(f"Unknown order status '{new_status}'", field='status')

        try:
            order = OrderModel.objects.select_for_update().get(id=order_id)
        except OrderModel.DoesNotExist:
            raise OrderNotFoundError(str(order_id))

        if not order.can_transition_to(new_status):
            raise InvalidOrderStateError(new_status, order.status)

        previous = order.status
        order.status = new_status
        order.save(update_fields=['status', 'updated_at'])
        logger.info(f"Order {order.order_number} status changed: {previous} -> {new_status}")
        return order

    @transaction.atomic
    def delete_order(self, order_id: int) -> None:
        """Delete an order together with its items."""
        try:
            order = OrderModel.objects.select_for_update().get(id=order_id)
        except OrderModel.DoesNotExist:
            raise OrderNotFoundError(str(order_id))

        order_number = order.order_number
        order.delete()
        logger.info(f"Order {order_number} deleted")
