"""
Order domain exceptions.
"""
from shared.domain.exceptions import DomainException, EntityNotFoundError, InvalidOperationError


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: str):
        super().__init__(entity_name="Order", entity_id=order_id, code="ORDER_NOT_FOUND")


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cart is empty",
            code="EMPTY_CART"
        )


class InvalidOrderStateError(InvalidOperationError):
    """Raised when a status change is not allowed from the current state."""

    def __init__(self, target_state: str, current_state: str):
        super().__init__(
            message=f"Cannot change order status from '{current_state}' to '{target_state}'",
            operation=f"transition to {target_state}",
            state=current_state,
        )
