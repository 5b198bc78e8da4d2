"""
Domain exceptions.
"""
from typing import List, Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            message=f"{entity_name} with id '{entity_id}' not found",
            code=code
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class InsufficientStockError(DomainException):
    """
    Raised when one or more products cannot cover the requested quantity.

    Each shortage is a dict with ``product_id``, ``product_name``,
    ``requested`` and ``available`` keys.
    """

    def __init__(self, shortages: List[dict]):
        names = ', '.join(s['product_name'] for s in shortages)
        super().__init__(
            message=f"Insufficient stock for {names}",
            code="INSUFFICIENT_STOCK"
        )
        self.shortages = shortages

    @property
    def product_ids(self) -> List[int]:
        return [s['product_id'] for s in self.shortages]


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state


class PersistenceError(DomainException):
    """Raised when the storage layer fails and the unit of work was rolled back."""

    def __init__(self, message: str = "Failed to persist changes", operation: Optional[str] = None):
        super().__init__(message=message, code="PERSISTENCE_ERROR")
        self.operation = operation
