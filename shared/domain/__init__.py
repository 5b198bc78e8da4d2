# Shared domain module
from .exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InsufficientStockError,
    InvalidOperationError,
    PersistenceError,
)

__all__ = [
    'DomainException',
    'EntityNotFoundError',
    'ValidationError',
    'InsufficientStockError',
    'InvalidOperationError',
    'PersistenceError',
]
