"""
Custom exception handlers for DRF.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    InsufficientStockError,
    InvalidOperationError,
    PersistenceError,
)


logger = logging.getLogger(__name__)


def _error_body(exc: DomainException, status_code: int, **extra) -> dict:
    body = {
        'status': status_code,
        'message': exc.message,
        'code': exc.code,
    }
    body.update(extra)
    return body


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, EntityNotFoundError):
        return Response(
            _error_body(exc, 404, entity=exc.entity_name, entity_id=exc.entity_id),
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        return Response(
            _error_body(exc, 400, field=exc.field),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, InsufficientStockError):
        return Response(
            _error_body(exc, 400, products=exc.shortages),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, InvalidOperationError):
        return Response(
            _error_body(exc, 409, operation=exc.operation, state=exc.state),
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, PersistenceError):
        # The cause is already logged by the service; keep driver details out of the body.
        view = context.get('view')
        logger.error(f"Persistence failure in {view.__class__.__name__ if view else 'unknown view'}")
        return Response(
            _error_body(exc, 500),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, DomainException):
        return Response(
            _error_body(exc, 400),
            status=status.HTTP_400_BAD_REQUEST,
        )

    return response
