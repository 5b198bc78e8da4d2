"""
User domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user is not found."""

    def __init__(self, user_id: str):
        super().__init__(entity_name="User", entity_id=user_id, code="USER_NOT_FOUND")
