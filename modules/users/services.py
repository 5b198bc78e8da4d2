"""
Users module service layer.
"""
from dataclasses import dataclass
from typing import Optional

from .models import UserModel, UserProfileModel
from .exceptions import UserNotFoundError


@dataclass(frozen=True)
class CheckoutProfile:
    """Contact fields stored on the user's account, empty when unknown."""
    email: str = ''
    full_name: str = ''
    address: str = ''


class UserService:
    """
    User business logic service.
    """

    def get_user_by_id(self, user_id: int) -> Optional[UserModel]:
        """Get user by ID."""
        try:
            return UserModel.objects.get(id=user_id, deleted_at__isnull=True)
        except UserModel.DoesNotExist:
            return None

    def get_checkout_profile(self, user_id: int) -> CheckoutProfile:
        """
        Load the stored email, name and address used to back-fill checkout fields.

        Raises:
            UserNotFoundError: If the user does not exist or was deleted
        """
        user = self.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        try:
            profile = user.profile
        except UserProfileModel.DoesNotExist:
            return CheckoutProfile(email=user.email or '')

        return CheckoutProfile(
            email=user.email or '',
            full_name=profile.full_name or '',
            address=profile.address or '',
        )
