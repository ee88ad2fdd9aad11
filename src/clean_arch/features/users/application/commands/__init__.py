"""User commands (write-side use cases)."""

from .register_user import RegisterUser, RegisterUserRequest, RegisterUserResponse
from .update_user_profile import (
    UpdateUserProfile,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
)
from .delete_user import DeleteUser, DeleteUserRequest

__all__ = [
    "RegisterUser",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "UpdateUserProfile",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "DeleteUser",
    "DeleteUserRequest",
]
