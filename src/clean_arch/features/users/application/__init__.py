"""Users application layer: use cases, DTOs and events."""

from .dto import UserDTO
from .events import UserRegistered, UserUpdated, UserDeleted
from .commands import (
    RegisterUser,
    RegisterUserRequest,
    RegisterUserResponse,
    UpdateUserProfile,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    DeleteUser,
    DeleteUserRequest,
)
from .queries import GetUserByEmail, GetUserById, ListUsers

__all__ = [
    # DTOs
    "UserDTO",

    # Events
    "UserRegistered",
    "UserUpdated",
    "UserDeleted",

    # Commands
    "RegisterUser",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "UpdateUserProfile",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "DeleteUser",
    "DeleteUserRequest",

    # Queries
    "GetUserByEmail",
    "GetUserById",
    "ListUsers",
]
