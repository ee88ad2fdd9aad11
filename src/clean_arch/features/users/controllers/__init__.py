"""User controller adapter."""

from .models import CreateUserRequest, UpdateUserRequest
from .user_controller import UserController

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserController",
]
