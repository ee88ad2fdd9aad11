"""Users feature package.

Layered user management: entities and protocols at the centre, use cases
around them, adapters and factories on the outside.
"""

from .entities import User, UserRepository, EventPublisher, parse_email
from .application import (
    UserDTO,
    UserRegistered,
    UserUpdated,
    UserDeleted,
    RegisterUser,
    RegisterUserRequest,
    RegisterUserResponse,
    UpdateUserProfile,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    DeleteUser,
    DeleteUserRequest,
    GetUserByEmail,
    GetUserById,
    ListUsers,
)
from .repositories import InMemoryUserRepository, StubUserRepository
from .publishers import InMemoryEventPublisher, LoggingEventPublisher
from .services import UserService
from .controllers import UserController, CreateUserRequest, UpdateUserRequest
from .factories import UserServiceFactory

__all__ = [
    # Entities
    "User",
    "parse_email",

    # Protocols
    "UserRepository",
    "EventPublisher",

    # DTOs and events
    "UserDTO",
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

    # Adapters
    "InMemoryUserRepository",
    "StubUserRepository",
    "InMemoryEventPublisher",
    "LoggingEventPublisher",
    "UserController",
    "CreateUserRequest",
    "UpdateUserRequest",

    # Services and wiring
    "UserService",
    "UserServiceFactory",
]
