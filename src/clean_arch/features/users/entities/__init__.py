"""Users entities layer."""

from .user import User, NAME_MAX_LENGTH, parse_email
from .protocols import UserRepository, EventPublisher

__all__ = [
    "User",
    "NAME_MAX_LENGTH",
    "parse_email",
    "UserRepository",
    "EventPublisher",
]
