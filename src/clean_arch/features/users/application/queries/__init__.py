"""User queries (read-side use cases)."""

from .get_user_by_email import GetUserByEmail
from .get_user_by_id import GetUserById
from .list_users import ListUsers

__all__ = [
    "GetUserByEmail",
    "GetUserById",
    "ListUsers",
]
