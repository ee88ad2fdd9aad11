"""User service facade.

Bundles the user use cases that share one repository and publisher so
callers receive a single object instead of six.
"""

from typing import Optional

from ..application import (
    DeleteUser,
    GetUserByEmail,
    GetUserById,
    ListUsers,
    RegisterUser,
    UpdateUserProfile,
)
from ..entities import EventPublisher, UserRepository


class UserService:
    """Facade over the user commands and queries."""

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """Initialize every use case with the same collaborators."""
        self.user_repository = user_repository
        self.event_publisher = event_publisher

        # Commands
        self.register_user = RegisterUser(user_repository, event_publisher)
        self.update_user_profile = UpdateUserProfile(user_repository, event_publisher)
        self.delete_user = DeleteUser(user_repository, event_publisher)

        # Queries
        self.get_user_by_email = GetUserByEmail(user_repository)
        self.get_user_by_id = GetUserById(user_repository)
        self.list_users = ListUsers(user_repository)
