"""Delete user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import UserNotFoundError, ValidationError
from .....core.value_objects import UserId
from ...entities import EventPublisher, UserRepository
from ..events import UserDeleted

logger = logging.getLogger(__name__)


@dataclass
class DeleteUserRequest:
    """Request to delete a user."""

    user_id: str


class DeleteUser:
    """Command to delete a user."""

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self._user_repository = user_repository
        self._event_publisher = event_publisher

    async def execute(self, request: DeleteUserRequest) -> UserDeleted:
        """Delete the user and return the emitted event.

        Raises:
            ValidationError: When the id is not a UUID
            UserNotFoundError: When no user has the given id
        """
        try:
            user_id = UserId(request.user_id)
        except ValueError as e:
            raise ValidationError(str(e), details={"field": "user_id"})

        if not await self._user_repository.delete(user_id):
            raise UserNotFoundError(str(user_id))

        event = UserDeleted(user_id=user_id)
        if self._event_publisher is not None:
            await self._event_publisher.publish(event)

        logger.debug("Deleted user %s", user_id)
        return event
