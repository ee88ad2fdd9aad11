"""Update user profile command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import UserAlreadyExistsError, UserNotFoundError, ValidationError
from .....core.value_objects import UserId
from ...entities import EventPublisher, UserRepository, parse_email
from ..dto import UserDTO
from ..events import UserUpdated

logger = logging.getLogger(__name__)


@dataclass
class UpdateUserProfileRequest:
    """Request to change a user's name and/or email."""

    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass
class UpdateUserProfileResponse:
    """Response from a profile update."""

    user: UserDTO
    event: Optional[UserUpdated]


class UpdateUserProfile:
    """Command to update a user's profile.

    A request that changes nothing returns the current user and emits no
    event.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: Optional[EventPublisher] = None,
    ):
        self._user_repository = user_repository
        self._event_publisher = event_publisher

    async def execute(self, request: UpdateUserProfileRequest) -> UpdateUserProfileResponse:
        """Execute profile update.

        Raises:
            ValidationError: When the id, name or email is invalid
            UserNotFoundError: When no user has the given id
            UserAlreadyExistsError: When the new email belongs to someone else
        """
        try:
            user_id = UserId(request.user_id)
        except ValueError as e:
            raise ValidationError(str(e), details={"field": "user_id"})

        user = await self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        changed = []
        previous_email = None

        if request.email is not None:
            new_email = parse_email(request.email)
            if new_email != user.email:
                owner = await self._user_repository.find_by_email(new_email)
                if owner is not None and owner.id != user.id:
                    raise UserAlreadyExistsError(str(new_email))
                previous_email = str(user.email)
                user.change_email(new_email)
                changed.append("email")

        if request.name is not None and request.name.strip() != user.name:
            user.rename(request.name)
            changed.append("name")

        if not changed:
            return UpdateUserProfileResponse(user=UserDTO.from_entity(user), event=None)

        saved = await self._user_repository.save(user)
        event = UserUpdated(
            user_id=saved.id,
            changed_fields=tuple(changed),
            previous_email=previous_email,
        )
        if self._event_publisher is not None:
            await self._event_publisher.publish(event)

        logger.debug("Updated user %s fields=%s", saved.id, changed)
        return UpdateUserProfileResponse(user=UserDTO.from_entity(saved), event=event)
