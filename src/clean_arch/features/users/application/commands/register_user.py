"""Register user command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import UserAlreadyExistsError
from ...entities import EventPublisher, User, UserRepository
from ..dto import UserDTO
from ..events import UserRegistered

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserRequest:
    """Request to register a user."""

    name: str
    email: str


@dataclass
class RegisterUserResponse:
    """Response from user registration."""

    user: UserDTO
    event: UserRegistered


class RegisterUser:
    """Command to register a new user.

    Handles ONLY the registration workflow: uniqueness check, persistence
    and event publication.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """Initialize command with protocol dependencies."""
        self._user_repository = user_repository
        self._event_publisher = event_publisher

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute user registration.

        Args:
            request: Registration request with name and email

        Returns:
            Response with the registered user's DTO and the emitted event

        Raises:
            ValidationError: When name or email is invalid
            UserAlreadyExistsError: When the email is already registered
        """
        user = User.create(name=request.name, email=request.email)

        if await self._user_repository.exists_by_email(user.email):
            logger.info("Registration rejected, email already in use: %s", user.email)
            raise UserAlreadyExistsError(str(user.email))

        saved = await self._user_repository.save(user)
        event = UserRegistered(user_id=saved.id, email=str(saved.email))

        if self._event_publisher is not None:
            await self._event_publisher.publish(event)

        logger.debug("Registered user %s", saved.id)
        return RegisterUserResponse(user=UserDTO.from_entity(saved), event=event)
