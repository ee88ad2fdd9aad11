"""Get user by ID query."""

from .....core.exceptions import UserNotFoundError, ValidationError
from .....core.value_objects import UserId
from ...entities import UserRepository
from ..dto import UserDTO


class GetUserById:
    """Query a single user by ID."""

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, user_id: str) -> UserDTO:
        """Return the user's DTO.

        Raises:
            ValidationError: When the id is not a UUID
            UserNotFoundError: When no user has the given id
        """
        try:
            identifier = UserId(user_id)
        except ValueError as e:
            raise ValidationError(str(e), details={"field": "user_id"})

        user = await self._user_repository.find_by_id(identifier)
        if user is None:
            raise UserNotFoundError(str(identifier))
        return UserDTO.from_entity(user)
