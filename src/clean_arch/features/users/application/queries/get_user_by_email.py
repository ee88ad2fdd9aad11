"""Get user by email query."""

import logging
from typing import Optional

from .....core.value_objects import Email
from ...entities import UserRepository
from ..dto import UserDTO

logger = logging.getLogger(__name__)


class GetUserByEmail:
    """Query a single user by email address.

    Unknown and malformed addresses both yield None; a lookup never fails
    just because the caller typed something odd.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, email: str) -> Optional[UserDTO]:
        try:
            address = Email(email)
        except ValueError:
            logger.debug("Lookup with malformed email %r", email)
            return None

        user = await self._user_repository.find_by_email(address)
        if user is None:
            return None
        return UserDTO.from_entity(user)
