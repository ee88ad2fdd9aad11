"""List users query."""

from typing import List

from ...entities import UserRepository
from ..dto import UserDTO


class ListUsers:
    """Query all users ordered by creation time, then email."""

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self) -> List[UserDTO]:
        users = await self._user_repository.find_all()
        ordered = sorted(users, key=lambda user: (user.created_at, str(user.email)))
        return [UserDTO.from_entity(user) for user in ordered]
