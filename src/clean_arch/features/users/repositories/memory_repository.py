"""In-memory user repository.

Keeps users in a dictionary keyed by id plus an email index. Entities are
copied on the way in and on the way out, so callers mutating a returned
User cannot change stored state without calling save.
"""

import asyncio
import logging
from dataclasses import replace
from typing import Dict, List, Optional

from ....core.exceptions import UserAlreadyExistsError
from ....core.value_objects import Email, UserId
from ..entities import User

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """Dictionary-backed UserRepository."""

    def __init__(self, users: Optional[List[User]] = None):
        self._users: Dict[UserId, User] = {}
        self._email_index: Dict[Email, UserId] = {}
        self._lock = asyncio.Lock()

        for user in users or []:
            self._store(user)

    def __len__(self) -> int:
        return len(self._users)

    def _store(self, user: User) -> User:
        owner = self._email_index.get(user.email)
        if owner is not None and owner != user.id:
            raise UserAlreadyExistsError(str(user.email))

        previous = self._users.get(user.id)
        if previous is not None and previous.email != user.email:
            del self._email_index[previous.email]

        stored = replace(user)
        self._users[user.id] = stored
        self._email_index[user.email] = user.id
        return replace(stored)

    async def save(self, user: User) -> User:
        """Insert or update a user.

        Raises:
            UserAlreadyExistsError: If another user already owns the email
        """
        async with self._lock:
            saved = self._store(user)
        logger.debug("Saved user %s", user.id)
        return saved

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        async with self._lock:
            user = self._users.get(user_id)
            return replace(user) if user is not None else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        async with self._lock:
            user_id = self._email_index.get(email)
            if user_id is None:
                return None
            return replace(self._users[user_id])

    async def find_all(self) -> List[User]:
        async with self._lock:
            return [replace(user) for user in self._users.values()]

    async def delete(self, user_id: UserId) -> bool:
        async with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                return False
            del self._email_index[user.email]
        logger.debug("Deleted user %s", user_id)
        return True

    async def exists_by_email(self, email: Email) -> bool:
        async with self._lock:
            return email in self._email_index
