"""Placeholder user repository.

Satisfies the UserRepository protocol without storing anything: save
echoes its argument and every lookup reports "not found". Useful as the
default adapter while a real one is still being written, and for
exercising use cases in isolation.
"""

import logging
from typing import List, Optional

from ....core.value_objects import Email, UserId
from ..entities import User

logger = logging.getLogger(__name__)


class StubUserRepository:
    """UserRepository that persists nothing."""

    async def save(self, user: User) -> User:
        logger.debug("Stub save for user %s (not persisted)", user.id)
        return user

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return None

    async def find_by_email(self, email: Email) -> Optional[User]:
        return None

    async def find_all(self) -> List[User]:
        return []

    async def delete(self, user_id: UserId) -> bool:
        return False

    async def exists_by_email(self, email: Email) -> bool:
        return False
