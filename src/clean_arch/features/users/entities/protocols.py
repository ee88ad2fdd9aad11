"""Protocol interfaces for the users feature.

These are the boundary contracts owned by the inner layers. Adapters in
outer layers implement them; use cases depend only on these.
"""

from abc import abstractmethod
from typing import Any, List, Optional, Protocol, runtime_checkable

from ....core.value_objects import Email, UserId
from .user import User


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for user persistence operations."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save user and return the stored user."""
        ...

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find user by ID."""
        ...

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find user by email."""
        ...

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user."""
        ...

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete user, returning False if nothing was deleted."""
        ...

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check if a user with this email exists."""
        ...


@runtime_checkable
class EventPublisher(Protocol):
    """Protocol for publishing domain events."""

    @abstractmethod
    async def publish(self, event: Any) -> None:
        """Publish a domain event."""
        ...
