"""Domain events emitted by user use cases."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

from ....core.value_objects import UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserRegistered:
    """Event fired when a new user is registered."""

    user_id: UserId
    email: str
    occurred_at: datetime = field(default_factory=_now)

    @property
    def event_type(self) -> str:
        return "user.registered"


@dataclass(frozen=True)
class UserUpdated:
    """Event fired when a user's profile changes."""

    user_id: UserId
    changed_fields: Tuple[str, ...] = ()
    previous_email: Optional[str] = None
    occurred_at: datetime = field(default_factory=_now)

    @property
    def event_type(self) -> str:
        return "user.updated"


@dataclass(frozen=True)
class UserDeleted:
    """Event fired when a user is deleted."""

    user_id: UserId
    occurred_at: datetime = field(default_factory=_now)

    @property
    def event_type(self) -> str:
        return "user.deleted"
