"""User domain entity.

This module defines the User entity and its business rules. It depends on
nothing but the shared kernel.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ....core.exceptions import ValidationError
from ....core.value_objects import Email, UserId

NAME_MAX_LENGTH = 100


def _validate_name(name: str) -> str:
    if not isinstance(name, str):
        raise ValidationError("User name must be a string", details={"field": "name"})
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("User name must not be empty", details={"field": "name"})
    if len(cleaned) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"User name must be at most {NAME_MAX_LENGTH} characters",
            details={"field": "name", "max_length": NAME_MAX_LENGTH},
        )
    return cleaned


def parse_email(raw: str) -> Email:
    """Convert raw input into an Email, raising ValidationError when malformed."""
    try:
        return Email(raw)
    except ValueError as e:
        raise ValidationError(str(e), details={"field": "email"})


@dataclass
class User:
    """User domain entity.

    A plain record of identity, display name and email. Equality is by
    identity: two User objects with the same id are the same user even if
    one of them holds stale data.
    """

    id: UserId
    name: str
    email: Email

    # Audit Fields
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        """Post-initialization validation."""
        self.name = _validate_name(self.name)

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        """Create a new user with a freshly generated id.

        Raises:
            ValidationError: If name or email is invalid
        """
        return cls(id=UserId.generate(), name=name, email=parse_email(email))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def rename(self, name: str) -> None:
        """Change the display name."""
        self.name = _validate_name(name)
        self.updated_at = datetime.now(timezone.utc)

    def change_email(self, email: Email) -> None:
        """Change the email address."""
        self.email = email
        self.updated_at = datetime.now(timezone.utc)
