"""Value objects for identifiers and contact data.

Immutable, self-validating wrappers used by entities so that an invalid
id or email can never reach the domain layer.
"""

import re
from dataclasses import dataclass
from uuid import UUID

from ...utils import generate_uuid_v7

EMAIL_MAX_LENGTH = 254
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class UserId:
    """User identifier value object with UUIDv7 support."""
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            try:
                object.__setattr__(self, 'value', UUID(str(self.value)))
            except (ValueError, TypeError):
                raise ValueError(f"UserId must be a valid UUID, got: {self.value!r}")

    @classmethod
    def generate(cls) -> 'UserId':
        """Generate a new UserId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"UserId(value={self.value!r})"


@dataclass(frozen=True)
class Email:
    """Normalized email address.

    Surrounding whitespace is dropped and the address is lowercased, so two
    spellings of the same mailbox compare equal.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"Email must be a string, got: {type(self.value).__name__}")

        normalized = self.value.strip().lower()
        if not normalized:
            raise ValueError("Email must not be empty")
        if len(normalized) > EMAIL_MAX_LENGTH:
            raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters")
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError(f"Invalid email address: {self.value!r}")

        object.__setattr__(self, 'value', normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email(value={self.value!r})"
