"""Data transfer objects crossing the use case boundary.

Use cases never hand entities to the outside world; they return these
plain projections instead.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..entities import User


class UserDTO(BaseModel):
    """Read-only projection of a User."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Normalized email address")

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """Create DTO from user entity."""
        return cls(id=str(user.id), name=user.name, email=str(user.email))
