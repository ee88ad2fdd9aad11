"""Request models accepted by the user controller."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CreateUserRequest(BaseModel):
    """Request model for creating a user."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
            }
        },
    )

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=3, description="Email address")


class UpdateUserRequest(BaseModel):
    """Request model for updating a user. All fields optional."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Email address")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v:
            raise ValueError("Name must not be empty")
        return v

    @model_validator(mode="after")
    def require_one_field(self):
        if self.name is None and self.email is None:
            raise ValueError("At least one of name or email must be provided")
        return self
