"""Value objects shared across layers."""

from .identifiers import UserId, Email, EMAIL_MAX_LENGTH

__all__ = [
    "UserId",
    "Email",
    "EMAIL_MAX_LENGTH",
]
