"""Domain and infrastructure exceptions."""

from typing import Any, Dict, Optional

from .base import CleanArchError


# Validation Errors
class ValidationError(CleanArchError):
    """Raised when an entity or request violates a business rule."""
    pass


# Entity Errors
class EntityNotFoundError(CleanArchError):
    """Raised when a requested entity does not exist."""
    pass


class EntityAlreadyExistsError(CleanArchError):
    """Raised when creating an entity that conflicts with an existing one."""
    pass


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, lookup: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"User {lookup} not found", details=details or {"lookup": lookup})


class UserAlreadyExistsError(EntityAlreadyExistsError):
    """Raised when the email is already registered to another user."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists", details={"email": email})


# Configuration Errors
class ConfigurationError(CleanArchError):
    """Raised when settings or wiring are invalid."""
    pass


class DependencyResolutionError(ConfigurationError):
    """Raised when the container has no provider for a requested key."""
    pass


# Tooling Errors
class ArchitectureError(CleanArchError):
    """Raised when source code cannot be analysed for layer violations."""
    pass
