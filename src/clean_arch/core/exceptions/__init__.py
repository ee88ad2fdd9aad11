"""Exception hierarchy for clean-arch-reference."""

from .base import CleanArchError, create_error_response
from .domain import (
    ValidationError,
    EntityNotFoundError,
    EntityAlreadyExistsError,
    UserNotFoundError,
    UserAlreadyExistsError,
    ConfigurationError,
    DependencyResolutionError,
    ArchitectureError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    # Base Exception
    "CleanArchError",

    # Domain Exceptions
    "ValidationError",
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "UserNotFoundError",
    "UserAlreadyExistsError",

    # Configuration Exceptions
    "ConfigurationError",
    "DependencyResolutionError",

    # Tooling Exceptions
    "ArchitectureError",

    # Utility Functions
    "HTTP_STATUS_MAP",
    "get_http_status_code",
    "create_error_response",
]
