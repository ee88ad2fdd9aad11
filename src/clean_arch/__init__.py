"""clean-arch-reference - Clean Architecture illustrated with working code.

A small user-management feature laid out in concentric layers, three ways
of wiring it together, and a checker for the Dependency Rule.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    AppSettings,
    get_settings,
    RepositoryBackend,
    Environment,
)

from .core.exceptions import (
    # Base Exception
    CleanArchError,

    # Common Exceptions
    ValidationError,
    EntityNotFoundError,
    EntityAlreadyExistsError,
    UserNotFoundError,
    UserAlreadyExistsError,
    ConfigurationError,
    DependencyResolutionError,
    ArchitectureError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .core.value_objects import UserId, Email

from .features.users import (
    User,
    UserDTO,
    UserRepository,
    UserService,
    UserServiceFactory,
    UserController,
    InMemoryUserRepository,
    StubUserRepository,
)

from .container import Container, build_container, get_container, set_container

from .architecture import DependencyRuleChecker, Violation, default_layer_map

__all__ = [
    "__version__",

    # Configuration
    "AppSettings",
    "get_settings",
    "RepositoryBackend",
    "Environment",

    # Exceptions
    "CleanArchError",
    "ValidationError",
    "EntityNotFoundError",
    "EntityAlreadyExistsError",
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "ConfigurationError",
    "DependencyResolutionError",
    "ArchitectureError",
    "get_http_status_code",
    "create_error_response",

    # Value Objects
    "UserId",
    "Email",

    # Users
    "User",
    "UserDTO",
    "UserRepository",
    "UserService",
    "UserServiceFactory",
    "UserController",
    "InMemoryUserRepository",
    "StubUserRepository",

    # Wiring
    "Container",
    "build_container",
    "get_container",
    "set_container",

    # Architecture
    "DependencyRuleChecker",
    "Violation",
    "default_layer_map",
]
