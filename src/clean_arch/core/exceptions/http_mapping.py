"""HTTP status code mapping for exceptions.

Adapters use this to turn library exceptions into status codes without a
web framework. Lookup walks the exception's MRO so subclasses inherit
their parent's status unless mapped explicitly.
"""

from typing import Dict, Type

from .domain import (
    ArchitectureError,
    ConfigurationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)

DEFAULT_STATUS_CODE = 500

HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 404 Not Found
    EntityNotFoundError: 404,

    # 409 Conflict
    EntityAlreadyExistsError: 409,

    # 422 Unprocessable Entity
    ValidationError: 422,

    # 500 Internal Server Error
    ConfigurationError: 500,
    ArchitectureError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 for unmapped exceptions
    """
    for klass in type(exception).__mro__:
        if klass in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[klass]
    return DEFAULT_STATUS_CODE
