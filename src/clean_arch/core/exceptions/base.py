"""Base exceptions for clean-arch-reference.

All exceptions raised by the library inherit from CleanArchError and carry
an error code and a details mapping so adapters can render them without
knowing the concrete exception type.
"""

from typing import Any, Dict, Optional


class CleanArchError(Exception):
    """Base exception for all clean-arch-reference errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


def create_error_response(exception: CleanArchError) -> Dict[str, Any]:
    """Create standardized error response body from exception.

    Args:
        exception: The library exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
