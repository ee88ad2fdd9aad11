"""User controller.

Translates primitive payloads into use case requests and use case results
into (status_code, body) pairs. Framework-free: an HTTP framework, a CLI
or a message consumer can sit in front of it.
"""

import logging
from typing import Any, Dict, Tuple

from pydantic import ValidationError as PydanticValidationError

from ....core.exceptions import (
    CleanArchError,
    UserNotFoundError,
    create_error_response,
    get_http_status_code,
)
from ..application import (
    DeleteUserRequest,
    RegisterUserRequest,
    UpdateUserProfileRequest,
)
from ..services import UserService
from .models import CreateUserRequest, UpdateUserRequest

logger = logging.getLogger(__name__)

Result = Tuple[int, Dict[str, Any]]


def _validation_failure(error: PydanticValidationError) -> Result:
    return 422, {
        "error": {
            "code": "ValidationError",
            "message": "Invalid request payload",
            "details": {
                "errors": [
                    {"field": ".".join(str(loc) for loc in item["loc"]), "message": item["msg"]}
                    for item in error.errors()
                ]
            },
            "type": "ValidationError",
        }
    }


def _failure(error: CleanArchError) -> Result:
    return get_http_status_code(error), create_error_response(error)


class UserController:
    """Adapter between delivery mechanisms and user use cases."""

    def __init__(self, service: UserService):
        self._service = service

    async def create_user(self, payload: Dict[str, Any]) -> Result:
        """Create user. 201 on success."""
        try:
            request = CreateUserRequest.model_validate(payload)
            response = await self._service.register_user.execute(
                RegisterUserRequest(name=request.name, email=request.email)
            )
            return 201, response.user.model_dump()
        except PydanticValidationError as e:
            return _validation_failure(e)
        except CleanArchError as e:
            logger.info("Create user failed: %s", e)
            return _failure(e)

    async def get_user(self, user_id: str) -> Result:
        """Get user by ID. 404 when missing."""
        try:
            user = await self._service.get_user_by_id.execute(user_id)
            return 200, user.model_dump()
        except CleanArchError as e:
            return _failure(e)

    async def find_user_by_email(self, email: str) -> Result:
        """Get user by email. 404 when missing."""
        user = await self._service.get_user_by_email.execute(email)
        if user is None:
            return _failure(UserNotFoundError(email))
        return 200, user.model_dump()

    async def list_users(self) -> Result:
        users = await self._service.list_users.execute()
        return 200, {"users": [user.model_dump() for user in users], "total": len(users)}

    async def update_user(self, user_id: str, payload: Dict[str, Any]) -> Result:
        """Partially update user. 200 on success."""
        try:
            request = UpdateUserRequest.model_validate(payload)
            response = await self._service.update_user_profile.execute(
                UpdateUserProfileRequest(user_id=user_id, name=request.name, email=request.email)
            )
            return 200, response.user.model_dump()
        except PydanticValidationError as e:
            return _validation_failure(e)
        except CleanArchError as e:
            logger.info("Update user %s failed: %s", user_id, e)
            return _failure(e)

    async def delete_user(self, user_id: str) -> Result:
        """Delete user. 204 with empty body on success."""
        try:
            await self._service.delete_user.execute(DeleteUserRequest(user_id=user_id))
            return 204, {}
        except CleanArchError as e:
            return _failure(e)
