"""User service factory.

Composition root for the users feature: picks the repository and event
publisher adapters from settings and assembles the service and controller.
"""

import logging
from typing import Optional

from ....config import AppSettings, RepositoryBackend, get_settings
from ....core.exceptions import ConfigurationError
from ..controllers import UserController
from ..entities import EventPublisher, UserRepository
from ..publishers import LoggingEventPublisher
from ..repositories import InMemoryUserRepository, StubUserRepository
from ..services import UserService

logger = logging.getLogger(__name__)


class UserServiceFactory:
    """Factory for user repositories, services and controllers.

    Handles ONLY instantiation and wiring. The repository is created once
    per factory so every service built from it shares state.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """Initialize factory.

        Args:
            settings: Application settings, the cached global ones by default
            event_publisher: Publisher to use instead of the logging one

        Raises:
            ConfigurationError: If no settings are given and the environment
                holds invalid ones
        """
        self.settings = settings or get_settings()
        self._event_publisher = event_publisher
        self._repository: Optional[UserRepository] = None

    def create_repository(self) -> UserRepository:
        """Create the repository adapter selected by settings.

        Raises:
            ConfigurationError: If the backend is unknown
        """
        backend = self.settings.repository_backend
        if backend == RepositoryBackend.MEMORY:
            return InMemoryUserRepository()
        if backend == RepositoryBackend.STUB:
            return StubUserRepository()
        raise ConfigurationError(
            f"Unsupported repository backend: {backend}",
            details={"backend": str(backend)},
        )

    def get_repository(self) -> UserRepository:
        """Return the factory's shared repository, creating it on first use."""
        if self._repository is None:
            self._repository = self.create_repository()
            logger.debug(
                "Created %s for backend %s",
                type(self._repository).__name__,
                self.settings.repository_backend.value,
            )
        return self._repository

    def create_event_publisher(self) -> Optional[EventPublisher]:
        """Return the configured publisher, or None when events are disabled."""
        if not self.settings.publish_events:
            return None
        if self._event_publisher is None:
            self._event_publisher = LoggingEventPublisher()
        return self._event_publisher

    def create_service(self) -> UserService:
        return UserService(
            user_repository=self.get_repository(),
            event_publisher=self.create_event_publisher(),
        )

    def create_controller(self) -> UserController:
        return UserController(self.create_service())
