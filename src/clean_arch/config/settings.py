"""Application settings loaded from the environment.

Values come from CLEAN_ARCH_* environment variables or a .env file in the
working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError
from .constants import Environment, RepositoryBackend


class AppSettings(BaseSettings):
    """Settings for the reference application."""

    model_config = SettingsConfigDict(
        env_prefix="CLEAN_ARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="clean-arch-reference")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Wiring
    repository_backend: RepositoryBackend = Field(default=RepositoryBackend.MEMORY)
    publish_events: bool = Field(default=True)

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


def load_settings(**overrides) -> AppSettings:
    """Build settings from the environment plus overrides.

    Raises:
        ConfigurationError: If a value fails validation, e.g. an unknown
            repository backend
    """
    try:
        return AppSettings(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid application settings",
            details={"errors": e.errors(include_url=False)},
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return load_settings()
