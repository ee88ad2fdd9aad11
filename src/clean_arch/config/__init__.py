"""Configuration: settings, constants and logging."""

from .constants import RepositoryBackend, Environment
from .settings import AppSettings, get_settings, load_settings
from .logging_config import (
    setup_logging,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "RepositoryBackend",
    "Environment",

    # Settings
    "AppSettings",
    "get_settings",
    "load_settings",

    # Logging
    "setup_logging",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
