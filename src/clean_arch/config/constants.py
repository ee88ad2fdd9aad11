"""Constants and enums for clean-arch-reference."""

from enum import Enum


class RepositoryBackend(str, Enum):
    """Available user repository adapters."""
    MEMORY = "memory"
    STUB = "stub"


class Environment(str, Enum):
    """Deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

