"""User repository adapters."""

from .stub_repository import StubUserRepository
from .memory_repository import InMemoryUserRepository

__all__ = [
    "StubUserRepository",
    "InMemoryUserRepository",
]
