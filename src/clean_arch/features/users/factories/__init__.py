"""User feature factories."""

from .user_service_factory import UserServiceFactory

__all__ = ["UserServiceFactory"]
