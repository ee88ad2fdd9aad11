"""Domain event publisher adapters."""

from .event_publishers import InMemoryEventPublisher, LoggingEventPublisher

__all__ = [
    "InMemoryEventPublisher",
    "LoggingEventPublisher",
]
