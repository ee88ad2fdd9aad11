"""Event publisher adapters."""

import logging
from typing import Any, List

logger = logging.getLogger(__name__)


class InMemoryEventPublisher:
    """Collects published events in order."""

    def __init__(self):
        self.events: List[Any] = []

    async def publish(self, event: Any) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


class LoggingEventPublisher:
    """Writes each published event to the log."""

    def __init__(self, logger_name: str = __name__):
        self._logger = logging.getLogger(logger_name)

    async def publish(self, event: Any) -> None:
        event_type = getattr(event, "event_type", type(event).__name__)
        self._logger.info("Event %s: %s", event_type, event)
