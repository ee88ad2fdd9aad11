"""Dependency container.

A thin registry over a dependency_injector ``DynamicContainer`` keyed by
interface. Providers are plain callables receiving the container, so
wiring stays explicit: nothing is discovered from constructor signatures.
"""

import logging
import re
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from dependency_injector import containers, providers

from ..core.exceptions import DependencyResolutionError

logger = logging.getLogger(__name__)

Provider = Callable[["Container"], Any]


def _key_name(key: Any) -> str:
    return getattr(key, "__qualname__", None) or str(key)


def _provider_name(key: Any) -> str:
    """Attribute name of key's provider on the underlying container."""
    if isinstance(key, str):
        raw = key
    else:
        raw = f"{getattr(key, '__module__', '')}.{_key_name(key)}"
    return re.sub(r"\W", "_", raw)


class Container:
    """Registry of providers and singleton instances."""

    def __init__(self):
        self._container = containers.DynamicContainer()
        self._providers: Dict[Any, providers.Provider] = {}

    def _set(self, key: Any, provider: providers.Provider) -> None:
        self._providers[key] = provider
        self._container.set_provider(_provider_name(key), provider)

    def register(self, key: Any, provider: Provider, singleton: bool = True) -> None:
        """Register a provider for key, replacing any previous one.

        Args:
            key: Lookup key, usually the protocol or class being provided
            provider: Callable receiving this container and returning the instance
            singleton: Cache the first instance when True, call the provider
                on every resolve when False
        """
        provider_cls = providers.Singleton if singleton else providers.Factory
        self._set(key, provider_cls(provider, self))
        logger.debug("Registered provider for %s (singleton=%s)", _key_name(key), singleton)

    def register_instance(self, key: Any, instance: Any) -> None:
        """Register an already built instance for key."""
        self._set(key, providers.Object(instance))

    def is_registered(self, key: Any) -> bool:
        return key in self._providers

    def resolve(self, key: Any) -> Any:
        """Return the instance for key.

        Raises:
            DependencyResolutionError: If nothing is registered for key
        """
        provider = self._providers.get(key)
        if provider is None:
            raise DependencyResolutionError(
                f"No provider registered for {_key_name(key)}",
                details={"key": _key_name(key)},
            )
        return provider()

    @contextmanager
    def override(self, key: Any, instance: Any) -> Iterator[Any]:
        """Temporarily resolve key to instance, restoring the previous state on exit.

        Overriding an unregistered key registers it for the duration of the block.
        """
        provider = self._providers.get(key)
        if provider is None:
            self._providers[key] = providers.Object(instance)
            try:
                yield instance
            finally:
                self._providers.pop(key, None)
            return

        with provider.override(providers.Object(instance)):
            yield instance

    def reset(self) -> None:
        """Drop cached singleton instances, keeping registrations."""
        self._container.reset_singletons()

    def clear(self) -> None:
        """Drop all registrations and overrides."""
        self._container = containers.DynamicContainer()
        self._providers.clear()


# Process-wide container
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the process-wide container, building the default one on first use."""
    global _container
    if _container is None:
        from .composition import build_container
        _container = build_container()
    return _container


def set_container(container: Optional[Container]) -> None:
    """Replace the process-wide container, e.g. for tests. None resets it."""
    global _container
    _container = container
