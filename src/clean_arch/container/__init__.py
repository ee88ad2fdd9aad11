"""Dependency container and default wiring."""

from .container import Container, get_container, set_container
from .composition import build_container

__all__ = [
    "Container",
    "get_container",
    "set_container",
    "build_container",
]
