"""Default container wiring for the application."""

from typing import Optional

from ..config import AppSettings, get_settings
from ..features.users import (
    EventPublisher,
    UserController,
    UserRepository,
    UserService,
    UserServiceFactory,
)
from .container import Container


def build_container(settings: Optional[AppSettings] = None) -> Container:
    """Build a container with the users feature registered.

    Registered keys: AppSettings, UserServiceFactory, UserRepository,
    EventPublisher, UserService and UserController. The controller is
    transient, everything else is a singleton.
    """
    container = Container()
    container.register_instance(AppSettings, settings or get_settings())

    container.register(
        UserServiceFactory,
        lambda c: UserServiceFactory(settings=c.resolve(AppSettings)),
    )
    container.register(
        UserRepository,
        lambda c: c.resolve(UserServiceFactory).get_repository(),
    )
    container.register(
        EventPublisher,
        lambda c: c.resolve(UserServiceFactory).create_event_publisher(),
    )
    container.register(
        UserService,
        lambda c: UserService(
            user_repository=c.resolve(UserRepository),
            event_publisher=c.resolve(EventPublisher),
        ),
    )
    container.register(
        UserController,
        lambda c: UserController(c.resolve(UserService)),
        singleton=False,
    )
    return container
