"""Pytest configuration and fixtures for clean-arch-reference tests."""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from clean_arch.config import AppSettings, RepositoryBackend
from clean_arch.core.value_objects import Email, UserId
from clean_arch.features.users import (
    InMemoryEventPublisher,
    InMemoryUserRepository,
    StubUserRepository,
    User,
    UserService,
)


@pytest.fixture
def sample_user_id():
    """Sample user ID for testing."""
    return UserId.generate()


@pytest.fixture
def sample_user(sample_user_id):
    """Sample user for testing."""
    return User(
        id=sample_user_id,
        name="Ada Lovelace",
        email=Email("ada@example.com"),
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_user():
    """Factory for users with deterministic creation times."""
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(name: str, email: str, minutes: int = 0) -> User:
        created = base + timedelta(minutes=minutes)
        return User(
            id=UserId.generate(),
            name=name,
            email=Email(email),
            created_at=created,
            updated_at=created,
        )

    return _make


@pytest.fixture
def memory_repository():
    """Empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def stub_repository():
    """Placeholder repository that stores nothing."""
    return StubUserRepository()


@pytest.fixture
def event_publisher():
    """Publisher recording events for assertions."""
    return InMemoryEventPublisher()


@pytest.fixture
def mock_user_repository():
    """Mock user repository for testing use cases in isolation."""
    mock_repo = AsyncMock()
    mock_repo.save = AsyncMock(side_effect=lambda user: user)
    mock_repo.find_by_id = AsyncMock(return_value=None)
    mock_repo.find_by_email = AsyncMock(return_value=None)
    mock_repo.find_all = AsyncMock(return_value=[])
    mock_repo.delete = AsyncMock(return_value=False)
    mock_repo.exists_by_email = AsyncMock(return_value=False)
    return mock_repo


@pytest.fixture
def user_service(memory_repository, event_publisher):
    """User service over the in-memory repository."""
    return UserService(user_repository=memory_repository, event_publisher=event_publisher)


@pytest.fixture
def memory_settings():
    """Settings selecting the in-memory backend."""
    return AppSettings(repository_backend=RepositoryBackend.MEMORY, publish_events=True)


@pytest.fixture
def stub_settings():
    """Settings selecting the placeholder backend."""
    return AppSettings(repository_backend=RepositoryBackend.STUB, publish_events=False)
