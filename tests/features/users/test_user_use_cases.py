"""Tests for user commands and queries."""

from dataclasses import replace

import pytest

from clean_arch.core.exceptions import UserAlreadyExistsError, UserNotFoundError, ValidationError
from clean_arch.core.value_objects import Email, UserId
from clean_arch.features.users import (
    DeleteUser,
    DeleteUserRequest,
    GetUserByEmail,
    GetUserById,
    InMemoryUserRepository,
    ListUsers,
    RegisterUser,
    RegisterUserRequest,
    UpdateUserProfile,
    UpdateUserProfileRequest,
    UserDeleted,
    UserDTO,
    UserRegistered,
    UserUpdated,
)


class TestRegisterUser:
    """Test register user command."""

    @pytest.mark.asyncio
    async def test_registers_and_publishes(self, memory_repository, event_publisher):
        command = RegisterUser(memory_repository, event_publisher)

        response = await command.execute(RegisterUserRequest(name="Ada", email="Ada@Example.com"))

        assert isinstance(response.user, UserDTO)
        assert response.user.email == "ada@example.com"
        assert response.user.name == "Ada"
        assert event_publisher.events == [response.event]
        assert isinstance(response.event, UserRegistered)
        assert str(response.event.user_id) == response.user.id
        assert response.event.event_type == "user.registered"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, memory_repository, event_publisher):
        command = RegisterUser(memory_repository, event_publisher)
        await command.execute(RegisterUserRequest(name="Ada", email="ada@example.com"))

        with pytest.raises(UserAlreadyExistsError):
            await command.execute(RegisterUserRequest(name="Other", email=" ADA@example.com"))
        assert len(event_publisher.events) == 1

    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_repository(self, mock_user_repository):
        command = RegisterUser(mock_user_repository)

        with pytest.raises(ValidationError):
            await command.execute(RegisterUserRequest(name="", email="ada@example.com"))
        mock_user_repository.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_works_against_stub_repository(self, stub_repository):
        command = RegisterUser(stub_repository)

        response = await command.execute(RegisterUserRequest(name="Ada", email="ada@example.com"))

        assert response.user.email == "ada@example.com"
        assert await GetUserByEmail(stub_repository).execute("ada@example.com") is None

    @pytest.mark.asyncio
    async def test_checks_uniqueness_through_protocol(self, mock_user_repository):
        mock_user_repository.exists_by_email.return_value = True
        command = RegisterUser(mock_user_repository)

        with pytest.raises(UserAlreadyExistsError):
            await command.execute(RegisterUserRequest(name="Ada", email="ada@example.com"))
        mock_user_repository.exists_by_email.assert_awaited_once_with(Email("ada@example.com"))


class TestUpdateUserProfile:
    """Test update user profile command."""

    @pytest.mark.asyncio
    async def test_rename(self, memory_repository, event_publisher, sample_user):
        await memory_repository.save(sample_user)
        command = UpdateUserProfile(memory_repository, event_publisher)

        response = await command.execute(
            UpdateUserProfileRequest(user_id=str(sample_user.id), name="Countess")
        )

        assert response.user.name == "Countess"
        assert isinstance(response.event, UserUpdated)
        assert response.event.changed_fields == ("name",)
        assert (await memory_repository.find_by_id(sample_user.id)).name == "Countess"

    @pytest.mark.asyncio
    async def test_change_email(self, memory_repository, event_publisher, sample_user):
        await memory_repository.save(sample_user)
        command = UpdateUserProfile(memory_repository, event_publisher)

        response = await command.execute(
            UpdateUserProfileRequest(user_id=str(sample_user.id), email="countess@example.com")
        )

        assert response.user.email == "countess@example.com"
        assert response.event.previous_email == "ada@example.com"
        assert await memory_repository.find_by_email(Email("ada@example.com")) is None

    @pytest.mark.asyncio
    async def test_no_change_emits_nothing(self, memory_repository, event_publisher, sample_user):
        await memory_repository.save(sample_user)
        command = UpdateUserProfile(memory_repository, event_publisher)

        response = await command.execute(
            UpdateUserProfileRequest(user_id=str(sample_user.id), name="Ada Lovelace", email="ADA@example.com")
        )

        assert response.event is None
        assert event_publisher.events == []

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user(self, memory_repository, sample_user, make_user):
        other = make_user("Grace", "grace@example.com")
        await memory_repository.save(sample_user)
        await memory_repository.save(other)
        command = UpdateUserProfile(memory_repository)

        with pytest.raises(UserAlreadyExistsError):
            await command.execute(
                UpdateUserProfileRequest(user_id=str(sample_user.id), email="grace@example.com")
            )

    @pytest.mark.asyncio
    async def test_unknown_user(self, memory_repository):
        command = UpdateUserProfile(memory_repository)

        with pytest.raises(UserNotFoundError):
            await command.execute(UpdateUserProfileRequest(user_id=str(UserId.generate()), name="X"))

    @pytest.mark.asyncio
    async def test_malformed_id(self, memory_repository):
        command = UpdateUserProfile(memory_repository)

        with pytest.raises(ValidationError) as exc_info:
            await command.execute(UpdateUserProfileRequest(user_id="nope", name="X"))
        assert exc_info.value.details == {"field": "user_id"}


class TestDeleteUser:
    """Test delete user command."""

    @pytest.mark.asyncio
    async def test_delete(self, memory_repository, event_publisher, sample_user):
        await memory_repository.save(sample_user)

        event = await DeleteUser(memory_repository, event_publisher).execute(
            DeleteUserRequest(user_id=str(sample_user.id))
        )

        assert isinstance(event, UserDeleted)
        assert event.user_id == sample_user.id
        assert event_publisher.events == [event]
        assert await memory_repository.find_by_id(sample_user.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown(self, memory_repository, event_publisher):
        with pytest.raises(UserNotFoundError):
            await DeleteUser(memory_repository, event_publisher).execute(
                DeleteUserRequest(user_id=str(UserId.generate()))
            )
        assert event_publisher.events == []


class TestQueries:
    """Test user queries."""

    @pytest.mark.asyncio
    async def test_get_by_email(self, memory_repository, sample_user):
        await memory_repository.save(sample_user)

        dto = await GetUserByEmail(memory_repository).execute(" ADA@example.com")

        assert dto == UserDTO(id=str(sample_user.id), name="Ada Lovelace", email="ada@example.com")

    @pytest.mark.asyncio
    async def test_get_by_email_not_found(self, memory_repository):
        query = GetUserByEmail(memory_repository)

        assert await query.execute("ghost@example.com") is None
        assert await query.execute("not an email") is None

    @pytest.mark.asyncio
    async def test_get_by_id(self, memory_repository, sample_user):
        await memory_repository.save(sample_user)
        query = GetUserById(memory_repository)

        assert (await query.execute(str(sample_user.id))).email == "ada@example.com"
        with pytest.raises(UserNotFoundError):
            await query.execute(str(UserId.generate()))
        with pytest.raises(ValidationError):
            await query.execute("123")

    @pytest.mark.asyncio
    async def test_list_users_ordering(self, make_user):
        late = make_user("Late", "late@example.com", minutes=10)
        early_b = make_user("B", "b@example.com", minutes=0)
        early_a = replace(make_user("A", "a@example.com"), created_at=early_b.created_at)
        repository = InMemoryUserRepository([late, early_b, early_a])

        users = await ListUsers(repository).execute()

        assert [u.email for u in users] == ["a@example.com", "b@example.com", "late@example.com"]

    def test_dto_is_immutable(self):
        dto = UserDTO(id="1", name="Ada", email="ada@example.com")
        with pytest.raises(Exception):
            dto.name = "Other"
