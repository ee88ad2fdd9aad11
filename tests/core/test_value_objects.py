"""Tests for value objects and uuid helpers."""

import time
from uuid import RFC_4122, UUID, uuid4

import pytest

from clean_arch.core.value_objects import EMAIL_MAX_LENGTH, Email, UserId
from clean_arch.utils import generate_uuid_v7


class TestUserId:
    """Test cases for UserId."""

    def test_accepts_uuid_string(self):
        raw = str(uuid4())
        user_id = UserId(raw)

        assert isinstance(user_id.value, UUID)
        assert str(user_id) == raw

    def test_equal_for_same_uuid(self):
        raw = uuid4()
        assert UserId(raw) == UserId(str(raw))
        assert hash(UserId(raw)) == hash(UserId(str(raw)))

    def test_rejects_garbage(self):
        with pytest.raises(ValueError, match="valid UUID"):
            UserId("not-a-uuid")

    def test_generate_is_uuid_v7(self):
        user_id = UserId.generate()
        assert user_id.value.version == 7


class TestEmail:
    """Test cases for Email."""

    def test_normalizes_case_and_whitespace(self):
        email = Email("  Ada@Example.COM ")
        assert email.value == "ada@example.com"
        assert email == Email("ada@example.com")

    @pytest.mark.parametrize("raw", ["", "   ", "ada", "ada@", "@example.com", "ada@example", "a b@example.com"])
    def test_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            Email(raw)

    def test_rejects_non_string(self):
        with pytest.raises(ValueError, match="string"):
            Email(42)

    def test_rejects_too_long(self):
        local = "a" * (EMAIL_MAX_LENGTH - len("@example.com") + 1)
        with pytest.raises(ValueError, match="at most"):
            Email(f"{local}@example.com")


class TestUuidV7:
    """Test cases for UUIDv7 helpers."""

    def test_generated_value_is_v7(self):
        value = UUID(generate_uuid_v7())
        assert value.version == 7
        assert value.variant == RFC_4122

    def test_later_values_sort_after_earlier_ones(self):
        first = generate_uuid_v7()
        time.sleep(0.002)
        second = generate_uuid_v7()

        assert first < second
