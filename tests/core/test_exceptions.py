"""Tests for the exception hierarchy and HTTP mapping."""

from clean_arch.core.exceptions import (
    ArchitectureError,
    CleanArchError,
    ConfigurationError,
    DependencyResolutionError,
    EntityNotFoundError,
    UserAlreadyExistsError,
    UserNotFoundError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)


class TestCleanArchError:

    def test_defaults(self):
        error = CleanArchError("boom")

        assert error.message == "boom"
        assert error.error_code == "CleanArchError"
        assert error.details == {}
        assert str(error) == "boom"

    def test_custom_code_and_details(self):
        error = ValidationError("bad", error_code="BAD_INPUT", details={"field": "name"})

        assert error.error_code == "BAD_INPUT"
        assert error.details == {"field": "name"}

    def test_user_errors_carry_lookup(self):
        assert UserNotFoundError("ada@example.com").details == {"lookup": "ada@example.com"}
        assert UserAlreadyExistsError("ada@example.com").details == {"email": "ada@example.com"}
        assert isinstance(UserNotFoundError("x"), EntityNotFoundError)


class TestHttpMapping:

    def test_mapped_status_codes(self):
        assert get_http_status_code(UserNotFoundError("x")) == 404
        assert get_http_status_code(UserAlreadyExistsError("x")) == 409
        assert get_http_status_code(ValidationError("x")) == 422
        assert get_http_status_code(ConfigurationError("x")) == 500

    def test_subclass_inherits_parent_status(self):
        assert get_http_status_code(DependencyResolutionError("x")) == 500
        assert get_http_status_code(ArchitectureError("x")) == 500

    def test_unmapped_exception_is_500(self):
        assert get_http_status_code(RuntimeError("x")) == 500
        assert get_http_status_code(CleanArchError("x")) == 500

    def test_create_error_response(self):
        body = create_error_response(UserNotFoundError("abc"))

        assert body == {
            "error": {
                "code": "UserNotFoundError",
                "message": "User abc not found",
                "details": {"lookup": "abc"},
                "type": "UserNotFoundError",
            }
        }
