"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    DevConnectorError,
    NotFoundError,
    ValidationError,
    ConflictError,
    DuplicateKeyError,
    AuthenticationError,
    AuthorizationError,
    FatalStorageError,
    ExternalServiceError,
)


class TestDevConnectorError:
    def test_error_message(self):
        """DevConnectorError should store message."""
        error = DevConnectorError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_error_default_code(self):
        """DevConnectorError should default code to class name."""
        error = DevConnectorError("Test error")
        assert error.code == "DevConnectorError"

    def test_error_custom_code(self):
        """DevConnectorError should accept custom code."""
        error = DevConnectorError("Test error", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_error_default_details(self):
        """DevConnectorError should default details to empty dict."""
        error = DevConnectorError("Test error")
        assert error.details == {}

    def test_error_to_dict(self):
        """DevConnectorError should convert to dict."""
        error = DevConnectorError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"


class TestValidationError:
    def test_inherits_base(self):
        """ValidationError should inherit from DevConnectorError."""
        assert isinstance(ValidationError([]), DevConnectorError)

    def test_carries_every_field_error(self):
        """ValidationError should keep one entry per violated field."""
        error = ValidationError([
            {"param": "name", "msg": "Name is required"},
            {"param": "email", "msg": "Please include a valid email"},
        ])
        assert [e["param"] for e in error.errors] == ["name", "email"]
        assert error.details["errors"] == error.errors


class TestTaxonomy:
    @pytest.mark.parametrize(
        "cls",
        [NotFoundError, ConflictError, AuthenticationError, AuthorizationError],
    )
    def test_simple_errors_inherit_base(self, cls):
        """Taxonomy errors should all be DevConnectorErrors."""
        error = cls("message")
        assert isinstance(error, DevConnectorError)
        assert error.code == cls.__name__

    def test_authentication_and_authorization_are_distinct(self):
        """Bad credentials and bad tokens should not be confused."""
        assert not issubclass(AuthenticationError, AuthorizationError)
        assert not issubclass(AuthorizationError, AuthenticationError)


class TestFatalStorageError:
    def test_message_and_details(self):
        """FatalStorageError should name the operation and collection."""
        error = FatalStorageError("insert", "users", "connection reset")
        assert error.code == "STORAGE_ERROR"
        assert "insert" in error.message
        assert "users" in error.message
        assert error.details == {"operation": "insert", "collection": "users"}


class TestDuplicateKeyError:
    def test_is_a_conflict(self):
        """Unique violations are conflicts, not storage failures."""
        error = DuplicateKeyError("users", "email already exists")
        assert isinstance(error, ConflictError)
        assert not isinstance(error, FatalStorageError)
        assert error.code == "DUPLICATE_KEY"
        assert error.details == {"collection": "users"}


class TestExternalServiceError:
    def test_service_added_to_details(self):
        """ExternalServiceError should record the service name."""
        error = ExternalServiceError("Upstream down", service="github")
        assert error.service == "github"
        assert error.details["service"] == "github"
