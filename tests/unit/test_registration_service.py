"""
Unit tests for AccountRegistrationService domain logic.

Tests domain logic with a mocked registrar port to verify:
- Valid requests are handed to the registrar
- Invalid requests are rejected before the registrar is reached
- Exception contents
"""

import logging
from unittest.mock import Mock

import pytest

from src.domain.account import RegistrationRequest
from src.domain.exceptions import AccountError, RegistrationValidationError
from src.domain.registration import AccountRegistrationService
from src.domain.validation import Rule


class TestRegisterValidRequest:
    """Tests for accepted registrations."""

    def test_valid_request_reaches_registrar(self, valid_request: RegistrationRequest) -> None:
        """Registrar receives the exact request that was validated."""
        registrar = Mock()
        service = AccountRegistrationService(registrar=registrar)

        service.register(valid_request)

        registrar.register_account.assert_called_once_with(valid_request)

    def test_register_returns_none(self, valid_request: RegistrationRequest) -> None:
        """Registration produces no result value."""
        service = AccountRegistrationService(registrar=Mock())
        assert service.register(valid_request) is None


class TestRegisterInvalidRequest:
    """Tests for rejected registrations."""

    def test_invalid_request_raises(self) -> None:
        """Any violation raises RegistrationValidationError."""
        service = AccountRegistrationService(registrar=Mock())

        with pytest.raises(RegistrationValidationError):
            service.register(RegistrationRequest())

    def test_registrar_not_called_on_violation(self, valid_request: RegistrationRequest) -> None:
        """Registrar is never reached with an invalid request."""
        registrar = Mock()
        service = AccountRegistrationService(registrar=registrar)
        request = RegistrationRequest(
            first_name=valid_request.first_name,
            last_name=valid_request.last_name,
            username=valid_request.username,
            email="not-an-email",
            password=valid_request.password,
        )

        with pytest.raises(RegistrationValidationError):
            service.register(request)

        registrar.register_account.assert_not_called()

    def test_exception_carries_violations(self) -> None:
        """Raised exception lists every violation in order."""
        service = AccountRegistrationService(registrar=Mock())

        with pytest.raises(RegistrationValidationError) as exc_info:
            service.register(RegistrationRequest(first_name="Ann"))

        violations = exc_info.value.violations
        assert [v.field for v in violations] == ["lastName", "username", "email", "password"]
        assert all(v.rule == Rule.REQUIRED for v in violations)

    def test_exception_is_account_error(self) -> None:
        """Validation errors share the account error base class."""
        assert issubclass(RegistrationValidationError, AccountError)

    def test_exception_message_names_fields(self) -> None:
        """Exception message lists field:rule pairs without values."""
        service = AccountRegistrationService(registrar=Mock())

        with pytest.raises(RegistrationValidationError) as exc_info:
            service.register(RegistrationRequest(password="secret"))

        message = str(exc_info.value)
        assert "password:too_short" in message
        assert "secret" not in message

    def test_rejection_logged_without_values(self, caplog: pytest.LogCaptureFixture) -> None:
        """Rejections are logged with field/rule pairs only."""
        service = AccountRegistrationService(registrar=Mock())
        request = RegistrationRequest(
            first_name="Ann",
            last_name="Lee",
            username="annlee",
            email="ann.lee@example.com",
            password="tiny",
        )

        with caplog.at_level(logging.INFO), pytest.raises(RegistrationValidationError):
            service.register(request)

        assert "password:too_short" in caplog.text
        assert "tiny" not in caplog.text
