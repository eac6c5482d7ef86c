"""
Domain exceptions - Semantic error types for account registration.

This module defines domain-specific exceptions that communicate
rejected requests without leaking HTTP or framework details.
"""

from .validation import Violation


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class RegistrationValidationError(AccountError):
    """One or more registration fields violate their declared rules."""

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        self.violations = violations
        fields = ", ".join(f"{v.field}:{v.rule.value}" for v in violations)
        super().__init__(f"Registration request is invalid ({fields})")


class MalformedRequestError(AccountError):
    """Request body cannot be parsed into a registration request."""

    pass
