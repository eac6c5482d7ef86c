"""
Registration request - The data submitted to create an account.

A RegistrationRequest is built fresh for every HTTP request and discarded
once the request completes. It has no identity and is never persisted.
"""

from dataclasses import dataclass

from .validation import Violation, check_fields


@dataclass(frozen=True)
class RegistrationRequest:
    """
    One registration attempt.

    Every field may be None (absent from the submitted body); absence is
    reported by violations() rather than rejected on construction.
    """

    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    email: str | None = None
    password: str | None = None

    def field_values(self) -> dict[str, str | None]:
        """Current values keyed by wire field name."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "username": self.username,
            "email": self.email,
            "password": self.password,
        }

    def violations(self) -> tuple[Violation, ...]:
        """Return every rule violation, in field then rule order."""
        return check_fields(self.field_values())

    def is_valid(self) -> bool:
        return not self.violations()

    def __repr__(self) -> str:
        return (
            f"RegistrationRequest(first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, username={self.username!r}, "
            f"email={self.email!r}, password='***')"
        )
