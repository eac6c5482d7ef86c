"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .account import RegistrationRequest


class AccountRegistrar(Protocol):
    """Port interface for the account registration operation."""

    def register_account(self, request: RegistrationRequest) -> None:
        """
        Register an account from an already validated request.

        Called only after RegistrationRequest.violations() came back empty.
        The shipped adapter performs no persistence, hashing or
        duplicate detection.

        Args:
            request: Validated registration request
        """
        ...
