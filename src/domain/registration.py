"""
Registration domain service - Validate before registering.

The service owns the ordering that a framework interceptor would
otherwise hide:

    validate -> reject on any violation -> hand off to the registrar

The registrar is never reached with an invalid request.
"""

import logging
from dataclasses import dataclass

from .account import RegistrationRequest
from .exceptions import RegistrationValidationError
from .ports import AccountRegistrar

logger = logging.getLogger(__name__)


@dataclass
class AccountRegistrationService:
    """
    Domain service for account registration.

    Validates the registration request and delegates the registration
    operation to the injected registrar port.
    """

    registrar: AccountRegistrar

    def register(self, request: RegistrationRequest) -> None:
        """
        Register a new account.

        Args:
            request: Registration request as received from the caller

        Raises:
            RegistrationValidationError: If any field violates its rules
        """
        violations = request.violations()
        if violations:
            logger.info(
                "Registration rejected: %s",
                ", ".join(f"{v.field}:{v.rule.value}" for v in violations),
            )
            raise RegistrationValidationError(violations)

        self.registrar.register_account(request)
