"""
No-op registrar adapter - Implements AccountRegistrar protocol.

Registration business logic is intentionally absent: accepted requests
are logged and dropped. No persistence, hashing, or duplicate detection
happens here.
"""

import logging

from src.domain.account import RegistrationRequest

logger = logging.getLogger(__name__)


class NoopAccountRegistrar:
    """
    Implements AccountRegistrar protocol without side effects.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless, safe to share between concurrent requests.
    """

    def register_account(self, request: RegistrationRequest) -> None:
        """
        Accept a validated registration request and do nothing with it.

        Only the username is logged; the password never leaves the request.

        Args:
            request: Validated registration request
        """
        logger.info("[REGISTRATION] Accepted registration for username: %s", request.username)
