"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the domain
service and for turning the raw request body into a domain request.
"""

import logging

from fastapi import Request
from pydantic import ValidationError

from src.adapters.registrar.noop import NoopAccountRegistrar
from src.api.models import RegisterAccountRequest
from src.domain.account import RegistrationRequest
from src.domain.exceptions import MalformedRequestError
from src.domain.registration import AccountRegistrationService

logger = logging.getLogger(__name__)

# Module-level singleton - NoopAccountRegistrar is stateless
_registrar = NoopAccountRegistrar()


def get_account_registrar() -> NoopAccountRegistrar:
    """Get no-op account registrar (singleton)."""
    return _registrar


def get_registration_service() -> AccountRegistrationService:
    """Create registration service with the injected registrar."""
    return AccountRegistrationService(registrar=get_account_registrar())


async def parse_registration_request(request: Request) -> RegistrationRequest:
    """
    Parse the raw request body into a RegistrationRequest.

    The body is read and parsed explicitly instead of through a FastAPI
    body parameter so that shape errors surface as MalformedRequestError
    (HTTP 400) rather than FastAPI's default 422.

    Rejected as malformed:
    - Empty body or invalid JSON
    - JSON that is not an object
    - Field values that are neither strings nor null

    Raises:
        MalformedRequestError: If the body cannot be parsed
    """
    # A leading UTF-8 byte order mark is tolerated
    body = (await request.body()).removeprefix(b"\xef\xbb\xbf")
    try:
        parsed = RegisterAccountRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.info("Malformed registration body: %d error(s)", exc.error_count())
        raise MalformedRequestError("Malformed request body") from exc
    return parsed.to_domain()
