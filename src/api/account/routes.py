"""
Account routes.

Defines the REST endpoint for account registration. The handler owns
the sequence parse -> validate -> register explicitly:

- parse_registration_request rejects malformed bodies (400)
- AccountRegistrationService rejects invalid fields (400)
- the registrar only sees valid requests (201, empty body)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from src.api.dependencies import get_registration_service, parse_registration_request
from src.api.models import BadRequestResponse, RegisterAccountRequest
from src.domain.account import RegistrationRequest
from src.domain.registration import AccountRegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Account registration accepted"},
        400: {
            "model": BadRequestResponse,
            "description": "Validation failed or malformed request body",
        },
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": RegisterAccountRequest.model_json_schema(by_alias=True),
                },
            },
        },
    },
    summary="Register a new account",
    description="Submit first name, last name, username, email and password. "
    "All fields are validated before registration; every violation is reported.",
)
async def register_account(
    registration: RegistrationRequest = Depends(parse_registration_request),
    service: AccountRegistrationService = Depends(get_registration_service),
) -> Response:
    """
    Register a new account.

    - **firstName**: 1-50 characters
    - **lastName**: 1-50 characters
    - **username**: 1-50 characters
    - **email**: well-formed address, 5-254 characters
    - **password**: 8-100 characters

    Returns 201 with an empty body on success.
    """
    logger.info("Registering new account for username: %r", registration.username)
    service.register(registration)
    return Response(status_code=status.HTTP_201_CREATED)
