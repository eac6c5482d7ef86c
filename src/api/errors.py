"""
Exception handlers - Map domain errors to HTTP responses.

Both registration failures are request-scoped and answered with 400:

- RegistrationValidationError -> {"detail": "Validation failed", "violations": [...]}
- MalformedRequestError       -> {"detail": "Malformed request body"}
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse, ValidationErrorResponse, ViolationResponse
from src.domain.exceptions import MalformedRequestError, RegistrationValidationError


async def registration_validation_handler(
    request: Request, exc: RegistrationValidationError
) -> JSONResponse:
    """Respond 400 with every violated field rule."""
    body = ValidationErrorResponse(
        detail="Validation failed",
        violations=[ViolationResponse.from_violation(v) for v in exc.violations],
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def malformed_request_handler(request: Request, exc: MalformedRequestError) -> JSONResponse:
    """Respond 400 for bodies that could not be parsed."""
    body = ErrorResponse(detail="Malformed request body")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain exception handlers on an application."""
    app.add_exception_handler(RegistrationValidationError, registration_validation_handler)
    app.add_exception_handler(MalformedRequestError, malformed_request_handler)
