"""
API request and response models.

Pydantic models for the wire format of the account endpoint and
OpenAPI schema generation. Field rules live in the domain layer; these
models only describe shape (camelCase keys, string-or-null values).
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from src.domain.account import RegistrationRequest
from src.domain.validation import Violation


class RegisterAccountRequest(BaseModel):
    """Request body for account registration."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    first_name: StrictStr | None = Field(
        default=None, alias="firstName", description="Given name (1-50 characters)"
    )
    last_name: StrictStr | None = Field(
        default=None, alias="lastName", description="Family name (1-50 characters)"
    )
    username: StrictStr | None = Field(default=None, description="Username (1-50 characters)")
    email: StrictStr | None = Field(
        default=None, description="Well-formed email address (5-254 characters)"
    )
    password: StrictStr | None = Field(default=None, description="Password (8-100 characters)")

    def to_domain(self) -> RegistrationRequest:
        """Convert wire model to the domain registration request."""
        return RegistrationRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            username=self.username,
            email=self.email,
            password=self.password,
        )


class ViolationResponse(BaseModel):
    """One field failing one rule."""

    field: str
    rule: str
    message: str

    @classmethod
    def from_violation(cls, violation: Violation) -> "ViolationResponse":
        return cls(field=violation.field, rule=violation.rule.value, message=violation.message)


class ValidationErrorResponse(BaseModel):
    """Error response listing every violated field rule."""

    detail: str
    violations: list[ViolationResponse]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


# Either body may accompany a 400 from the account endpoint
BadRequestResponse = ValidationErrorResponse | ErrorResponse
