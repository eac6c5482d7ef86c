"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration request model, its field rules,
and the service that validates a request before handing it to the
registrar port. Ports keep the domain independent from adapters.
"""

from .account import RegistrationRequest
from .exceptions import AccountError, MalformedRequestError, RegistrationValidationError
from .ports import AccountRegistrar
from .registration import AccountRegistrationService
from .validation import REGISTRATION_RULES, FieldRules, Rule, Violation

__all__ = [
    "REGISTRATION_RULES",
    "AccountError",
    "AccountRegistrar",
    "AccountRegistrationService",
    "FieldRules",
    "MalformedRequestError",
    "RegistrationRequest",
    "RegistrationValidationError",
    "Rule",
    "Violation",
]
