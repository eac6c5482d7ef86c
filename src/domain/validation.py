"""
Registration field rules - Declarative rule table evaluated imperatively.

Each registration field maps to a FieldRules entry declaring its length
bounds and whether it must be a well-formed email address. Evaluation
collects every violation instead of stopping at the first one.

Rule order per field:
    required -> too_short -> too_long -> not_an_email

A blank value (None, empty or whitespace only) yields a single REQUIRED
violation; length and format checks only run on non-blank values.
"""

from dataclasses import dataclass
from enum import Enum

from email_validator import EmailNotValidError, validate_email


class Rule(str, Enum):
    """Name of the rule a field failed to satisfy."""

    REQUIRED = "required"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    NOT_AN_EMAIL = "not_an_email"


@dataclass(frozen=True)
class Violation:
    """A single field failing a single rule."""

    field: str
    rule: Rule
    message: str


@dataclass(frozen=True)
class FieldRules:
    """Declared constraints for one registration field."""

    field: str
    min_length: int
    max_length: int
    email: bool = False


# Ordered by wire field name; violation order follows this table.
REGISTRATION_RULES: tuple[FieldRules, ...] = (
    FieldRules("firstName", min_length=1, max_length=50),
    FieldRules("lastName", min_length=1, max_length=50),
    FieldRules("username", min_length=1, max_length=50),
    FieldRules("email", min_length=5, max_length=254, email=True),
    FieldRules("password", min_length=8, max_length=100),
)


def is_blank(value: str | None) -> bool:
    """Return True for None, empty, or whitespace-only values."""
    return value is None or not value.strip()


def is_well_formed_email(value: str) -> bool:
    """
    Check email address syntax.

    No DNS or deliverability lookups are performed. Domains must contain
    a period, and special-use or reserved names (localhost, local, test,
    invalid, onion, arpa) are rejected even when syntactically valid.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def check_field(rules: FieldRules, value: str | None) -> list[Violation]:
    """Evaluate one field's rules against its current value."""
    if is_blank(value):
        return [Violation(rules.field, Rule.REQUIRED, "must not be blank")]

    violations: list[Violation] = []
    size_message = f"size must be between {rules.min_length} and {rules.max_length}"
    if len(value) < rules.min_length:
        violations.append(Violation(rules.field, Rule.TOO_SHORT, size_message))
    if len(value) > rules.max_length:
        violations.append(Violation(rules.field, Rule.TOO_LONG, size_message))
    if rules.email and not is_well_formed_email(value):
        violations.append(
            Violation(rules.field, Rule.NOT_AN_EMAIL, "must be a well-formed email address")
        )
    return violations


def check_fields(values: dict[str, str | None]) -> tuple[Violation, ...]:
    """
    Evaluate the whole rule table.

    Args:
        values: Field values keyed by wire field name. Missing keys are blank.

    Returns:
        Ordered violations; empty when every field is valid.
    """
    violations: list[Violation] = []
    for rules in REGISTRATION_RULES:
        violations.extend(check_field(rules, values.get(rules.field)))
    return tuple(violations)
