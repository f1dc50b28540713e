r"""
Validation Service: server-side contact form validation.

Rules (field order name, email, phone, message):
- name: at least 2 characters after strip
- email: \S+@\S+\.\S+ somewhere in the value
- phone: 10-15 digits once non-digits are removed
- message: at least 10 characters after strip

Every failing rule contributes its message; an empty list means valid.
Non-string values fail the rule for their field.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.constants import (
    EMAIL_ERROR,
    EMAIL_PATTERN,
    MESSAGE_ERROR,
    MESSAGE_MIN_LENGTH,
    NAME_ERROR,
    NAME_MIN_LENGTH,
    PHONE_ERROR,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
)
from src.domain.schemas import ContactSubmission

_EMAIL_RE = re.compile(EMAIL_PATTERN)
# ASCII only: full-width or Arabic-Indic digits do not count
_NON_DIGIT_RE = re.compile(r"[^0-9]")


# =============================================================================
# Field Rules
# =============================================================================

def is_valid_name(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) >= NAME_MIN_LENGTH


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_RE.search(value) is not None


def is_valid_phone(value: Any) -> bool:
    """Formatting characters (+, spaces, dashes, parens) are ignored."""
    if not isinstance(value, str) or not value:
        return False
    digits = _NON_DIGIT_RE.sub("", value)
    return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS


def is_valid_message(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) >= MESSAGE_MIN_LENGTH


# (field, check, message), in response order
FIELD_RULES: tuple[tuple[str, Callable[[Any], bool], str], ...] = (
    ("name", is_valid_name, NAME_ERROR),
    ("email", is_valid_email, EMAIL_ERROR),
    ("phone", is_valid_phone, PHONE_ERROR),
    ("message", is_valid_message, MESSAGE_ERROR),
)


def validate_contact_data(data: Mapping[str, Any]) -> list[str]:
    """
    Validate a raw contact payload.

    Args:
        data: request body (JSON object or form fields)

    Returns:
        Error messages, empty when the payload is valid
    """
    return [message for name, check, message in FIELD_RULES if not check(data.get(name))]


# =============================================================================
# Validation Result
# =============================================================================

@dataclass
class ValidationResult:
    """Validation result."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    submission: ContactSubmission | None = None


class ValidationService:
    """
    Contact validation service.

    Wraps validate_contact_data and builds the typed submission on success.
    """

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """
        Args:
            data: raw request payload

        Returns:
            ValidationResult (submission set only when valid)
        """
        errors = validate_contact_data(data)
        result = ValidationResult(valid=not errors, errors=errors)

        if result.valid:
            result.submission = ContactSubmission.from_payload(data)

        return result
