"""Domain layer: constants, errors and schemas."""

from .errors import ContactError, ErrorCodes
from .schemas import ContactResponse, ContactSubmission

__all__ = [
    "ContactError",
    "ErrorCodes",
    "ContactResponse",
    "ContactSubmission",
]
