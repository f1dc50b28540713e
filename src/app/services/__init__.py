"""
Application Services.

- validate: server-side contact validation
- contact: validate → render → send
"""

from .contact import ContactService
from .validate import ValidationService, validate_contact_data

__all__ = [
    "ContactService",
    "ValidationService",
    "validate_contact_data",
]
