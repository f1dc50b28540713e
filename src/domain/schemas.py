"""
Data schemas for the contact flow.

- ContactSubmission: a validated form submission (name, email, phone, message)
- ContactResponse: the JSON body returned by POST /api/contact
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# =============================================================================
# Submission
# =============================================================================

@dataclass
class ContactSubmission:
    """
    Contact form submission.

    Only built from a payload that already passed validation.
    """
    name: str
    email: str
    phone: str
    message: str

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "ContactSubmission":
        """Validated payload → ContactSubmission (values stripped)."""
        return cls(
            name=str(data["name"]).strip(),
            email=str(data["email"]).strip(),
            phone=str(data["phone"]).strip(),
            message=str(data["message"]).strip(),
        )


# =============================================================================
# Response
# =============================================================================

@dataclass
class ContactResponse:
    """
    POST /api/contact response body.

    errors: validation messages (400 only)
    error: provider error text (send failure only)
    """
    success: bool
    message: str
    errors: list[str] = field(default_factory=list)
    error: str | None = None
    status_code: int = 200

    def to_dict(self) -> dict[str, Any]:
        """JSON body; empty errors / error=None are omitted."""
        body: dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.errors:
            body["errors"] = list(self.errors)
        if self.error is not None:
            body["error"] = self.error
        return body
