"""
Email Provider abstract interface.

Providers are swappable; the contact service only sees EmailProvider.
No retry at this layer: a failed send is reported once.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


class EmailSendError(Exception):
    """Email send failure (provider error, missing key, SDK missing)."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


# =============================================================================
# Message / Result
# =============================================================================

@dataclass
class EmailMessage:
    """Outgoing email."""
    sender: str
    to: list[str]
    subject: str
    html: str

    def to_params(self) -> dict[str, Any]:
        """Provider request parameters."""
        return {
            "from": self.sender,
            "to": list(self.to),
            "subject": self.subject,
            "html": self.html,
        }


@dataclass
class SendResult:
    """
    Send result.

    message_id: provider-assigned id (if returned)
    """
    success: bool
    provider: str
    message_id: str | None = None


# =============================================================================
# Provider Interface
# =============================================================================

class EmailProvider(ABC):
    """Transactional email provider."""

    name: str = "base"

    @abstractmethod
    async def send(self, message: EmailMessage) -> SendResult:
        """
        Send one email.

        Raises:
            EmailSendError: on any provider failure
        """
        ...
