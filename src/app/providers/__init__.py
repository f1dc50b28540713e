"""
Email Provider Abstraction.

Providers are swappable; sender identity lives in config.
"""

from .base import EmailMessage, EmailProvider, EmailSendError, SendResult
from .resend_provider import ResendEmailProvider

__all__ = [
    "EmailProvider",
    "EmailMessage",
    "EmailSendError",
    "SendResult",
    "ResendEmailProvider",
]
