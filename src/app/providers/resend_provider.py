"""
Resend Provider.

The resend SDK is synchronous; calls run in a worker thread.
"""

import asyncio
import logging
import os
from typing import Any

from src.domain.errors import ErrorCodes

from .base import EmailMessage, EmailProvider, EmailSendError, SendResult

logger = logging.getLogger(__name__)


class ResendEmailProvider(EmailProvider):
    """
    Resend API Provider.

    Usage:
        provider = ResendEmailProvider(api_key="re_...")
        result = await provider.send(message)
    """

    name = "resend"

    def __init__(self, api_key: str | None = None):
        """
        Args:
            api_key: API key (falls back to RESEND_API_KEY)

        Raises:
            EmailSendError: when no key is available (fail-fast)
        """
        self.api_key = api_key or os.environ.get("RESEND_API_KEY")

        if not self.api_key:
            raise EmailSendError(
                ErrorCodes.RESEND_KEY_MISSING,
                "Resend API key is missing. Set the RESEND_API_KEY environment variable.",
            )

        self._client: Any = None

    def _get_client(self) -> Any:
        """resend module (lazy init)."""
        if self._client is None:
            try:
                import resend

                resend.api_key = self.api_key
                self._client = resend
            except ImportError as e:
                raise EmailSendError(
                    ErrorCodes.RESEND_NOT_INSTALLED,
                    "resend package not installed. Run: pip install resend",
                ) from e
        return self._client

    async def send(self, message: EmailMessage) -> SendResult:
        """
        Send via resend.Emails.send.

        Raises:
            EmailSendError: SDK / API failure (SDK error text kept)
        """
        client = self._get_client()
        params = message.to_params()

        try:
            response = await asyncio.to_thread(client.Emails.send, params)
        except Exception as e:
            logger.error(f"Resend send failed: {e}")
            raise EmailSendError(ErrorCodes.EMAIL_SEND_FAILED, str(e)) from e

        if isinstance(response, dict):
            message_id = response.get("id")
        else:
            message_id = getattr(response, "id", None)

        logger.info(f"Email sent via Resend (id={message_id})")

        return SendResult(
            success=True,
            provider=self.name,
            message_id=message_id,
        )
