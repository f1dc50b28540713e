"""
Contact Service: validate → render → send.

Response contract (POST /api/contact):
- 500 config error: RESEND_API_KEY / EMAIL_TO missing
- 400 validation failed: errors[] in field order
- 200 success
- 500 send failed: error = provider error text

No retry, no queue, nothing is stored.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from src.app.config import AppSettings
from src.app.providers.base import EmailMessage, EmailProvider, EmailSendError
from src.app.providers.resend_provider import ResendEmailProvider
from src.core.email_template import create_email_subject, create_email_template
from src.core.logging import summarize_submission
from src.domain.constants import (
    MSG_CONFIG_ERROR,
    MSG_SEND_FAILED,
    MSG_SUCCESS,
    MSG_VALIDATION_FAILED,
)
from src.domain.errors import ContactError, ErrorCodes
from src.domain.schemas import ContactResponse, ContactSubmission

from .validate import ValidationService

logger = logging.getLogger(__name__)


class ContactService:
    """
    Contact form handler.

    Usage:
        service = ContactService(settings)
        response = await service.submit(payload)
    """

    def __init__(
        self,
        settings: AppSettings,
        provider: EmailProvider | None = None,
        validator: ValidationService | None = None,
    ):
        """
        Args:
            settings: app settings (recipient, sender, timezone, key)
            provider: email provider (default: Resend, built on first send)
            validator: validation service
        """
        self.settings = settings
        self._provider = provider
        self.validator = validator or ValidationService()

    @property
    def provider(self) -> EmailProvider:
        """Email provider (lazy)."""
        if self._provider is None:
            self._provider = ResendEmailProvider(api_key=self.settings.resend_api_key)
        return self._provider

    def check_config(self) -> None:
        """
        Raises:
            ContactError: CONFIG_MISSING with the missing keys
        """
        missing = self.settings.missing_required()
        if missing:
            raise ContactError(ErrorCodes.CONFIG_MISSING, missing=missing)

    def build_message(
        self,
        submission: ContactSubmission,
        now: datetime | None = None,
    ) -> EmailMessage:
        """Notification email for one submission."""
        html = create_email_template(
            submission,
            now=now,
            timezone=self.settings.timezone,
            site_name=self.settings.site_name,
        )
        return EmailMessage(
            sender=self.settings.email_from,
            to=[self.settings.email_to or ""],
            subject=create_email_subject(submission, self.settings.subject_template),
            html=html,
        )

    async def submit(self, data: Mapping[str, Any]) -> ContactResponse:
        """
        Handle one contact submission.

        Args:
            data: raw request payload

        Returns:
            ContactResponse (status_code set)
        """
        logger.info(f"Contact form submission received: {summarize_submission(data)}")

        # 1. configuration
        try:
            self.check_config()
        except ContactError as e:
            logger.error(f"Missing required environment variables: {e.missing}")
            return ContactResponse(
                success=False,
                message=MSG_CONFIG_ERROR,
                status_code=500,
            )

        # 2. validation
        result = self.validator.validate(data)
        if not result.valid or result.submission is None:
            logger.info(f"Validation errors: {result.errors}")
            return ContactResponse(
                success=False,
                message=MSG_VALIDATION_FAILED,
                errors=result.errors,
                status_code=400,
            )

        # 3. send
        try:
            message = self.build_message(result.submission, now=datetime.now(UTC))
            send_result = await self.provider.send(message)
        except EmailSendError as e:
            logger.error(f"Error sending email: [{e.code}] {e.message}")
            return ContactResponse(
                success=False,
                message=MSG_SEND_FAILED,
                error=e.message,
                status_code=500,
            )

        logger.info(
            f"Email sent successfully via {send_result.provider} "
            f"(id={send_result.message_id})"
        )
        return ContactResponse(success=True, message=MSG_SUCCESS)
