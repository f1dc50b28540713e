"""
test_resend.py - Resend provider tests

Mock notes:
- provider._client is replaced with a MagicMock standing in for the resend module
- Emails.send is synchronous in the SDK (runs via asyncio.to_thread)
"""

from unittest.mock import MagicMock

import pytest

from src.app.providers.base import EmailMessage, EmailSendError
from src.app.providers.resend_provider import ResendEmailProvider
from src.domain.errors import ErrorCodes

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def provider() -> ResendEmailProvider:
    return ResendEmailProvider(api_key="re_test_key")


@pytest.fixture
def message() -> EmailMessage:
    return EmailMessage(
        sender="Lumen Tekno <onboarding@resend.dev>",
        to=["owner@example.com"],
        subject="New Contact from Asha - Lumen Tekno",
        html="<h2>New Contact Form Submission</h2>",
    )


def make_resend_client(response=None, error: Exception | None = None) -> MagicMock:
    """resend module mock."""
    client = MagicMock()
    if error is not None:
        client.Emails.send.side_effect = error
    else:
        client.Emails.send.return_value = response if response is not None else {"id": "email_123"}
    return client


# =============================================================================
# Init
# =============================================================================


class TestResendProviderInit:
    """ResendEmailProvider init tests."""

    def test_init_with_api_key(self):
        provider = ResendEmailProvider(api_key="re_abc")

        assert provider.api_key == "re_abc"
        assert provider.name == "resend"

    def test_init_uses_env_api_key(self, monkeypatch):
        monkeypatch.setenv("RESEND_API_KEY", "re_env")

        provider = ResendEmailProvider()

        assert provider.api_key == "re_env"

    def test_missing_key_fails_fast(self, monkeypatch):
        monkeypatch.delenv("RESEND_API_KEY", raising=False)

        with pytest.raises(EmailSendError) as exc_info:
            ResendEmailProvider()

        assert exc_info.value.code == ErrorCodes.RESEND_KEY_MISSING

    def test_client_lazy_init(self, provider):
        assert provider._client is None

    def test_get_client_sets_api_key(self, provider):
        import resend

        client = provider._get_client()

        assert client is resend
        assert resend.api_key == "re_test_key"


# =============================================================================
# send
# =============================================================================


class TestResendSend:
    """send tests."""

    @pytest.mark.asyncio
    async def test_send_success(self, provider, message):
        provider._client = make_resend_client({"id": "email_abc"})

        result = await provider.send(message)

        assert result.success is True
        assert result.provider == "resend"
        assert result.message_id == "email_abc"

    @pytest.mark.asyncio
    async def test_send_passes_params(self, provider, message):
        client = make_resend_client()
        provider._client = client

        await provider.send(message)

        client.Emails.send.assert_called_once_with(message.to_params())

    @pytest.mark.asyncio
    async def test_send_error_wrapped(self, provider, message):
        provider._client = make_resend_client(error=Exception("API key is invalid"))

        with pytest.raises(EmailSendError) as exc_info:
            await provider.send(message)

        assert exc_info.value.code == ErrorCodes.EMAIL_SEND_FAILED
        assert exc_info.value.message == "API key is invalid"

    @pytest.mark.asyncio
    async def test_no_retry(self, provider, message):
        client = make_resend_client(error=Exception("Network error"))
        provider._client = client

        with pytest.raises(EmailSendError):
            await provider.send(message)

        assert client.Emails.send.call_count == 1

    @pytest.mark.asyncio
    async def test_response_without_id(self, provider, message):
        provider._client = make_resend_client({})

        result = await provider.send(message)

        assert result.success is True
        assert result.message_id is None
