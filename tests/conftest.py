"""
Pytest fixtures for the site tests.

Test layout:
- valid payload / invalid payloads kept separate
- settings point at a tmp public dir; no real email is ever sent
"""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import yaml
from fastapi.testclient import TestClient

from src.app.config import AppSettings
from src.app.main import create_app
from src.app.providers.base import EmailProvider, SendResult

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml path."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """Load default config."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Public dir with an index page and a stylesheet."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text(
        "<!DOCTYPE html><html><body><h1>Lumen Tekno</h1></body></html>",
        encoding="utf-8",
    )
    (public / "styles.css").write_text("body { margin: 0; }", encoding="utf-8")
    return public


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def valid_payload() -> dict:
    """Valid contact submission."""
    return {
        "name": "Asha Verma",
        "email": "asha@example.com",
        "phone": "+91 98765-43210",
        "message": "I would like a quote for a new website.",
    }


@pytest.fixture
def invalid_payload() -> dict:
    """Every field fails."""
    return {
        "name": "A",
        "email": "not-an-email",
        "phone": "12345",
        "message": "short",
    }


# =============================================================================
# Settings / Provider Fixtures
# =============================================================================

@pytest.fixture
def test_settings(public_dir: Path) -> AppSettings:
    """Complete settings (required env present)."""
    return AppSettings(
        email_to="owner@lumentekno.test",
        resend_api_key="re_test_key",
        public_dir=public_dir,
        environment="development",
    )


@pytest.fixture
def mock_provider() -> AsyncMock:
    """EmailProvider mock that always succeeds."""
    provider = AsyncMock(spec=EmailProvider)
    provider.name = "mock"
    provider.send.return_value = SendResult(
        success=True,
        provider="mock",
        message_id="email_test_001",
    )
    return provider


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(test_settings: AppSettings, mock_provider: AsyncMock):
    """App wired to test settings and the mock provider."""
    application = create_app(test_settings)
    application.state.email_provider = mock_provider
    return application


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """FastAPI TestClient (server errors come back as 500 responses)."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
