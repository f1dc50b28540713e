"""
Application settings.

Sources (later wins):
1. default.yaml (project root)
2. environment (.env loaded via python-dotenv)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from src.domain.constants import (
    DEFAULT_EMAIL_FROM,
    DEFAULT_TIMEZONE,
    EMAIL_SUBJECT_TEMPLATE,
    REQUIRED_ENV_VARS,
    SITE_NAME,
)

PROJECT_ROOT = Path(__file__).parent.parent.parent


def load_config(config_path: Path | None = None) -> dict:
    """Load the YAML config file."""
    if config_path is None:
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


@dataclass
class AppSettings:
    """Runtime settings."""
    site_name: str = SITE_NAME
    email_from: str = DEFAULT_EMAIL_FROM
    email_to: str | None = None
    subject_template: str = EMAIL_SUBJECT_TEMPLATE
    timezone: str = DEFAULT_TIMEZONE
    resend_api_key: str | None = None

    public_dir: Path = PROJECT_ROOT / "public"
    host: str = "0.0.0.0"
    port: int = 5000
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def missing_required(self) -> list[str]:
        """Required environment keys that are unset or empty."""
        values = {
            "RESEND_API_KEY": self.resend_api_key,
            "EMAIL_TO": self.email_to,
        }
        return [key for key in REQUIRED_ENV_VARS if not values.get(key)]


def load_settings(
    config_path: Path | None = None,
    env: dict[str, str] | None = None,
) -> AppSettings:
    """
    Build AppSettings from default.yaml + environment.

    Args:
        config_path: YAML path (default: project root default.yaml)
        env: environment mapping (default: os.environ after load_dotenv)

    Returns:
        AppSettings
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    config = load_config(config_path)
    site = config.get("site", {})
    email = config.get("email", {})
    server = config.get("server", {})
    logging_cfg = config.get("logging", {})

    public_dir = Path(env.get("PUBLIC_DIR") or server.get("public_dir") or "public")
    if not public_dir.is_absolute():
        public_dir = PROJECT_ROOT / public_dir

    return AppSettings(
        site_name=site.get("name", SITE_NAME),
        email_from=env.get("EMAIL_FROM") or email.get("from", DEFAULT_EMAIL_FROM),
        email_to=env.get("EMAIL_TO") or None,
        subject_template=email.get("subject", EMAIL_SUBJECT_TEMPLATE),
        timezone=site.get("timezone", DEFAULT_TIMEZONE),
        resend_api_key=env.get("RESEND_API_KEY") or None,
        public_dir=public_dir,
        host=env.get("HOST") or server.get("host", "0.0.0.0"),
        port=int(env.get("PORT") or server.get("port", 5000)),
        environment=env.get("APP_ENV") or "development",
        log_level=env.get("LOG_LEVEL") or logging_cfg.get("level", "INFO"),
    )
