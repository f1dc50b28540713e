"""
Logging setup and PII masking.

Submissions contain personal data; log lines use the masked summary only.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Setup
# =============================================================================


def setup_logging(level: str = "INFO") -> None:
    """
    Root logger setup (stream handler).

    Repeated calls replace the previous handler instead of stacking.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_lumen_site", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler._lumen_site = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level.upper())


# =============================================================================
# Masking
# =============================================================================


def mask_email(value: Any) -> str:
    """a***@example.com"""
    if not isinstance(value, str) or "@" not in value:
        return "<invalid>" if value else "<empty>"
    local, _, domain = value.strip().partition("@")
    head = local[:1] if local else ""
    return f"{head}***@{domain}"


def mask_phone(value: Any) -> str:
    """Last 2 digits only."""
    if not isinstance(value, str):
        return "<invalid>" if value else "<empty>"
    digits = re.sub(r"[^0-9]", "", value)
    if not digits:
        return "<empty>"
    return f"***{digits[-2:]}"


def summarize_submission(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Masked summary of a raw submission for log lines.

    Message text is reduced to its length.
    """
    message = data.get("message")
    name = data.get("name")
    return {
        "name": name.strip()[:1] + "***" if isinstance(name, str) and name.strip() else "<empty>",
        "email": mask_email(data.get("email")),
        "phone": mask_phone(data.get("phone")),
        "message_length": len(message) if isinstance(message, str) else 0,
    }
