"""
Core layer: email rendering and logging helpers.
"""

from .email_template import create_email_subject, create_email_template, format_submitted_at
from .logging import mask_email, mask_phone, setup_logging, summarize_submission

__all__ = [
    # email_template
    "create_email_template",
    "create_email_subject",
    "format_submitted_at",
    # logging
    "setup_logging",
    "mask_email",
    "mask_phone",
    "summarize_submission",
]
