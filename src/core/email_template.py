"""
Contact email template.

Five emailable fields: Name, Email, Phone, Submitted, Message.
User values are autoescaped by Jinja2; message newlines become <br>.
"""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from jinja2 import Environment
from markupsafe import Markup, escape

from src.domain.constants import DEFAULT_TIMEZONE, EMAIL_SUBJECT_TEMPLATE, SITE_NAME
from src.domain.schemas import ContactSubmission

# =============================================================================
# Template
# =============================================================================

CONTACT_EMAIL_TEMPLATE = """
    <h2>New Contact Form Submission</h2>
    <hr>
    <h3>Customer Details</h3>
    <p><strong>Name:</strong> {{ name }}</p>
    <p><strong>Email:</strong> {{ email }}</p>
    <p><strong>Phone:</strong> {{ phone }}</p>
    <p><strong>Submitted:</strong> {{ submitted }}</p>

    <h3>Message</h3>
    <div style="background-color: #f8f9fa; padding: 15px; border-left: 4px solid #007bff;">
      {{ message | nl2br }}
    </div>

    <hr>
    <p><em>This message was sent through the {{ site_name }} website contact form.</em></p>
  """


def nl2br(value: str) -> Markup:
    """Escape each line, join with <br>."""
    return Markup("<br>").join(escape(line) for line in str(value).split("\n"))


_env = Environment(autoescape=True)
_env.filters["nl2br"] = nl2br
_template = _env.from_string(CONTACT_EMAIL_TEMPLATE)


# =============================================================================
# Rendering
# =============================================================================

def format_submitted_at(now: datetime, timezone: str = DEFAULT_TIMEZONE) -> str:
    """
    Timestamp in en-IN locale style.

    Example: 19/10/2026, 3:05:09 pm

    Args:
        now: aware datetime (naive values are treated as UTC)
        timezone: IANA zone name

    Returns:
        d/m/yyyy, h:mm:ss am|pm
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    local = now.astimezone(ZoneInfo(timezone))

    hour = local.hour % 12 or 12
    suffix = "am" if local.hour < 12 else "pm"
    return (
        f"{local.day}/{local.month}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {suffix}"
    )


def create_email_template(
    submission: ContactSubmission,
    now: datetime | None = None,
    timezone: str = DEFAULT_TIMEZONE,
    site_name: str = SITE_NAME,
) -> str:
    """
    Render the HTML body of the notification email.

    Args:
        submission: validated submission
        now: submission time (default: current time)
        timezone: zone for the Submitted line
        site_name: footer site name

    Returns:
        HTML string
    """
    submitted = format_submitted_at(now or datetime.now(UTC), timezone)
    return _template.render(
        name=submission.name,
        email=submission.email,
        phone=submission.phone,
        submitted=submitted,
        message=submission.message,
        site_name=site_name,
    )


def create_email_subject(
    submission: ContactSubmission,
    subject_template: str = EMAIL_SUBJECT_TEMPLATE,
) -> str:
    """Subject line, e.g. 'New Contact from Asha - Lumen Tekno'."""
    return subject_template.format(name=submission.name)
