"""
Domain Constants: site-wide constants.

User-facing messages, validation thresholds and email identity.
Both the API and the client script rely on these exact strings.
"""

# =============================================================================
# Site Identity
# =============================================================================

SITE_NAME = "Lumen Tekno"
DEFAULT_EMAIL_FROM = "Lumen Tekno <onboarding@resend.dev>"
EMAIL_SUBJECT_TEMPLATE = "New Contact from {name} - Lumen Tekno"
DEFAULT_TIMEZONE = "Asia/Kolkata"

# =============================================================================
# Required Environment
# =============================================================================

REQUIRED_ENV_VARS = ("RESEND_API_KEY", "EMAIL_TO")

# =============================================================================
# Validation Rules (server side)
# =============================================================================
# public/script.js keeps its own copy for live feedback:
# - email regex there is anchored (^[^\s@]+@[^\s@]+\.[^\s@]+$)
# - messages there say "Please enter ..." instead of "Please provide ..."

NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15

EMAIL_PATTERN = r"\S+@\S+\.\S+"

NAME_ERROR = f"Name must be at least {NAME_MIN_LENGTH} characters long"
EMAIL_ERROR = "Please provide a valid email address"
PHONE_ERROR = (
    f"Please provide a valid phone number ({PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits)"
)
MESSAGE_ERROR = f"Message must be at least {MESSAGE_MIN_LENGTH} characters long"

# =============================================================================
# API Response Messages
# =============================================================================

MSG_SUCCESS = "Thank you for your message! We will get back to you soon."
MSG_VALIDATION_FAILED = "Validation failed"
MSG_CONFIG_ERROR = "Server configuration error. Please contact administrator."
MSG_SEND_FAILED = "Failed to send message. Please try again later."
MSG_INTERNAL_ERROR = "Internal server error"
MSG_GENERIC_ERROR = "Something went wrong"
MSG_PAGE_NOT_FOUND = "Page not found"
MSG_HEALTH = f"{SITE_NAME} API is running"
