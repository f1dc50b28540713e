"""
Error definitions for the contact flow.

ContactError is raised before any email is sent; routes map it onto the
JSON response contract.
"""


class ContactError(Exception):
    """
    Contact flow error.

    missing: required environment keys that are unset (CONFIG_MISSING only)

    Usage:
        raise ContactError(ErrorCodes.CONFIG_MISSING, missing=["EMAIL_TO"])
    """

    def __init__(
        self,
        code: str,
        detail: str = "",
        missing: list[str] | None = None,
    ) -> None:
        self.code = code
        self.detail = detail
        self.missing = list(missing or [])

        parts = [detail] if detail else []
        if self.missing:
            parts.append(f"missing {', '.join(self.missing)}")
        super().__init__(f"{code}: {'; '.join(parts)}" if parts else code)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Configuration ===
    CONFIG_MISSING = "CONFIG_MISSING"

    # === Email ===
    EMAIL_SEND_FAILED = "EMAIL_SEND_FAILED"
    RESEND_KEY_MISSING = "RESEND_KEY_MISSING"
    RESEND_NOT_INSTALLED = "RESEND_NOT_INSTALLED"
