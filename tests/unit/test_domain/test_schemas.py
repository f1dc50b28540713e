"""
test_schemas.py - domain schema tests
"""

from src.domain.schemas import ContactResponse, ContactSubmission

# =============================================================================
# ContactSubmission
# =============================================================================

class TestContactSubmission:
    """ContactSubmission tests."""

    def test_from_payload_strips(self):
        submission = ContactSubmission.from_payload({
            "name": "  Asha ",
            "email": " asha@example.com ",
            "phone": " 9876543210 ",
            "message": "  Hello from Pune!  ",
            "extra": "ignored",
        })

        assert submission == ContactSubmission(
            name="Asha",
            email="asha@example.com",
            phone="9876543210",
            message="Hello from Pune!",
        )

    def test_message_keeps_inner_newlines(self):
        submission = ContactSubmission.from_payload({
            "name": "Asha",
            "email": "a@b.co",
            "phone": "9876543210",
            "message": "line one\nline two\n",
        })

        assert submission.message == "line one\nline two"


# =============================================================================
# ContactResponse
# =============================================================================

class TestContactResponse:
    """ContactResponse.to_dict tests."""

    def test_success_body(self):
        response = ContactResponse(success=True, message="ok")

        assert response.status_code == 200
        assert response.to_dict() == {"success": True, "message": "ok"}

    def test_errors_included(self):
        response = ContactResponse(
            success=False,
            message="Validation failed",
            errors=["Name must be at least 2 characters long"],
            status_code=400,
        )

        assert response.to_dict()["errors"] == ["Name must be at least 2 characters long"]
        assert "error" not in response.to_dict()

    def test_error_included(self):
        response = ContactResponse(success=False, message="x", error="boom", status_code=500)

        assert response.to_dict() == {"success": False, "message": "x", "error": "boom"}

    def test_empty_error_string_kept(self):
        """error="" is still reported (only None is omitted)."""
        response = ContactResponse(success=False, message="x", error="")

        assert response.to_dict()["error"] == ""
