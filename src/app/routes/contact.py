"""
Contact Routes.

- POST /api/contact → validate + send notification email

Body: JSON object or form fields (urlencoded / multipart).
An unparseable body counts as an empty submission (→ 400).
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.app.services.contact import ContactService

logger = logging.getLogger(__name__)

api_router = APIRouter()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_contact_service(request: Request) -> ContactService:
    """ContactService bound to the app settings (and provider, if injected)."""
    return ContactService(
        settings=request.app.state.settings,
        provider=getattr(request.app.state, "email_provider", None),
    )


async def read_payload(request: Request) -> dict[str, Any]:
    """
    Request body → dict.

    Returns:
        Parsed fields, {} when the body is empty or not an object
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body:
        return {}

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Unparseable contact payload: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Contact payload is not an object: {type(data).__name__}")
        return {}

    return data


@api_router.post("")
async def submit_contact(request: Request) -> JSONResponse:
    """
    Contact form submission.

    Returns:
        {"success": bool, "message": str, "errors"?: [...], "error"?: str}
    """
    payload = await read_payload(request)
    service = get_contact_service(request)
    response = await service.submit(payload)

    return JSONResponse(status_code=response.status_code, content=response.to_dict())
