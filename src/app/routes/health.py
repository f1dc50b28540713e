"""
Health Routes.

- GET /api/health → liveness + server time
"""

from datetime import UTC, datetime

from fastapi import APIRouter

from src.domain.constants import MSG_HEALTH

api_router = APIRouter()


@api_router.get("")
async def health() -> dict[str, str]:
    """Health check."""
    return {
        "status": "ok",
        "message": MSG_HEALTH,
        "timestamp": datetime.now(UTC).isoformat(),
    }
