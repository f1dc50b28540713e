"""
Page Routes: static site + SPA fallback.

- GET /<file> → file from the public directory
- GET /<anything else> → public/index.html
- no index.html → 404 {"message": "Page not found"}

Unknown /api/* paths get the 404 JSON, never index.html.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, JSONResponse, Response

from src.domain.constants import MSG_PAGE_NOT_FOUND

router = APIRouter()

INDEX_FILENAME = "index.html"


def get_public_dir(request: Request) -> Path:
    """Public directory from app settings."""
    return request.app.state.settings.public_dir


def resolve_public_file(public_dir: Path, path: str) -> Path | None:
    """
    Map a URL path onto a file inside public_dir.

    Returns:
        File path, or None when missing or outside public_dir (symlinks included)
    """
    if not path:
        return None

    candidate = public_dir / path
    try:
        resolved = candidate.resolve(strict=True)
        resolved.relative_to(public_dir.resolve())
    except (ValueError, OSError):
        return None

    if not resolved.is_file():
        return None
    return resolved


def not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": MSG_PAGE_NOT_FOUND})


@router.get("/{full_path:path}", response_model=None)
async def serve_page(request: Request, full_path: str) -> Response:
    """Static file, else index.html, else 404."""
    if full_path == "api" or full_path.startswith("api/"):
        return not_found()

    public_dir = get_public_dir(request)

    file_path = resolve_public_file(public_dir, full_path)
    if file_path is not None:
        return FileResponse(path=file_path)

    index_path = public_dir / INDEX_FILENAME
    if index_path.is_file():
        return FileResponse(path=index_path, media_type="text/html")

    return not_found()
