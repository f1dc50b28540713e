"""
FastAPI application entry point.

Run:
- dev: uvicorn src.app.main:app --reload --port 5000
- prod: lumen-site  (reads HOST / PORT from the environment)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.app.config import AppSettings, load_settings
from src.app.routes import contact, health, pages
from src.core.logging import setup_logging
from src.domain.constants import MSG_GENERIC_ERROR, MSG_INTERNAL_ERROR, SITE_NAME

logger = logging.getLogger(__name__)

CORS_ALLOW_ORIGINS = ["*"]


# =============================================================================
# Lifespan
# =============================================================================


def ensure_public_dir(settings: AppSettings) -> None:
    """Create the public directory if it does not exist."""
    public_dir = settings.public_dir
    if public_dir.exists():
        logger.info(f"Serving static files from: {public_dir}")
    else:
        logger.info("Public directory not found, creating it...")
        public_dir.mkdir(parents=True, exist_ok=True)


def log_startup(settings: AppSettings) -> None:
    """Startup banner + missing environment warning."""
    logger.info(f"Server running on port {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Public directory: {settings.public_dir}")

    missing = settings.missing_required()
    if missing:
        logger.warning(f"Missing required environment variables: {missing}")
        logger.warning("Please create a .env file with the required variables.")
        logger.warning(
            "Copy .env.example to .env and fill in your Resend credentials."
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle.

    Startup: logging, public directory, startup log
    Shutdown: nothing to release
    """
    settings: AppSettings = app.state.settings
    setup_logging(settings.log_level)
    ensure_public_dir(settings)
    log_startup(settings)

    yield

    logger.info("Shutting down")


# =============================================================================
# Error Handling
# =============================================================================


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    500 JSON for anything the routes did not handle.

    Runs in ServerErrorMiddleware, outside CORSMiddleware, so the CORS
    header is set here.
    """
    logger.exception(f"Unhandled error: {exc}")
    settings: AppSettings = request.app.state.settings

    headers: dict[str, str] = {}
    if request.headers.get("origin") and "*" in CORS_ALLOW_ORIGINS:
        headers["Access-Control-Allow-Origin"] = "*"

    return JSONResponse(
        status_code=500,
        headers=headers,
        content={
            "success": False,
            "message": MSG_INTERNAL_ERROR,
            "error": str(exc) if settings.is_development else MSG_GENERIC_ERROR,
        },
    )


# =============================================================================
# App Factory
# =============================================================================


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    Args:
        settings: app settings (default: default.yaml + environment)
    """
    settings = settings or load_settings()

    app = FastAPI(
        title=f"{SITE_NAME} Website",
        description="Static marketing site with a contact form API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # API routes
    app.include_router(health.api_router, prefix="/api/health", tags=["Health API"])
    app.include_router(contact.api_router, prefix="/api/contact", tags=["Contact API"])

    # Page routes (catch-all, must stay last)
    app.include_router(pages.router, tags=["Pages"])

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings: AppSettings = app.state.settings

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
