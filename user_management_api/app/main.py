"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
directly, e.g.::

    uvicorn user_management_api.app.main:app --reload
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.db import init_db
from .core.exceptions import ResourceNotFoundError
from .core.logging_config import setup_logging
from .repositories.user_repository import SQLiteUserRepository, UserRepository
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def error_body(request: Request, status_code: int, message: str, **extra: Any) -> Dict[str, Any]:
    """Build the JSON error payload shared by all error responses."""
    body: Dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": _reason(status_code),
        "message": message,
        "path": request.url.path,
    }
    body.update(extra)
    return body


def _reason(status_code: int) -> str:
    return {
        status.HTTP_400_BAD_REQUEST: "Bad Request",
        status.HTTP_404_NOT_FOUND: "Not Found",
        status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    }.get(status_code, "Error")


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and validation errors to HTTP responses."""

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_body(request, status.HTTP_404_NOT_FOUND, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request to %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                request,
                status.HTTP_400_BAD_REQUEST,
                "Validation failed",
                errors=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
        )


def create_app(
    repository: Optional[UserRepository] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[UserRepository]
        Storage used by the user service.  When omitted, a
        ``SQLiteUserRepository`` on ``settings.database_url`` is used
        and its schema is migrated on startup.
    app_settings : Optional[Settings]
        Settings override; defaults to the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)

    if repository is None:
        repository = SQLiteUserRepository(cfg.database_url)

        @app.on_event("startup")
        async def startup_event() -> None:
            # Creates the database file if needed and brings the schema up to date.
            init_db(cfg.database_url)

    app.state.user_service = UserService(repository)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=cfg.api_prefix)

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok", "version": cfg.api_version}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
