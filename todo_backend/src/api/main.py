from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import TodoServiceError
from .repositories import Repository, create_repository
from .routers import todos as todos_router
from .schemas import validation_error_from
from .settings import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

CORS_ALLOW_METHODS = "GET, POST, PATCH, DELETE, OPTIONS"
CORS_ALLOW_HEADERS = "Content-Type"

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items."},
]


def _is_api_path(path: str) -> bool:
    return path == API_PREFIX or path.startswith(API_PREFIX + "/")


def _cors_headers(origins: List[str], request_origin: Optional[str]) -> Dict[str, str]:
    """
    Cross-origin headers for an /api response. With an explicit origin list the
    caller's Origin is echoed only when listed.
    """
    headers = {
        "Access-Control-Allow-Methods": CORS_ALLOW_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }
    if not origins or "*" in origins:
        headers["Access-Control-Allow-Origin"] = "*"
    else:
        headers["Vary"] = "Origin"
        if request_origin and request_origin in origins:
            headers["Access-Control-Allow-Origin"] = request_origin
    return headers


def _mount_static(app: FastAPI, static_dir: str) -> None:
    """Serve the UI bundle at '/' without shadowing the API routes."""

    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")


# PUBLIC_INTERFACE
def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[Repository] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use. Read from the environment when omitted.
        repository: Storage backend to serve. When omitted, a SQLite repository
            is opened at settings.sqlite_db_path and its schema ensured.

    Returns:
        Configured FastAPI application with the repository on app.state.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo API",
        description="REST API for managing todo items backed by a single SQLite file.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.settings = settings
    app.state.repository = repository if repository is not None else create_repository(settings)

    @app.middleware("http")
    async def api_cors(request: Request, call_next):
        """
        Attach cross-origin headers to every /api response and answer
        preflight OPTIONS requests without touching storage. Faults no other
        handler mapped become a generic 500 here, so they carry the headers too.
        """
        headers: Dict[str, str] = {}
        if _is_api_path(request.url.path):
            headers = _cors_headers(settings.cors_allow_origins, request.headers.get("origin"))
            if request.method == "OPTIONS":
                return Response(status_code=204, headers=headers)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return PlainTextResponse("Internal Server Error", status_code=500, headers=headers)
        response.headers.update(headers)
        return response

    @app.exception_handler(TodoServiceError)
    async def service_error_handler(request: Request, exc: TodoServiceError) -> PlainTextResponse:
        """
        Map domain errors to plain-text responses. Server-side failures are
        logged with their traceback and answered with a generic body.
        """
        if exc.status_code >= 500:
            logger.error(
                "Request %s %s failed: %s",
                request.method,
                request.url.path,
                exc.message,
                exc_info=exc,
            )
            return PlainTextResponse("Internal Server Error", status_code=exc.status_code)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        """
        Return 400 with a plain-text reason for bodies that fail to decode or
        validate.
        """
        error = validation_error_from(exc.errors())
        return PlainTextResponse(error.message, status_code=error.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        """
        Unmatched routes are answered with a plain-text 404, including paths
        that exist but not for the requested method.
        """
        if exc.status_code in (404, 405):
            return PlainTextResponse("Not Found", status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    # PUBLIC_INTERFACE
    @app.get("/api/health", summary="Health Check", tags=["health"])
    def health_check():
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health.
        """
        return {"status": "ok"}

    app.include_router(todos_router.router)

    if settings.static_dir:
        if os.path.isdir(settings.static_dir):
            _mount_static(app, settings.static_dir)
        else:
            logger.warning("STATIC_DIR %s is not a directory; UI will not be served", settings.static_dir)

    return app


# PUBLIC_INTERFACE
def run(settings: Optional[Settings] = None) -> None:
    """Configure logging and serve the application with uvicorn."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("Serving todos from %s on http://%s:%d", settings.sqlite_db_path, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
