"""FastAPI application factory."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.errors import (
    APIError,
    api_error_handler,
    general_exception_handler,
    http_exception_handler,
    validation_error_handler,
)
from .api.middleware import LoggingMiddleware, RequestIDMiddleware
from .api.routes.router import create_api_router
from .core.config import Settings, get_settings
from .core.logging import setup_logging
from .lifecycles import lifespan

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _build_links(base_url: str) -> Iterable[tuple[str, dict[str, str]]]:
    """Return the curated list of root endpoint links."""

    def absolute(path: str) -> str:
        return f"{base_url}{path.lstrip('/')}"

    entries = (
        ("docs", {"label": "Interactive API docs", "path": "docs"}),
        ("health", {"label": "Service health", "path": "api/health"}),
        ("version", {"label": "Service version", "path": "api/version"}),
        ("legal_assist", {"label": "IPC legal analysis (POST)", "path": "api/legal-assist"}),
        ("general_chat", {"label": "General legal chat (POST)", "path": "api/general-chat"}),
        ("case_law", {"label": "Case-law suggestions (POST)", "path": "api/case-law"}),
        ("indian_kanoon", {"label": "Indian Kanoon search", "path": "api/indian-kanoon"}),
        ("transcribe", {"label": "Audio transcription (POST)", "path": "api/transcribe"}),
    )

    return tuple(
        (
            key,
            {
                "label": data["label"],
                "url": absolute(data["path"]),
            },
        )
        for key, data in entries
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_json, service=settings.app_name)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/", include_in_schema=False)
    async def root(request: Request) -> Response:
        """Serve a landing page or JSON based on the request."""

        base_url = str(request.base_url)
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"

        links = _build_links(base_url)

        accepts = request.headers.get("accept", "").lower()
        wants_json = "application/json" in accepts and "text/html" not in accepts

        if wants_json:
            return JSONResponse(
                {
                    "status": "available",
                    "service": settings.app_name,
                    "version": settings.app_version,
                    "links": {name: link["url"] for name, link in links},
                }
            )

        context = {
            "service_name": settings.app_name,
            "service_version": settings.app_version,
            "links": links,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }
        return templates.TemplateResponse(request, "home.html", context)

    app.include_router(create_api_router())
    return app
