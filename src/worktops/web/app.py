"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worktops.application.commands import GenerateDrawingCommand
from worktops.domain.services import DrawingSettings
from worktops.infrastructure.exporters import ExporterRegistry
from worktops.web.dependencies import get_generate_command
from worktops.web.exceptions import register_exception_handlers
from worktops.web.routers import drawings_router, validate_router

logger = logging.getLogger(__name__)


def create_app(settings: DrawingSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Drawing settings for requests that carry no layout section,
            such as stored records. Library defaults are used when omitted.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Worktop Drawing API",
        description="REST API for generating annotated worktop drawings",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(drawings_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")

    if settings is not None:
        command = GenerateDrawingCommand(settings)
        app.dependency_overrides[get_generate_command] = lambda: command

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.debug(
        f"Created app with formats {', '.join(ExporterRegistry.available_formats())}"
    )
    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
