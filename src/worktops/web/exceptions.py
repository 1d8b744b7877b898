"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from worktops.application.config import ConfigError
from worktops.application.dtos import DrawingError


class DrawingGenerationError(Exception):
    """Raised when a configuration loads but cannot be drawn."""

    def __init__(self, errors: list[DrawingError]) -> None:
        self.errors = errors
        super().__init__(f"Drawing generation failed: {[str(e) for e in errors]}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(DrawingGenerationError)
    async def generation_error_handler(
        request: Request, exc: DrawingGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Drawing generation failed",
                "error_type": "generation",
                "details": [
                    {"field": e.field_name, "message": e.message} for e in exc.errors
                ],
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
