"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from drawers.application.config import ConfigError
from drawers.application.presets import PresetNotFoundError


class LayoutRejectedError(Exception):
    """Raised when a layout workflow declines the requested change."""

    def __init__(self, notice: str) -> None:
        self.notice = notice
        super().__init__(notice)


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

    @app.exception_handler(LayoutRejectedError)
    async def layout_rejected_handler(
        request: Request, exc: LayoutRejectedError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=409,
            content={
                "error": exc.notice,
                "error_type": "rejected",
                "details": None,
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(PresetNotFoundError)
    async def preset_not_found_handler(
        request: Request, exc: PresetNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Preset not found: {exc.preset_id}",
                "error_type": "not_found",
                "details": None,
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
