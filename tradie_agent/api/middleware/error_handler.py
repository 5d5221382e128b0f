"""
Error handling middleware.
"""

import traceback
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from tradie_agent.api.schemas.common import ErrorResponse
from tradie_agent.config.logging import get_logger
from tradie_agent.domain.exceptions.profile_error import ProfileError

logger = get_logger(__name__)


def _error(
    request: Request,
    status_code: int,
    message: str,
    error_type: str,
    hint: Optional[str] = None,
) -> JSONResponse:
    body = ErrorResponse(
        message=message,
        error_type=error_type,
        request_id=getattr(request.state, "request_id", None),
        details={"hint": hint} if hint else None,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


class ErrorHandlerMiddleware:
    """Error handling middleware for FastAPI."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.add_error_handlers()

    def add_error_handlers(self) -> None:
        """Add custom error handlers to FastAPI app."""
        add_error_handlers(self.app)


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(ProfileError)
    async def profile_error_handler(request: Request, exc: ProfileError):
        logger.warning("Profile error", error=str(exc), path=request.url.path)
        return _error(request, 400, str(exc), "profile_error", hint=exc.hint)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _error(request, exc.status_code, str(exc.detail), "http_error")

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error(request, 500, "An unexpected error occurred", "internal_error")
