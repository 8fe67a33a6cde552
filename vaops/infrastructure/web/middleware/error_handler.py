"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import json
import logging
import traceback
from typing import Any, Dict

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from vaops.domain.models.base import DomainException
from vaops.infrastructure.web.errors import status_for_error_code

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {str(exc)}",
            exc_info=True,
            extra={
                "request_path": request.url.path,
                "request_method": request.method,
                "client_host": request.client.host if request.client else None
            }
        )

        error_response = self.format_error_response(exc)
        error_response["path"] = request.url.path

        if self.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response.pop("status_code"),
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        error_response = {
            "error": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        if isinstance(exc, DomainException):
            error_response.update({
                "error": exc.code,
                "message": exc.message,
                "status_code": status_for_error_code(exc.code)
            })
        elif isinstance(exc, json.JSONDecodeError):
            error_response.update({
                "error": "INVALID_JSON",
                "message": "The request body contains invalid JSON",
                "status_code": status.HTTP_400_BAD_REQUEST
            })
        elif isinstance(exc, TimeoutError):
            error_response.update({
                "error": "REQUEST_TIMEOUT",
                "message": "The request took too long to process",
                "status_code": status.HTTP_408_REQUEST_TIMEOUT
            })

        return error_response
