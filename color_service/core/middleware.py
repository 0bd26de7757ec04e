"""
Custom middleware for error handling and monitoring.
"""

import time
import traceback
from typing import Callable
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from color_service.core.logging_config import get_logger, RequestLogger
from color_service.core.config import get_settings

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        try:
            RequestLogger.log_request(method=request.method, url=str(request.url))

            response = await call_next(request)

            process_time = time.time() - start_time
            RequestLogger.log_response(status_code=response.status_code, response_time=process_time)

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as exc:
            process_time = time.time() - start_time

            logger.error(
                f"Request processing failed - method={request.method}, url={request.url}, "
                f"error_type={type(exc).__name__}, error={exc}"
            )

            return self._create_error_response(exc, process_time)

    def _create_error_response(self, exc: Exception, process_time: float) -> JSONResponse:
        """Creates standardized error response."""
        settings = get_settings()

        content = {
            "error": "internal_error",
            "message": str(exc) if settings.DEBUG else "An error occurred",
            "timestamp": time.time(),
            "process_time": process_time
        }

        if settings.DEBUG:
            content["details"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc()
            }

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content,
            headers={"X-Process-Time": str(process_time)}
        )
