"""
Error handling middleware.
Catches anything the relay itself did not turn into a plain-text reply.
"""
import logging
import traceback
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from keyword_relay.api.models import ErrorResponse
from keyword_relay.config.settings import get_settings

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except Exception as e:
            tb_str = traceback.format_exc()
            is_production = get_settings().is_production

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if is_production:
                content = ErrorResponse(
                    error="Internal Server Error",
                    message="An internal error occurred. Please try again later.",
                )
            else:
                content = ErrorResponse(
                    error="Internal Server Error",
                    message=f"{type(e).__name__}: {str(e)}",
                    traceback=tb_str,
                )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content.model_dump(exclude_none=True),
            )
