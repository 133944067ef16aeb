"""HTTP request/response logging middleware for FastAPI."""

import time
import logging
from typing import Callable, Optional, Set
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ....infrastructure.logging import (
    generate_correlation_id,
    set_correlation_id,
    clear_correlation_id,
    get_logger
)

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Headers to exclude from logging (sensitive information)
EXCLUDED_HEADERS = {
    'authorization',
    'cookie',
    'set-cookie',
    'x-api-key',
    'x-auth-token',
    'proxy-authorization',
    'www-authenticate',
    'proxy-authenticate'
}

DEFAULT_EXCLUDED_PATHS = frozenset({
    '/health',
    '/docs',
    '/redoc',
    '/openapi.json',
    '/favicon.ico'
})


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses with correlation IDs."""

    def __init__(
        self,
        app: ASGIApp,
        log_request_body: bool = False,
        max_body_size: int = 1024,
        exclude_paths: Optional[Set[str]] = None
    ):
        """
        Initialize the logging middleware.

        Args:
            app: The ASGI application
            log_request_body: Whether to log JSON request bodies
            max_body_size: Maximum body size to log in bytes
            exclude_paths: Set of paths to exclude from logging
        """
        super().__init__(app)
        self.log_request_body = log_request_body
        self.max_body_size = max_body_size
        self.exclude_paths = exclude_paths if exclude_paths is not None else set(DEFAULT_EXCLUDED_PATHS)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and response with logging."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)
        start_time = time.perf_counter()

        try:
            await self._log_request(request, correlation_id)

            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            self._log_response(request, response, duration_ms, correlation_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    "correlation_id": correlation_id,
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "duration_ms": round(duration_ms, 2),
                    "error": str(exc),
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        finally:
            clear_correlation_id()

    async def _log_request(self, request: Request, correlation_id: str) -> None:
        """Log the incoming HTTP request."""
        request_body = None
        if self.log_request_body:
            request_body = await self._get_request_body(request)

        client_host = request.client.host if request.client else 'unknown'

        logger.info(
            f"HTTP Request: {request.method} {request.url.path}",
            extra={
                "correlation_id": correlation_id,
                "request_method": request.method,
                "request_path": request.url.path,
                "request_query": str(request.query_params) if request.query_params else None,
                "request_headers": self._sanitize_headers(dict(request.headers)),
                "request_body": request_body,
                "client_host": client_host,
                "user_agent": request.headers.get('user-agent', 'unknown'),
            }
        )

    def _log_response(
        self,
        request: Request,
        response: Response,
        duration_ms: float,
        correlation_id: str
    ) -> None:
        """Log the HTTP response at a level matching its status code."""
        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
            extra={
                "correlation_id": correlation_id,
                "request_method": request.method,
                "request_path": request.url.path,
                "response_status": response.status_code,
                "response_headers": self._sanitize_headers(dict(response.headers)),
                "duration_ms": round(duration_ms, 2),
            }
        )

    def _sanitize_headers(self, headers: dict) -> dict:
        """Redact sensitive headers."""
        return {
            key: "[REDACTED]" if key.lower() in EXCLUDED_HEADERS else value
            for key, value in headers.items()
        }

    async def _get_request_body(self, request: Request) -> Optional[str]:
        """Get request body for logging if it is small JSON text."""
        content_type = request.headers.get('content-type', '').lower()
        if 'json' not in content_type:
            return None

        body = await request.body()
        if len(body) > self.max_body_size:
            return f"[BODY_TOO_LARGE:{len(body)}_bytes]"

        try:
            return body.decode('utf-8')
        except UnicodeDecodeError:
            return "[BINARY_CONTENT]"
