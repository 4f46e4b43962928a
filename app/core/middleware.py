# app/core/middleware.py
import time
import uuid
import logging

from typing import Optional, Set
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware.gzip import GZipMiddleware
from app.core.config import settings

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with a correlation id and logs one line when the
    request arrives and one when the response leaves.
    """

    def __init__(self, app, exclude_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths or {"/health"}

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()
        should_log = request.url.path not in self.exclude_paths

        if should_log:
            logger.info(
                "Incoming request",
                extra={
                    "request_id": request_id,
                    "client_ip": request.client.host if request.client else "unknown",
                    "method": request.method,
                    "path": request.url.path,
                },
            )

        # exceptions are turned into responses by the registered handlers
        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        if should_log:
            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "status_code": response.status_code,
                    "process_time_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects bodies larger than ``max_size`` bytes with a 413."""

    def __init__(self, app, max_size: int):
        super().__init__(app)
        self.max_size = max_size

    async def dispatch(self, request: Request, call_next):
        content_length = request.headers.get("content-length")

        if content_length and int(content_length) > self.max_size:
            return JSONResponse(
                status_code=413,
                content={
                    "error": "Payload Too Large",
                    "message": f"Request payload exceeds maximum size of {self.max_size} bytes",
                },
            )

        return await call_next(request)


def register_middlewares(app: FastAPI):
    """
    Registers all middlewares. Starlette runs them in reverse order of
    registration, so the logging middleware added last sees every request first.
    """
    app.add_middleware(RequestSizeLimitMiddleware, max_size=settings.MAX_REQUEST_SIZE)
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    allowed_hosts = _split_setting(settings.ALLOWED_HOSTS)
    if allowed_hosts and "*" not in allowed_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=allowed_hosts)
    else:
        logger.warning("TrustedHostMiddleware disabled: ALLOWED_HOSTS allows any host")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_split_setting(settings.CORS_ORIGINS),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(
        RequestLoggingMiddleware, exclude_paths=settings.LOGGING_EXCLUDE_PATHS
    )

    logger.info("All middlewares registered successfully")


def _split_setting(value: str) -> list[str]:
    """Parse a comma separated setting into a list of non-empty entries."""
    return [item.strip() for item in value.split(",") if item.strip()]
