"""Request Logging — one access log line per request.

Invariants:
    - Logs method, path, status_code and duration_ms as structured extras
    - Requests that raise past the error handlers are logged as 500 and re-raised
"""

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger("bookclub.access")


def register_request_logging(app: FastAPI) -> None:
    """Attach the access-log middleware to the app."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.info(
                f"{request.method} {request.url.path} {status_code}",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                },
            )
