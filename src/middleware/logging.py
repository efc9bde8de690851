"""Request logging middleware."""

import time

from fastapi import FastAPI, Request
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

http_log = logger.bind(module="HTTP")

# Polled by load balancers; logged at DEBUG only
QUIET_PATHS = frozenset({"/health"})


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Logs one line per request: method, path, query, status and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        line = f"{request.method} {target} {response.status_code} ({elapsed_ms:.0f}ms)"

        if request.url.path in QUIET_PATHS:
            http_log.debug(line)
        elif response.status_code >= 500:
            http_log.warning(line)
        else:
            http_log.info(line)

        return response


def setup_logging(app: FastAPI) -> None:
    """Attach the request log middleware."""
    app.add_middleware(RequestLogMiddleware)
