"""Access logging middleware.

Binds a request id into structlog contextvars for the duration of the
request, so every log event emitted while handling it carries the id, and
records one access log event per response.
"""

from __future__ import annotations

import re
import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shared_kernel.auth.allowlist import resolve_client_address
from shared_kernel.middleware.observability import (
    DefaultRequestLogProbe,
    RequestLogProbe,
)

REQUEST_ID_HEADER = "X-Request-ID"

# Incoming ids are echoed and logged, so only short token-like values are kept.
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._-]{1,64}")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every request."""

    def __init__(self, app: ASGIApp, probe: RequestLogProbe | None = None):
        super().__init__(app)
        self._probe = probe or DefaultRequestLogProbe()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = _incoming_request_id(request) or uuid.uuid4().hex
        request.state.request_id = request_id
        client_ip = resolve_client_address(
            request.headers.get("x-forwarded-for"),
            request.client.host if request.client else None,
        )
        started = time.perf_counter()

        with structlog.contextvars.bound_contextvars(request_id=request_id):
            try:
                response = await call_next(request)
            except Exception as e:
                self._probe.request_failed(
                    method=request.method,
                    path=request.url.path,
                    duration_ms=_elapsed_ms(started),
                    client_ip=client_ip,
                    error=e,
                )
                raise

            self._probe.request_completed(
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
                client_ip=client_ip,
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def _incoming_request_id(request: Request) -> str | None:
    candidate = request.headers.get(REQUEST_ID_HEADER)
    if candidate and _REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return None
