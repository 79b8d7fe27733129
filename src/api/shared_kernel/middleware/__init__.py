"""Shared middleware for cross-cutting concerns.

This module contains ASGI middleware shared by every route: per-request
access logging with a correlation id, and hardening response headers.
"""

from shared_kernel.middleware.request_logging import RequestLoggingMiddleware
from shared_kernel.middleware.security_headers import (
    SECURITY_HEADERS,
    SecurityHeadersMiddleware,
)

__all__ = [
    "RequestLoggingMiddleware",
    "SECURITY_HEADERS",
    "SecurityHeadersMiddleware",
]
