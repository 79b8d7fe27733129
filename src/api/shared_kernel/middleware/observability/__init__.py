"""Observability for shared middleware operations."""

from shared_kernel.middleware.observability.request_log_probe import (
    DefaultRequestLogProbe,
    RequestLogProbe,
)

__all__ = [
    "DefaultRequestLogProbe",
    "RequestLogProbe",
]
