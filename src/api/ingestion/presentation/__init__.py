"""Ingestion presentation layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ingestion.presentation.error_handlers import register_ingestion_error_handlers
    from ingestion.presentation.routes import router

__all__ = ["register_ingestion_error_handlers", "router"]


def __getattr__(name: str) -> Any:
    # Resolved lazily: routes imports ingestion.dependencies, which imports
    # ingestion.presentation.models, so eager imports here form a cycle.
    if name == "register_ingestion_error_handlers":
        from ingestion.presentation.error_handlers import register_ingestion_error_handlers

        return register_ingestion_error_handlers
    if name == "router":
        from ingestion.presentation.routes import router

        return router
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
