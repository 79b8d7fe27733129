"""Main FastAPI application entry point."""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from infrastructure.database.exceptions import DatabaseConfigurationError
from infrastructure.database.gateway import PersistenceGateway
from infrastructure.dependencies import get_persistence_gateway
from infrastructure.error_handlers import register_error_handlers
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe, StartupProbe
from infrastructure.settings import (
    AppSettings,
    DatabaseSettings,
    SecuritySettings,
    get_app_settings,
    get_database_settings,
    get_security_settings,
)
from infrastructure.version import __version__
from ingestion.presentation import register_ingestion_error_handlers
from ingestion.presentation import router as ingestion_router
from shared_kernel.auth import IPAllowlist
from shared_kernel.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware

GREETING = "Telemetry ingest API running"

system_router = APIRouter(tags=["system"])


@system_router.get(
    "/health",
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {
            "description": "Database unreachable",
            "content": {
                "application/json": {
                    "example": {"ok": False, "error": "db_unreachable"}
                }
            },
        }
    },
)
async def health(
    gateway: Annotated[PersistenceGateway, Depends(get_persistence_gateway)],
) -> JSONResponse:
    """Liveness probe; checks that the database answers ``SELECT 1``.

    Unauthenticated so orchestration can call it.
    """
    if await gateway.ping():
        return JSONResponse(content={"ok": True})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "error": "db_unreachable"},
    )


@system_router.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Static greeting."""
    return GREETING


@asynccontextmanager
async def ingest_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Connection pool lifecycle (opened lazily, disposed on shutdown)
    """
    try:
        yield
    finally:
        await app.state.persistence_gateway.dispose()
        app.state.startup_probe.service_stopped()


def create_app(
    app_settings: AppSettings | None = None,
    database_settings: DatabaseSettings | None = None,
    security_settings: SecuritySettings | None = None,
    gateway: PersistenceGateway | None = None,
    startup_probe: StartupProbe | None = None,
) -> FastAPI:
    """Build the application with explicitly injected collaborators.

    Anything not passed in is loaded from the environment. A pre-built
    ``gateway`` takes precedence over ``database_settings``.

    Raises:
        pydantic.ValidationError: If settings are needed but DATABASE_URL is unset.
        DatabaseConfigurationError: If DATABASE_URL is not a PostgreSQL URL.
    """
    app_settings = app_settings or get_app_settings()
    security_settings = security_settings or get_security_settings()
    startup_probe = startup_probe or DefaultStartupProbe()
    if gateway is None:
        gateway = PersistenceGateway.from_settings(
            database_settings or get_database_settings()
        )

    api_token = security_settings.api_token
    if api_token is None or not api_token.get_secret_value():
        startup_probe.api_token_not_configured()

    app = FastAPI(
        title=app_settings.app_name,
        description="Authenticated ingestion of user telemetry messages",
        version=__version__,
        lifespan=ingest_lifespan,
    )

    app.state.app_settings = app_settings
    app.state.security_settings = security_settings
    app.state.ip_allowlist = IPAllowlist.from_csv(security_settings.allow_ips)
    app.state.persistence_gateway = gateway
    app.state.startup_probe = startup_probe

    # Last added runs first: request logging wraps everything.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=security_settings.allowed_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    register_error_handlers(app)
    register_ingestion_error_handlers(app)

    app.include_router(system_router)
    app.include_router(ingestion_router)

    return app


def _describe_settings_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
        for err in error.errors()
    )


def _mentions_field(error: ValidationError, field: str) -> bool:
    return any(field in err["loc"] for err in error.errors())


def run() -> None:
    """Load configuration, fail fast on a missing database URL, and serve."""
    app_settings = get_app_settings()
    configure_logging(app_settings.environment)
    probe = DefaultStartupProbe()

    try:
        gateway = PersistenceGateway.from_settings(get_database_settings())
    except ValidationError as e:
        if _mentions_field(e, "database_url"):
            probe.database_url_missing(_describe_settings_error(e))
        else:
            probe.settings_invalid(_describe_settings_error(e))
        sys.exit(1)
    except DatabaseConfigurationError as e:
        probe.database_url_missing(str(e))
        sys.exit(1)

    app = create_app(app_settings=app_settings, gateway=gateway, startup_probe=probe)

    probe.service_starting(
        host=app_settings.host,
        port=app_settings.port,
        environment=app_settings.environment,
    )
    uvicorn.run(
        app,
        host=app_settings.host,
        port=app_settings.port,
        access_log=False,
    )


if __name__ == "__main__":
    run()
