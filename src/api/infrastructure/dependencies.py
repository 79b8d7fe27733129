"""Shared infrastructure dependencies.

Resolves the objects constructed once at startup (settings, the persistence
gateway, the client allowlist) from ``app.state``. Does NOT import from
bounded contexts to maintain DDD boundaries.
"""

from fastapi import Request

from infrastructure.database.gateway import PersistenceGateway
from infrastructure.settings import AppSettings, SecuritySettings
from shared_kernel.auth.allowlist import IPAllowlist, resolve_client_address
from shared_kernel.observability_context import ObservationContext


def get_persistence_gateway(request: Request) -> PersistenceGateway:
    """Get the application-scoped persistence gateway.

    The gateway (and its pool) is shared across all requests.
    """
    return request.app.state.persistence_gateway


def get_app_settings_dep(request: Request) -> AppSettings:
    """Get the settings the app was built with."""
    return request.app.state.app_settings


def get_security_settings_dep(request: Request) -> SecuritySettings:
    """Get the access control settings the app was built with."""
    return request.app.state.security_settings


def get_ip_allowlist(request: Request) -> IPAllowlist:
    """Get the client allowlist parsed at startup."""
    return request.app.state.ip_allowlist


def get_client_address(request: Request) -> str:
    """Resolve the caller's address (X-Forwarded-For first, then the peer)."""
    return resolve_client_address(
        request.headers.get("x-forwarded-for"),
        request.client.host if request.client else None,
    )


def get_observation_context(request: Request) -> ObservationContext:
    """Build the observation context for probes used in this request."""
    return ObservationContext(
        request_id=getattr(request.state, "request_id", None),
        client_ip=get_client_address(request) or None,
    )
