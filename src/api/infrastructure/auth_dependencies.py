"""Access control dependencies for protected routes.

``require_api_token`` is meant to be attached at router level so it runs
before any endpoint dependency; ``require_allowed_client`` is declared by the
endpoint itself.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header

from infrastructure.dependencies import (
    get_client_address,
    get_ip_allowlist,
    get_observation_context,
    get_security_settings_dep,
)
from infrastructure.settings import SecuritySettings
from shared_kernel.auth import (
    AccessControlProbe,
    DefaultAccessControlProbe,
    ForbiddenError,
    IPAllowlist,
    UnauthenticatedError,
    extract_bearer_token,
    verify_bearer_token,
)
from shared_kernel.observability_context import ObservationContext


def get_access_control_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> AccessControlProbe:
    """Get AccessControlProbe instance bound to the request context."""
    return DefaultAccessControlProbe().with_context(context)


async def require_api_token(
    settings: Annotated[SecuritySettings, Depends(get_security_settings_dep)],
    probe: Annotated[AccessControlProbe, Depends(get_access_control_probe)],
    authorization: Annotated[str | None, Header()] = None,
) -> None:
    """Reject the request unless it carries ``Bearer <API_TOKEN>``.

    Raises:
        UnauthenticatedError: If no secret is configured, the header is
            missing or uses another scheme, or the token does not match.
    """
    secret = settings.api_token.get_secret_value() if settings.api_token else None

    try:
        verify_bearer_token(authorization, secret)
    except UnauthenticatedError:
        probe.token_rejected(_rejection_reason(authorization, secret))
        raise


async def require_allowed_client(
    allowlist: Annotated[IPAllowlist, Depends(get_ip_allowlist)],
    address: Annotated[str, Depends(get_client_address)],
    probe: Annotated[AccessControlProbe, Depends(get_access_control_probe)],
) -> None:
    """Reject the request when the allowlist is set and lacks the caller.

    Raises:
        ForbiddenError: If the resolved client address is not allowed.
    """
    try:
        allowlist.check(address)
    except ForbiddenError:
        probe.client_address_denied(address)
        raise


def _rejection_reason(authorization: str | None, secret: str | None) -> str:
    if not secret:
        return "api_token_not_configured"
    if extract_bearer_token(authorization) is None:
        return "missing_bearer_token"
    return "token_mismatch"
