"""Authentication shared kernel module."""

from shared_kernel.auth.allowlist import IPAllowlist, resolve_client_address
from shared_kernel.auth.bearer import (
    extract_bearer_token,
    is_authorized,
    verify_bearer_token,
)
from shared_kernel.auth.exceptions import (
    AccessDeniedError,
    ForbiddenError,
    UnauthenticatedError,
)
from shared_kernel.auth.observability import (
    AccessControlProbe,
    DefaultAccessControlProbe,
)

__all__ = [
    "AccessControlProbe",
    "AccessDeniedError",
    "DefaultAccessControlProbe",
    "ForbiddenError",
    "IPAllowlist",
    "UnauthenticatedError",
    "extract_bearer_token",
    "is_authorized",
    "resolve_client_address",
    "verify_bearer_token",
]
