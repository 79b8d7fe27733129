"""Shared-secret bearer token check.

Pure functions of (Authorization header, configured secret); no I/O.
"""

from __future__ import annotations

import secrets

from shared_kernel.auth.exceptions import UnauthenticatedError

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from a ``Bearer <token>`` header value.

    The scheme match is exact (case-sensitive, single space). Any other
    scheme, or a missing header, yields None.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :]


def is_authorized(authorization: str | None, secret: str | None) -> bool:
    """Check a header value against the configured secret.

    Fails closed: with no secret configured nothing is authorized.
    """
    if not secret:
        return False
    token = extract_bearer_token(authorization)
    if token is None:
        return False
    return secrets.compare_digest(token.encode("utf-8"), secret.encode("utf-8"))


def verify_bearer_token(authorization: str | None, secret: str | None) -> None:
    """Raise UnauthenticatedError unless the header carries the secret.

    Raises:
        UnauthenticatedError: If the check fails for any reason.
    """
    if not is_authorized(authorization, secret):
        raise UnauthenticatedError("Missing or invalid bearer token")
