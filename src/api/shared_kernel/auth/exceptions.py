"""Access control exceptions shared by every protected route."""


class AccessDeniedError(Exception):
    """Base class for requests rejected before reaching a handler."""

    pass


class UnauthenticatedError(AccessDeniedError):
    """Raised when the bearer token is missing, malformed, or wrong."""

    pass


class ForbiddenError(AccessDeniedError):
    """Raised when the client address is not on the allowlist."""

    def __init__(self, address: str):
        super().__init__(f"Client address not allowed: {address or '<unknown>'}")
        self.address = address
