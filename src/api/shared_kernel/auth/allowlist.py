"""Client IP allowlist.

An empty allowlist means no restriction. Matching is exact string equality
on the resolved client address.
"""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.auth.exceptions import ForbiddenError


def resolve_client_address(forwarded_for: str | None, peer: str | None) -> str:
    """Pick the address to check for a request.

    Prefers the first entry of a non-empty ``X-Forwarded-For`` header and
    falls back to the transport peer address. Returns "" if neither is known.
    """
    raw = forwarded_for or peer or ""
    return raw.split(",")[0].strip()


@dataclass(frozen=True)
class IPAllowlist:
    """Immutable set of permitted client addresses."""

    addresses: frozenset[str] = frozenset()

    @classmethod
    def from_entries(cls, entries: tuple[str, ...] | list[str]) -> IPAllowlist:
        return cls(addresses=frozenset(e.strip() for e in entries if e.strip()))

    @classmethod
    def from_csv(cls, raw: str | None) -> IPAllowlist:
        """Parse a comma-separated list, ignoring blanks."""
        return cls.from_entries((raw or "").split(","))

    def is_allowed(self, address: str) -> bool:
        if not self.addresses:
            return True
        return address in self.addresses

    def check(self, address: str) -> None:
        """Raise ForbiddenError when ``address`` is not permitted.

        Raises:
            ForbiddenError: If the allowlist is non-empty and lacks the address.
        """
        if not self.is_allowed(address):
            raise ForbiddenError(address)
