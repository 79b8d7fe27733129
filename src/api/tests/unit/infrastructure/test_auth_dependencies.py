"""Unit tests for the access control dependencies."""

from unittest.mock import MagicMock

import pytest
from pydantic import SecretStr

from infrastructure.auth_dependencies import require_allowed_client, require_api_token
from infrastructure.settings import SecuritySettings
from shared_kernel.auth import (
    AccessControlProbe,
    ForbiddenError,
    IPAllowlist,
    UnauthenticatedError,
)


@pytest.fixture
def access_probe() -> MagicMock:
    return MagicMock(spec=AccessControlProbe)


def _settings(token: str | None) -> SecuritySettings:
    return SecuritySettings(
        api_token=SecretStr(token) if token else None, _env_file=None
    )


class TestRequireApiToken:
    """Tests for the bearer token dependency."""

    @pytest.mark.asyncio
    async def test_matching_token_passes(self, access_probe):
        await require_api_token(_settings("s3cret"), access_probe, "Bearer s3cret")

        access_probe.token_rejected.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("token", "authorization", "reason"),
        [
            (None, "Bearer anything", "api_token_not_configured"),
            ("s3cret", None, "missing_bearer_token"),
            ("s3cret", "Basic czNjcmV0", "missing_bearer_token"),
            ("s3cret", "Bearer wrong", "token_mismatch"),
        ],
    )
    async def test_rejection_is_recorded_with_reason(
        self, access_probe, token, authorization, reason
    ):
        with pytest.raises(UnauthenticatedError):
            await require_api_token(_settings(token), access_probe, authorization)

        access_probe.token_rejected.assert_called_once_with(reason)


class TestRequireAllowedClient:
    """Tests for the client address dependency."""

    @pytest.mark.asyncio
    async def test_empty_allowlist_admits_anyone(self, access_probe):
        await require_allowed_client(
            IPAllowlist.from_csv(""), "203.0.113.9", access_probe
        )

        access_probe.client_address_denied.assert_not_called()

    @pytest.mark.asyncio
    async def test_listed_address_passes(self, access_probe):
        await require_allowed_client(
            IPAllowlist.from_csv("10.0.0.1, 10.0.0.2"), "10.0.0.2", access_probe
        )

        access_probe.client_address_denied.assert_not_called()

    @pytest.mark.asyncio
    async def test_unlisted_address_is_denied_and_recorded(self, access_probe):
        with pytest.raises(ForbiddenError):
            await require_allowed_client(
                IPAllowlist.from_csv("10.0.0.1"), "203.0.113.9", access_probe
            )

        access_probe.client_address_denied.assert_called_once_with("203.0.113.9")
