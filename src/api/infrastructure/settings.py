"""Application settings using pydantic-settings.

Settings are loaded from environment variables (and an optional `.env` file)
with sensible defaults for development. `DATABASE_URL` has no default and must
be set explicitly.
"""

from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

_TRUTHY_FLAGS = frozenset({"1", "true", "yes", "on"})


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        DATABASE_URL: PostgreSQL connection URL (required)
        PGSSL_DISABLE: "1" (or true/yes/on) disables TLS to the database;
            any other value keeps TLS on (default: false)
        DB_POOL_SIZE: Pooled connections kept open (default: 5)
        DB_MAX_OVERFLOW: Extra connections allowed beyond the pool (default: 0)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    database_url: SecretStr = Field(
        ...,
        description="PostgreSQL connection URL (postgres:// or postgresql://)",
    )
    pgssl_disable: bool = Field(
        default=False,
        description="Disable TLS to the database (default trusts any certificate)",
    )
    db_pool_size: int = Field(
        default=5,
        description="Pooled connections kept open",
        ge=1,
        le=100,
    )
    db_max_overflow: int = Field(
        default=0,
        description="Extra connections allowed beyond the pool",
        ge=0,
        le=100,
    )

    @field_validator("pgssl_disable", mode="before")
    @classmethod
    def _parse_pgssl_disable(cls, value: Any) -> bool:
        """Only an explicit truthy flag disables TLS; anything else keeps it on."""
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUTHY_FLAGS

    @property
    def redacted_url(self) -> str:
        """Connection URL with the password masked (for logging)."""
        return make_url(self.database_url.get_secret_value()).render_as_string(
            hide_password=True
        )


class SecuritySettings(BaseSettings):
    """Access control settings for protected routes.

    Environment variables:
        API_TOKEN: Shared bearer secret (unset: every protected request is 401)
        ALLOW_IPS: Comma-separated client IP allowlist (empty: unrestricted)
        ALLOW_ORIGIN: Comma-separated CORS origins, or "*" (default: *)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    api_token: SecretStr | None = Field(
        default=None,
        description="Shared bearer secret for protected routes",
    )
    allow_ips: str = Field(
        default="",
        description="Comma-separated client IP allowlist",
    )
    allow_origin: str = Field(
        default="*",
        description="Comma-separated CORS origins, or *",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parsed CORS origins; ["*"] allows any origin."""
        if self.allow_origin.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.allow_origin.split(",") if o.strip()]


class AppSettings(BaseSettings):
    """Server and runtime settings.

    Environment variables:
        HOST: Listen address (default: 0.0.0.0)
        PORT: Listen port (default: 3000)
        NODE_ENV / ENVIRONMENT: "production" switches to JSON logs at INFO
        BODY_LIMIT_BYTES: Maximum ingest body size (default: 262144)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    app_name: str = Field(
        default="Telemetry Ingest API", description="Application name"
    )
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, description="Listen port", ge=1, le=65535)
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Runtime environment; affects logging only",
    )
    body_limit_bytes: int = Field(
        default=256 * 1024,
        description="Maximum ingest request body size in bytes",
        ge=1,
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return AppSettings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Raises:
        pydantic.ValidationError: If DATABASE_URL is not set.
    """
    return DatabaseSettings()


@lru_cache
def get_security_settings() -> SecuritySettings:
    """Get cached security settings."""
    return SecuritySettings()
