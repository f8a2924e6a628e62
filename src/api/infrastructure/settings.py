"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Must match the tenant seeded into the reference environment. Changing the
# seed data without updating this value breaks every dev/preview session.
DEFAULT_FALLBACK_TENANT_ID = "a0000000-0000-0000-0000-000000000001"


class BackendSettings(BaseSettings):
    """Managed backend (PostgREST) connection settings.

    Environment variables:
        TENANCY_BACKEND_URL: Base URL of the managed backend project
        TENANCY_BACKEND_ANON_KEY: Public anon key sent as apikey/Bearer
        TENANCY_BACKEND_TIMEOUT_SECONDS: HTTP timeout per request (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANCY_BACKEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="http://localhost:54321",
        description="Base URL of the managed backend project",
    )
    anon_key: SecretStr = Field(
        default=SecretStr(""),
        description="Anon key used for the apikey and Authorization headers",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="HTTP timeout for directory queries",
        gt=0,
        le=120,
    )

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so paths can be appended safely."""
        return value.rstrip("/")

    @property
    def rest_url(self) -> str:
        """Base URL of the REST (PostgREST) interface."""
        return f"{self.url}/rest/v1"

    @property
    def auth_url(self) -> str:
        """Base URL of the auth (GoTrue) interface."""
        return f"{self.url}/auth/v1"


class TenancySettings(BaseSettings):
    """Tenant resolution settings.

    Environment variables:
        TENANCY_FALLBACK_TENANT_ID: Tenant used as last resort outside production
        TENANCY_OVERRIDE_STORE_PATH: JSON file backing the local override cache
        TENANCY_IS_DEV_BUILD: Enables verbose resolution logging (default: false)
        TENANCY_SECURE_COOKIES: Force the Secure cookie flag on or off; unset
            infers it from the request scheme and X-Forwarded-Proto
    """

    model_config = SettingsConfigDict(
        env_prefix="TENANCY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fallback_tenant_id: str = Field(
        default=DEFAULT_FALLBACK_TENANT_ID,
        description="Tenant id used as the static development fallback",
        min_length=1,
    )
    override_store_path: Path = Field(
        default=Path.home() / ".cache" / "imovel-tenancy" / "override.json",
        description="Location of the persisted local override cache",
    )
    is_dev_build: bool = Field(
        default=False,
        description="Enable verbose resolution logging",
    )
    secure_cookies: bool | None = Field(
        default=None,
        description="Secure flag for the override cookie; None infers it per request",
    )


@lru_cache
def get_backend_settings() -> BackendSettings:
    """Get cached backend settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return BackendSettings()


@lru_cache
def get_tenancy_settings() -> TenancySettings:
    """Get cached tenancy settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return TenancySettings()
