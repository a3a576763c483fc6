"""Id client settings using pydantic-settings.

Settings are loaded from environment variables with defaults suitable for
the in-memory hash client.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdClientSettings(BaseSettings):
    """Id client selection and behaviour.

    Environment variables:
        IDCLIENT_CLIENT: Registered client variant (default: hash)
        IDCLIENT_PERSIST_IN_MEMORY: Remember issued analysis ids (default: false)
        IDCLIENT_SERVICE_URI: Identifier service URI for network-backed clients
        IDCLIENT_RELEASE: Release name identifiers are assigned for
        IDCLIENT_LOG_LEVEL: Minimum structlog level (default: info)
    """

    model_config = SettingsConfigDict(
        env_prefix="IDCLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    client: str = Field(default="hash", description="Registered client variant")
    persist_in_memory: bool = Field(
        default=False,
        description="Record accepted and issued analysis ids in memory",
    )
    service_uri: str | None = Field(
        default=None,
        description="Identifier service URI (ignored by the hash client)",
    )
    release: str | None = Field(
        default=None,
        description="Release name (ignored by the hash client)",
    )
    log_level: str = Field(default="info", description="Minimum log level")

    @field_validator("client")
    @classmethod
    def normalize_client(cls, value: str) -> str:
        """Normalize the client name and reject blanks."""
        normalized = value.strip().lower()
        if not normalized:
            raise ValueError("client must not be empty")
        return normalized


@lru_cache
def get_id_client_settings() -> IdClientSettings:
    """Get cached id client settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return IdClientSettings()
