"""Client configuration using Pydantic Settings.

Values are read from environment variables when not passed explicitly.
No secrets are hardcoded.
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from sajari_sdk.transforms import Transform


class Environment(str, Enum):
    """Runtime environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class ClientSettings(BaseSettings):
    """Connection and call configuration for a Client.

    Every Client receives one of these at construction time; the
    environment only supplies defaults.
    """

    model_config = SettingsConfigDict(env_prefix="SAJARI_", frozen=True)

    endpoint: str = Field(
        default="https://api.sajari.com",
        description="Base URL of the RPC gateway",
    )
    user_agent: str = Field(
        default="sdk-python-0.1.0",
        description="User-Agent sent with every call",
    )
    timeout: float = Field(
        default=30.0,
        description="Per-call transport timeout in seconds",
    )
    project: str = Field(
        default="",
        description="Default project name",
    )
    collection: str = Field(
        default="",
        description="Default collection name",
    )
    key_id: str | None = Field(
        default=None,
        description="Key ID used for key/secret credentials",
    )
    key_secret: SecretStr | None = Field(
        default=None,
        description="Key secret used for key/secret credentials",
    )
    default_add_transforms: tuple[Transform, ...] = Field(
        default=(Transform.SPLIT_STOP_STEM_INDEXED_FIELDS,),
        description="Transforms applied when adding records without explicit transforms",
    )


class Settings(BaseSettings):
    """Top-level settings.

    Aggregates all configuration sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    client: ClientSettings = Field(default_factory=ClientSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()
