"""Application settings and configuration.

This module defines all configuration options for the Workshop API.
Settings are loaded from environment variables with sensible defaults.
"""

import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Workshop API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Backing file for the document store
    data_path: Path = Field(
        default=Path(tempfile.gettempdir()) / "db.json",
        alias="DATA_PATH",
    )

    # The single client allowed to use the client-credentials grant
    oauth_client_id: str = Field(default="workshop_client_12345", alias="OAUTH_CLIENT_ID")
    oauth_client_secret: str = Field(
        default="secret_abc123xyz789",
        alias="OAUTH_CLIENT_SECRET",
    )

    # Issued token shape; expires_in is reported but never enforced
    token_prefix: str = Field(default="wks_token_", alias="TOKEN_PREFIX")
    token_expires_in: int = Field(default=3600, alias="TOKEN_EXPIRES_IN")
    default_scope: str = Field(default="read:data write:data", alias="DEFAULT_SCOPE")

    # CORS configuration for browser-based API clients
    cors_origins: list[str] = Field(
        default=["*"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=False, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(
        default=["*"],
        alias="CORS_ALLOW_HEADERS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )


settings = Settings()
