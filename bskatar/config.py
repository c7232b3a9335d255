"""
Configuration for the bskatar service.

Uses pydantic-settings for environment-based configuration with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Example: BSKATAR_SERVICE_URL=https://pds.example.com
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    # AT Protocol personal data server holding the avatar records
    BSKATAR_SERVICE_URL: str = Field(
        default="https://bsky.social",
        description="Base URL of the PDS used for login and record storage"
    )
    BSKATAR_HTTP_TIMEOUT_S: float = Field(
        default=15.0,
        description="Timeout for each request to the PDS"
    )

    BSKATAR_LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level applied at startup"
    )

    CORS_ORIGINS: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        description="Comma-separated list of allowed browser origins"
    )

    SERVICE_NAME: str = Field(default="bskatar", description="Service name for logging and health checks")
    SERVICE_VERSION: str = Field(default="0.1.0", description="Service version")

    @property
    def cors_origins(self) -> list[str]:
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]


# Singleton settings instance
settings = Settings()
