"""API settings configuration."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Settings for the speech API server."""

    model_config = SettingsConfigDict(
        env_prefix="SPEECHBASE_API_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(
        default=8000,
        validation_alias=AliasChoices("SPEECHBASE_API_PORT", "PORT"),
    )
    log_level: str = "info"
    debug: bool = False


settings = APISettings()
