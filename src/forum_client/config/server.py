"""Reference backend configuration for the forum client."""

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ServerSettings(BaseSettings):
    """Reference backend settings."""

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8080, description="Server port")
    reload: bool = Field(default=False, description="Auto-reload on changes")

    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    seed_data: bool = Field(
        default=True, description="Populate the store with demo users and content"
    )

    model_config = SettingsConfigDict(env_prefix="FORUM_SERVER_", case_sensitive=False)


def get_server_settings() -> ServerSettings:
    """Get reference backend settings from environment variables."""
    return ServerSettings()
