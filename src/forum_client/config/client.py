"""Client configuration for the forum client."""

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class ClientSettings(BaseSettings):
    """Forum backend connection settings."""

    base_url: str = Field(
        default="http://localhost:8080", description="Forum backend base URL"
    )
    # None disables timeouts entirely; a hung request keeps the loading flag set
    request_timeout: float | None = Field(
        default=None, description="Request timeout in seconds (None = no timeout)"
    )
    user_agent: str = Field(
        default="forum-client/0.1.0", description="User-Agent header value"
    )

    model_config = SettingsConfigDict(env_prefix="FORUM_CLIENT_", case_sensitive=False)


def get_client_settings() -> ClientSettings:
    """Get client settings from environment variables."""
    return ClientSettings()
