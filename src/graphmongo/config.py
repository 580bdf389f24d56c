"""
Configuration management for the graphmongo backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    # MONGO_URI is read without the prefix so existing deployments keep working
    mongo_uri: str | None = Field(
        default=None,
        validation_alias=AliasChoices("MONGO_URI", "mongo_uri"),
    )
    mongo_database: str | None = None
    mongo_connect_timeout: float = 10.0  # seconds, bounds the whole bootstrap
    mongo_server_selection_timeout_ms: int = 5000
    app_name: str = "graphmongo"

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Logging
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "GRAPHMONGO_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()
