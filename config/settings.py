"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///internmatch.db",
        description="SQLAlchemy database URL holding the skill catalog",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )

    # API
    api_key: Optional[str] = Field(
        default=None,
        description="Shared key expected in the X-API-Key header (unset rejects all calls)",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def skill_catalog_file(self) -> Path:
        """Path to the seed skill catalog."""
        return self.config_dir / "skill_catalog.yaml"

    @property
    def matching_fixtures_file(self) -> Path:
        """Path to the matching sanity-check fixtures."""
        return self.config_dir / "matching_fixtures.yaml"

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()
