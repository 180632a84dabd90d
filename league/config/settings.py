"""Application settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAGUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application paths
    data_path: str = "data"
    output_path: str = "output"

    # Scoring policy used when a season does not set its own
    default_best_legs_count: int = 8

    # Logging
    log_level: str = "INFO"
    debug: bool = False

    @property
    def data_dir(self) -> Path:
        """Get data directory as Path object."""
        return Path(self.data_path)

    @property
    def output_dir(self) -> Path:
        """Get output directory as Path object."""
        return Path(self.output_path)

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG when debug is on."""
        return "DEBUG" if self.debug else self.log_level.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
