"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Paths
    CONFIG_DIR: Path = Path.home() / ".sequenceforge"
    PRESETS_PATH: Path = CONFIG_DIR / "presets.json"

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = {"env_prefix": "SEQUENCEFORGE_"}


settings = Settings()
