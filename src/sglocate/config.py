"""
Process-wide settings for sglocate.

Values come from the environment or a ``.env`` file in the working
directory. Entry points call load_settings() once at startup and hand
the result to the components that need it.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ONEMAP_API_URL = "https://www.onemap.gov.sg/api/common/elastic/search"
PACKAGE_STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """sglocate settings."""

    # OneMap
    ONEMAP_API_URL: str = DEFAULT_ONEMAP_API_URL
    ONEMAP_API_KEY: Optional[str] = None
    ONEMAP_TIMEOUT: Optional[float] = None   # seconds; None keeps the requests default

    # HTTP server
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    STATIC_DIR: Optional[Path] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def static_dir(self) -> Path:
        return self.STATIC_DIR or PACKAGE_STATIC_DIR


def load_settings(**overrides) -> Settings:
    """Resolve settings from the environment, applying explicit overrides."""
    return Settings(**overrides)
