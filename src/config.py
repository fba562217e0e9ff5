"""
OPSIS control panel configuration.

Nothing is required at startup. Every setting has a default suitable for a
packaged desktop install; OPSIS_* environment variables (or a .env file)
override them, which is mainly useful in development and tests.

The data directory is resolved once here and then passed explicitly to every
service function. Services never look it up on their own.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.paths import locate_data_dir

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="OPSIS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Data files
    # ------------------------------------------------------------------
    data_dir: Optional[Path] = None  # unset = search beside the executable

    # ------------------------------------------------------------------
    # Local command API
    # ------------------------------------------------------------------
    api_host: str = "127.0.0.1"
    api_port: int = 19851
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Tray menu targets
    # ------------------------------------------------------------------
    self_service_url: str = "http://localhost:19850"
    service_name: str = "OPSIS Agent Service"

    def resolve_data_dir(self) -> Path:
        """Return the configured data directory, or locate one next to the executable."""
        if self.data_dir is not None:
            return self.data_dir
        return locate_data_dir()

    def resolved_log_level(self) -> str:
        """Return log_level upper-cased, falling back to INFO if it isn't a level name."""
        level = self.log_level.strip().upper()
        return level if level in _LOG_LEVELS else "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings singleton.

    In tests, clear the cache with get_settings.cache_clear() after
    patching environment variables, or instantiate Settings() directly
    with _env_file=None to avoid reading the .env file.
    """
    return Settings()
