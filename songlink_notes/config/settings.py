"""Application settings for SongLink Notes with caching utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

SONGLINK_API_URL = "https://api.song.link/v1-alpha.1/links"


class AppSettings(BaseSettings):
    """Process-level settings read from the environment or a .env file"""

    model_config = SettingsConfigDict(
        env_file=[".env.test", ".env"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Obsidian vault
    obsidian_vault_path: Path = Path("./vault")
    obsidian_vault_name: str | None = None  # defaults to the vault folder name

    # Persisted note settings (template fields); defaults inside the vault
    settings_file: Path | None = None

    # song.link lookup
    songlink_api_url: str = SONGLINK_API_URL

    # Rendering of title/artist/thumbnail when no spotify entity exists
    missing_value: str = "undefined"

    # Open the created note in Obsidian
    open_after_create: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    @property
    def vault_name(self) -> str:
        """Vault name used in obsidian:// URIs"""
        return self.obsidian_vault_name or self.obsidian_vault_path.resolve().name

    @property
    def note_settings_path(self) -> Path:
        """Location of the persisted note settings JSON"""
        if self.settings_file is not None:
            return self.settings_file
        return (
            self.obsidian_vault_path / ".obsidian" / "plugins" / "songlink" / "data.json"
        )


_SETTINGS_LOCK = RLock()
_SETTINGS_CACHE: AppSettings | None = None


def get_settings(*, refresh: bool = False) -> AppSettings:
    """Return a cached ``AppSettings`` instance.

    Parameters
    ----------
    refresh:
        When ``True`` the cached instance is discarded and a new one is created.
    """

    global _SETTINGS_CACHE

    with _SETTINGS_LOCK:
        if refresh or _SETTINGS_CACHE is None:
            _SETTINGS_CACHE = AppSettings()
        return _SETTINGS_CACHE


def clear_settings_cache() -> None:
    """Clear the cached settings instance."""

    global _SETTINGS_CACHE

    with _SETTINGS_LOCK:
        _SETTINGS_CACHE = None


@contextmanager
def override_settings(**overrides: Any) -> Iterator[AppSettings]:
    """Temporarily override the cached settings within a context."""

    global _SETTINGS_CACHE

    with _SETTINGS_LOCK:
        previous_settings = _SETTINGS_CACHE

    base_settings = previous_settings or AppSettings()
    patched_settings = base_settings.model_copy(update=overrides)

    with _SETTINGS_LOCK:
        _SETTINGS_CACHE = patched_settings

    try:
        yield patched_settings
    finally:
        with _SETTINGS_LOCK:
            _SETTINGS_CACHE = previous_settings
