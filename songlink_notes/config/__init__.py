"""Configuration module for SongLink Notes"""

from songlink_notes.config.note_settings import (
    DEFAULT_NOTE_CONTENT_TEMPLATE,
    DEFAULT_NOTE_DIRECTORY,
    DEFAULT_NOTE_FILENAME_TEMPLATE,
    NoteSettings,
    SettingsStore,
)
from songlink_notes.config.settings import (
    AppSettings,
    clear_settings_cache,
    get_settings,
    override_settings,
)

__all__ = [
    "AppSettings",
    "get_settings",
    "clear_settings_cache",
    "override_settings",
    "NoteSettings",
    "SettingsStore",
    "DEFAULT_NOTE_CONTENT_TEMPLATE",
    "DEFAULT_NOTE_FILENAME_TEMPLATE",
    "DEFAULT_NOTE_DIRECTORY",
]
