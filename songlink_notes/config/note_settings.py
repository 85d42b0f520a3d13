"""
Note settings: the three user-editable template fields and their persistence
"""

import json
from pathlib import Path
from typing import Any

import aiofiles
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from songlink_notes.errors import SettingsError

logger = structlog.get_logger(__name__)

DEFAULT_NOTE_CONTENT_TEMPLATE = """---
created: "{{now}}"
title: "{{title}}"
artist: "{{artistName}}"
thumbnail: "{{thumbnailUrl}}"
spotify: "{{spotifyUrl}}"
youtube: "{{youtubeUrl}}"
youtube-music: "{{youtubeMusicUrl}}"
apple-music: "{{appleMusicUrl}}"
amazon-music: "{{amazonMusicUrl}}"
songlink: "{{songlinkUrl}}"
---"""

DEFAULT_NOTE_FILENAME_TEMPLATE = "{{artistName}} - {{title}}"

DEFAULT_NOTE_DIRECTORY = "Music"


class NoteSettings(BaseModel):
    """User-editable note settings, stored with camelCase keys"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    note_filename_template: str = Field(
        DEFAULT_NOTE_FILENAME_TEMPLATE, alias="noteFilenameTemplate"
    )
    note_content_template: str = Field(
        DEFAULT_NOTE_CONTENT_TEMPLATE, alias="noteContentTemplate"
    )
    note_directory: str = Field(DEFAULT_NOTE_DIRECTORY, alias="noteDirectory")


class SettingsStore:
    """Loads and persists ``NoteSettings`` as a JSON file.

    Persisted values are merged over the built-in defaults, so a partially
    written file still yields a complete settings value. Every change made
    through :meth:`update` is written back immediately.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._settings: NoteSettings | None = None

    @property
    def settings(self) -> NoteSettings:
        if self._settings is None:
            raise SettingsError("Settings have not been loaded")
        return self._settings

    async def load(self) -> NoteSettings:
        """Read persisted settings, falling back to defaults when absent"""
        data: dict[str, Any] = {}
        if self.path.exists():
            try:
                async with aiofiles.open(self.path, encoding="utf-8") as f:
                    raw = await f.read()
                data = json.loads(raw) if raw.strip() else {}
            except (OSError, json.JSONDecodeError) as e:
                raise SettingsError(f"Cannot read settings file {self.path}: {e}") from e

            if not isinstance(data, dict):
                raise SettingsError(f"Settings file {self.path} must hold an object")

        try:
            self._settings = NoteSettings.model_validate(data)
        except ValidationError as e:
            raise SettingsError(f"Invalid settings in {self.path}: {e}") from e

        logger.debug("Note settings loaded", path=str(self.path), persisted=bool(data))
        return self._settings

    async def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self.settings.model_dump(by_alias=True), indent=2)
        async with aiofiles.open(self.path, "w", encoding="utf-8") as f:
            await f.write(payload)
        logger.debug("Note settings saved", path=str(self.path))

    async def update(self, field: str, value: str) -> NoteSettings:
        """Set one field (snake_case or camelCase name) and persist"""
        name = self._resolve_field(field)
        self._settings = self.settings.model_copy(update={name: value})
        await self.save()
        logger.info("Note setting updated", field=name)
        return self._settings

    async def reset(self) -> NoteSettings:
        self._settings = NoteSettings()
        await self.save()
        logger.info("Note settings reset to defaults")
        return self._settings

    @staticmethod
    def _resolve_field(field: str) -> str:
        for name, info in NoteSettings.model_fields.items():
            if field in (name, info.alias):
                return name
        raise SettingsError(f"Unknown settings field: {field}")
