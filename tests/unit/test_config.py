"""Test configuration module"""

import json
from pathlib import Path

import pytest

from songlink_notes.config import (
    DEFAULT_NOTE_CONTENT_TEMPLATE,
    NoteSettings,
    SettingsStore,
    get_settings,
    override_settings,
)
from songlink_notes.errors import SettingsError


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    """Settings are built from environment variables"""
    monkeypatch.setenv("OBSIDIAN_VAULT_PATH", str(tmp_path / "MyVault"))
    monkeypatch.setenv("MISSING_VALUE", "")
    monkeypatch.delenv("OBSIDIAN_VAULT_NAME")

    settings = get_settings(refresh=True)

    assert settings.obsidian_vault_path == tmp_path / "MyVault"
    assert settings.vault_name == "MyVault"
    assert settings.missing_value == ""
    assert settings.open_after_create is False
    assert settings.songlink_api_url == "https://api.song.link/v1-alpha.1/links"


def test_default_note_settings_path(tmp_path) -> None:
    settings = get_settings()
    assert settings.note_settings_path == (
        tmp_path / "vault" / ".obsidian" / "plugins" / "songlink" / "data.json"
    )


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()


def test_override_settings_restores_previous() -> None:
    original = get_settings()
    with override_settings(missing_value="n/a") as patched:
        assert get_settings() is patched
        assert patched.missing_value == "n/a"
    assert get_settings() is original


class TestNoteSettings:
    def test_defaults(self) -> None:
        settings = NoteSettings()
        assert settings.note_filename_template == "{{artistName}} - {{title}}"
        assert settings.note_directory == "Music"
        assert settings.note_content_template == DEFAULT_NOTE_CONTENT_TEMPLATE
        assert settings.note_content_template.startswith("---\n")

    def test_camel_case_aliases(self) -> None:
        settings = NoteSettings.model_validate({"noteDirectory": "Songs"})
        assert settings.note_directory == "Songs"
        assert settings.model_dump(by_alias=True)["noteDirectory"] == "Songs"


@pytest.mark.asyncio
class TestSettingsStore:
    async def test_load_without_file_uses_defaults(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path / "data.json")
        settings = await store.load()
        assert settings == NoteSettings()
        assert not (tmp_path / "data.json").exists()

    async def test_persisted_values_merge_over_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text(
            json.dumps({"noteDirectory": "Songs", "somethingElse": 1}),
            encoding="utf-8",
        )

        settings = await SettingsStore(path).load()

        assert settings.note_directory == "Songs"
        assert settings.note_filename_template == "{{artistName}} - {{title}}"

    async def test_update_persists_immediately(self, tmp_path: Path) -> None:
        path = tmp_path / "plugin" / "data.json"
        store = SettingsStore(path)
        await store.load()

        await store.update("noteFilenameTemplate", "{{now}} {{title}}")
        await store.update("note_directory", "Inbox/Music")

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["noteFilenameTemplate"] == "{{now}} {{title}}"
        assert saved["noteDirectory"] == "Inbox/Music"
        assert saved["noteContentTemplate"] == DEFAULT_NOTE_CONTENT_TEMPLATE

        reloaded = await SettingsStore(path).load()
        assert reloaded == store.settings

    async def test_update_unknown_field(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path / "data.json")
        await store.load()
        with pytest.raises(SettingsError):
            await store.update("noteColor", "red")

    async def test_reset(self, tmp_path: Path) -> None:
        store = SettingsStore(tmp_path / "data.json")
        await store.load()
        await store.update("noteDirectory", "Elsewhere")

        settings = await store.reset()

        assert settings == NoteSettings()

    async def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SettingsError):
            await SettingsStore(path).load()

    async def test_settings_before_load(self, tmp_path: Path) -> None:
        with pytest.raises(SettingsError):
            SettingsStore(tmp_path / "data.json").settings
