"""
Shared fixtures.

- Test environment variables are set for every test (autouse) and the
  settings cache is cleared around each test
- ``songlink_payload`` is a realistic song.link response
- ``make_session`` builds a stand-in for ``aiohttp.ClientSession``
"""

from __future__ import annotations

import copy
import sys
from pathlib import Path
from typing import Any

import pytest

# Project root on sys.path so ``import songlink_notes`` works without install
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from songlink_notes.config import clear_settings_cache  # noqa: E402

SONGLINK_PAYLOAD: dict[str, Any] = {
    "entityUniqueId": "SPOTIFY_SONG::0DiWol3AO6WpXZgp0goxAV",
    "userCountry": "US",
    "pageUrl": "https://song.link/s/0DiWol3AO6WpXZgp0goxAV",
    "linksByPlatform": {
        "amazonMusic": {
            "url": "https://music.amazon.com/albums/B00138F5UG?trackAsin=B00138KM1U",
            "entityUniqueId": "AMAZON_SONG::B00138KM1U",
        },
        "appleMusic": {
            "url": "https://geo.music.apple.com/us/album/_/697194953?i=697195787",
            "entityUniqueId": "ITUNES_SONG::697195787",
        },
        "deezer": {
            "url": "https://www.deezer.com/track/3135553",
            "entityUniqueId": "DEEZER_SONG::3135553",
        },
        "spotify": {
            "url": "https://open.spotify.com/track/0DiWol3AO6WpXZgp0goxAV",
            "entityUniqueId": "SPOTIFY_SONG::0DiWol3AO6WpXZgp0goxAV",
        },
        "youtube": {
            "url": "https://www.youtube.com/watch?v=FGBhQbmPwH8",
            "entityUniqueId": "YOUTUBE_VIDEO::FGBhQbmPwH8",
        },
        "youtubeMusic": {
            "url": "https://music.youtube.com/watch?v=FGBhQbmPwH8",
            "entityUniqueId": "YOUTUBE_VIDEO::FGBhQbmPwH8",
        },
    },
    "entitiesByUniqueId": {
        "DEEZER_SONG::3135553": {
            "id": "3135553",
            "type": "song",
            "title": "One More Time (Radio Edit)",
            "artistName": "Daft Punk",
            "thumbnailUrl": "https://cdns-images.dzcdn.net/images/cover/500x500.jpg",
            "apiProvider": "deezer",
            "platforms": ["deezer"],
        },
        "SPOTIFY_SONG::0DiWol3AO6WpXZgp0goxAV": {
            "id": "0DiWol3AO6WpXZgp0goxAV",
            "type": "song",
            "title": "One More Time",
            "artistName": "Daft Punk",
            "thumbnailUrl": "https://i.scdn.co/image/ab67616d0000b273",
            "apiProvider": "spotify",
            "platforms": ["spotify"],
        },
    },
}


class FakeResponse:
    """Async context manager standing in for ``aiohttp.ClientResponse``"""

    def __init__(
        self,
        status: int = 200,
        payload: Any = None,
        json_error: Exception | None = None,
    ) -> None:
        self.status = status
        self._payload = payload
        self._json_error = json_error

    async def json(self, content_type: str | None = "application/json") -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class FakeSession:
    """Records ``get`` calls and returns a canned response or raises"""

    def __init__(
        self, response: FakeResponse | None = None, error: Exception | None = None
    ) -> None:
        self.response = response or FakeResponse(payload={})
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Test environment variables, restored by ``monkeypatch`` after each test."""

    env: dict[str, str] = {
        "OBSIDIAN_VAULT_PATH": str(tmp_path / "vault"),
        "OBSIDIAN_VAULT_NAME": "TestVault",
        "OPEN_AFTER_CREATE": "false",
        "LOG_LEVEL": "WARNING",
        "LOG_FORMAT": "console",
    }

    for k, v in env.items():
        monkeypatch.setenv(k, v)

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def vault_path(tmp_path: Path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def songlink_payload() -> dict[str, Any]:
    return copy.deepcopy(SONGLINK_PAYLOAD)


@pytest.fixture
def make_session():
    """Factory: ``make_session(payload=..., status=..., error=...)``"""

    def _make(
        payload: Any = None,
        status: int = 200,
        error: Exception | None = None,
        json_error: Exception | None = None,
    ) -> FakeSession:
        response = FakeResponse(status=status, payload=payload, json_error=json_error)
        return FakeSession(response=response, error=error)

    return _make
