"""Best-effort opening of a created note in Obsidian"""

import asyncio
import webbrowser
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote, urlencode

from songlink_notes.utils.error_handler import safe_with_default
from songlink_notes.utils.mixins import LoggerMixin


@dataclass
class OpenResult:
    """Outcome of an open request. Failures carry a warning, never raise."""

    opened: bool
    uri: str | None = None
    warning: str | None = None


class NoteOpener(LoggerMixin):
    """Opens notes through ``obsidian://open`` URIs"""

    def __init__(
        self,
        vault_path: Path,
        vault_name: str,
        launcher: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self.vault_path = Path(vault_path)
        self.vault_name = vault_name
        self._launcher = launcher

    def open_uri(self, file_path: Path) -> str:
        relative = file_path.relative_to(self.vault_path).as_posix()
        query = urlencode({"vault": self.vault_name, "file": relative}, quote_via=quote)
        return f"obsidian://open?{query}"

    async def open(self, file_path: Path) -> OpenResult:
        if not file_path.is_file():
            return self._warn(f"Note is not a file: {file_path}")

        try:
            uri = self.open_uri(file_path)
        except ValueError:
            return self._warn(f"Note is outside the vault: {file_path}")

        launched = await asyncio.to_thread(self._launch, uri)
        if not launched:
            return self._warn(f"Could not open {uri}", uri=uri)

        self.logger.info("Note opened", uri=uri)
        return OpenResult(opened=True, uri=uri)

    @safe_with_default("launch obsidian URI", False)
    def _launch(self, uri: str) -> bool:
        return bool(self._launcher(uri))

    def _warn(self, message: str, uri: str | None = None) -> OpenResult:
        self.logger.warning("Note not opened", reason=message)
        return OpenResult(opened=False, uri=uri, warning=message)
