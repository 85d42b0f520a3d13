"""File operations for writing song notes into the vault."""

from pathlib import Path

import aiofiles
import structlog

logger = structlog.get_logger(__name__)


class NoteWriter:
    """Creates new notes inside the vault. Existing files are never overwritten."""

    def __init__(self, vault_path: Path):
        self.vault_path = Path(vault_path)

    def resolve(self, relative_path: str) -> Path:
        """Absolute path of a vault-relative note path"""
        return self.vault_path / relative_path.lstrip("/")

    async def write_note(self, relative_path: str, content: str) -> Path:
        """Create ``relative_path`` with ``content``.

        Raises:
            FileExistsError: the note already exists
            OSError: the folder cannot be created or written to
        """
        file_path = self.resolve(relative_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            # "x" fails if the file exists, including when a concurrent
            # invocation created it first
            async with aiofiles.open(file_path, "x", encoding="utf-8") as f:
                await f.write(content)
        except OSError as e:
            logger.error(
                "Failed to create note",
                error=str(e),
                file_path=str(file_path),
                exists=file_path.exists(),
            )
            raise

        logger.info("Note created", file_path=str(file_path), size=len(content))
        return file_path
