"""
Song note pipeline: song.link lookup, entity selection, rendering, write, open
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path

import aiohttp

from songlink_notes.config.note_settings import NoteSettings
from songlink_notes.config.settings import AppSettings
from songlink_notes.errors import EmptyInputError
from songlink_notes.notifier import ConsoleNotifier, Notifier
from songlink_notes.obsidian.file_operations import NoteWriter
from songlink_notes.obsidian.opener import NoteOpener, OpenResult
from songlink_notes.obsidian.template_system import (
    CONTENT_PLACEHOLDERS,
    FILENAME_PLACEHOLDERS,
    GeneratedNote,
    TemplateRenderer,
    build_render_context,
)
from songlink_notes.protocol import ProtocolData, ProtocolRouter
from songlink_notes.songlink.client import SongLinkClient
from songlink_notes.songlink.selector import select_entity
from songlink_notes.utils.mixins import LoggerMixin


class SourceField(Enum):
    """Which activation parameter carries the source URL"""

    GENERIC = "url"
    SPOTIFY_ONLY = "spotifyUrl"

    @property
    def param_name(self) -> str:
        return self.value

    @property
    def action(self) -> str:
        """Protocol action registered for this variant"""
        if self is SourceField.SPOTIFY_ONLY:
            return "spotify-add-song"
        return "songlink-add-song"

    @property
    def content_placeholders(self) -> tuple[str, ...]:
        """Placeholders advertised for the content template.

        The spotify variant's source URL is the spotify link itself, so
        ``spotifyUrl`` is not listed there. It is still substituted.
        """
        if self is SourceField.SPOTIFY_ONLY:
            return tuple(p for p in CONTENT_PLACEHOLDERS if p != "spotifyUrl")
        return CONTENT_PLACEHOLDERS

    @property
    def filename_placeholders(self) -> tuple[str, ...]:
        return FILENAME_PLACEHOLDERS


@dataclass
class NoteResult:
    """Outcome of one successful invocation"""

    source_url: str
    note: GeneratedNote
    file_path: Path
    entity_found: bool
    open_result: OpenResult | None = None


class LinkNoteGenerator(LoggerMixin):
    """Turns a track URL into a new vault note.

    Each call runs one linear pipeline. Lookup and write failures propagate
    to the caller; only an empty activation parameter is reported as a notice.
    Concurrent calls are not coordinated: when two calls render the same
    path, the second write raises ``FileExistsError``.
    """

    def __init__(
        self,
        settings: NoteSettings,
        client: SongLinkClient,
        renderer: TemplateRenderer,
        writer: NoteWriter,
        opener: NoteOpener | None = None,
        notifier: Notifier | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.settings = settings
        self.client = client
        self.renderer = renderer
        self.writer = writer
        self.opener = opener
        self.notifier = notifier or ConsoleNotifier()
        self._today = today

    @classmethod
    def from_settings(
        cls,
        app_settings: AppSettings,
        note_settings: NoteSettings,
        session: aiohttp.ClientSession | None = None,
        notifier: Notifier | None = None,
    ) -> "LinkNoteGenerator":
        vault_path = app_settings.obsidian_vault_path
        opener = (
            NoteOpener(vault_path, app_settings.vault_name)
            if app_settings.open_after_create
            else None
        )
        return cls(
            settings=note_settings,
            client=SongLinkClient(app_settings.songlink_api_url, session=session),
            renderer=TemplateRenderer(missing_value=app_settings.missing_value),
            writer=NoteWriter(vault_path),
            opener=opener,
            notifier=notifier,
        )

    @staticmethod
    def read_source_url(params: Mapping[str, str | None], source: SourceField) -> str:
        value = params.get(source.param_name)
        if not value:
            raise EmptyInputError(source.param_name)
        return value

    async def handle_activation(
        self,
        params: Mapping[str, str | None],
        source: SourceField = SourceField.GENERIC,
    ) -> NoteResult | None:
        """Entry point for a protocol activation.

        Returns ``None`` when the activation carried no URL; nothing is
        requested or written in that case.
        """
        try:
            source_url = self.read_source_url(params, source)
        except EmptyInputError as e:
            self.logger.info("Activation without source URL", field=e.field_name)
            self.notifier.notify(str(e))
            return None

        return await self.generate(source_url)

    async def generate(self, source_url: str) -> NoteResult:
        record = await self.client.resolve(source_url)
        entity = select_entity(record)

        context = build_render_context(record, entity, self._today())
        note = self.renderer.generate(self.settings, context)

        file_path = await self.writer.write_note(note.path, note.content)

        open_result = None
        if self.opener is not None:
            open_result = await self.opener.open(file_path)

        self.logger.info(
            "Song note generated",
            source_url=source_url,
            path=note.path,
            entity_found=entity is not None,
        )
        return NoteResult(
            source_url=source_url,
            note=note,
            file_path=file_path,
            entity_found=entity is not None,
            open_result=open_result,
        )

    def register(self, router: ProtocolRouter) -> None:
        """Register both activation variants on ``router``"""
        for source in SourceField:
            router.register(source.action, self._make_handler(source))

    def _make_handler(self, source: SourceField):
        async def handler(data: ProtocolData) -> NoteResult | None:
            return await self.handle_activation(data.params, source)

        return handler
