"""
Placeholder substitution for note filename and content templates.

Placeholders are ``{{name}}`` tokens replaced literally, one token at a time
in a fixed order. Each replacement runs over the output of the previous one,
so a value containing a token that comes *later* in the order is itself
substituted, while one containing an earlier token is left as is. Tokens
outside the fixed lists are never touched.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from songlink_notes.config.note_settings import NoteSettings
from songlink_notes.obsidian.template_system.base import GeneratedNote
from songlink_notes.obsidian.template_system.context import RenderContext
from songlink_notes.utils.mixins import LoggerMixin

CONTENT_PLACEHOLDERS: tuple[str, ...] = (
    "now",
    "title",
    "artistName",
    "thumbnailUrl",
    "youtubeUrl",
    "youtubeMusicUrl",
    "spotifyUrl",
    "appleMusicUrl",
    "amazonMusicUrl",
    "songlinkUrl",
)

FILENAME_PLACEHOLDERS: tuple[str, ...] = ("now", "title", "artistName")


def placeholder(name: str) -> str:
    return "{{" + name + "}}"


def note_path(note_directory: str, filename: str) -> str:
    """Vault-relative path of a note"""
    return f"{note_directory}/{filename}.md"


class TemplateRenderer(LoggerMixin):
    """Renders note templates from a ``RenderContext``"""

    def __init__(self, missing_value: str = "undefined") -> None:
        # Text written for values the lookup did not provide
        self.missing_value = missing_value

    def render(
        self,
        template: str,
        context: RenderContext | Mapping[str, Any],
        placeholders: Sequence[str] = CONTENT_PLACEHOLDERS,
    ) -> str:
        values = (
            context.as_placeholders()
            if isinstance(context, RenderContext)
            else dict(context)
        )

        rendered = template
        for name in placeholders:
            rendered = rendered.replace(
                placeholder(name), self._stringify(values.get(name))
            )
        return rendered

    def render_filename(
        self, template: str, context: RenderContext | Mapping[str, Any]
    ) -> str:
        return self.render(template, context, FILENAME_PLACEHOLDERS)

    def render_content(
        self, template: str, context: RenderContext | Mapping[str, Any]
    ) -> str:
        return self.render(template, context, CONTENT_PLACEHOLDERS)

    def generate(
        self, settings: NoteSettings, context: RenderContext | Mapping[str, Any]
    ) -> GeneratedNote:
        """Render both templates and derive the note path"""
        filename = self.render_filename(settings.note_filename_template, context)
        content = self.render_content(settings.note_content_template, context)
        path = note_path(settings.note_directory, filename)

        self.logger.debug("Note rendered", path=path, size=len(content))
        return GeneratedNote(filename=filename, content=content, path=path)

    def _stringify(self, value: Any) -> str:
        if value is None:
            return self.missing_value
        return str(value)
