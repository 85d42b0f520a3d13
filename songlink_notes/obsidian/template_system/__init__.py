"""Template system for song notes"""

from .base import GeneratedNote
from .context import RenderContext, build_render_context
from .renderer import (
    CONTENT_PLACEHOLDERS,
    FILENAME_PLACEHOLDERS,
    TemplateRenderer,
    note_path,
)

__all__ = [
    "GeneratedNote",
    "RenderContext",
    "build_render_context",
    "TemplateRenderer",
    "CONTENT_PLACEHOLDERS",
    "FILENAME_PLACEHOLDERS",
    "note_path",
]
