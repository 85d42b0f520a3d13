"""
Obsidian vault integration
"""

from songlink_notes.obsidian.file_operations import NoteWriter
from songlink_notes.obsidian.opener import NoteOpener, OpenResult
from songlink_notes.obsidian.template_system import (
    GeneratedNote,
    RenderContext,
    TemplateRenderer,
)

__all__ = [
    "NoteWriter",
    "NoteOpener",
    "OpenResult",
    "GeneratedNote",
    "RenderContext",
    "TemplateRenderer",
]
