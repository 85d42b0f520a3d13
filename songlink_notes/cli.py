"""
Command line entry point for SongLink Notes.

Usage:
  songlink-notes add <url>                 # Create a note for a track URL
  songlink-notes add --spotify <url>       # Same, through the spotify variant
  songlink-notes handle <obsidian-uri>     # Dispatch an obsidian:// activation
  songlink-notes settings show             # Show note settings
  songlink-notes settings set <field> <v>  # Change one note setting
  songlink-notes settings reset            # Restore default note settings
"""

import argparse
import asyncio
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from songlink_notes import __version__
from songlink_notes.config import AppSettings, NoteSettings, SettingsStore, get_settings
from songlink_notes.errors import SongLinkNotesError
from songlink_notes.pipeline import LinkNoteGenerator, NoteResult, SourceField
from songlink_notes.protocol import ProtocolRouter
from songlink_notes.utils import get_logger, setup_logging

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="songlink-notes",
        description="Create Obsidian notes for music tracks via song.link.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to the Obsidian vault (overrides OBSIDIAN_VAULT_PATH).",
    )
    parser.add_argument(
        "--no-open",
        action="store_true",
        help="Do not open the created note in Obsidian.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Create a note for a track URL.")
    add.add_argument("url", nargs="?", default="", help="Track URL on any platform.")
    add.add_argument(
        "--spotify",
        action="store_true",
        help="Treat the URL as the spotifyUrl activation parameter.",
    )

    handle = sub.add_parser("handle", help="Dispatch an obsidian:// activation URI.")
    handle.add_argument("uri", help="e.g. obsidian://songlink-add-song?url=...")

    settings = sub.add_parser("settings", help="Show or change note settings.")
    settings_sub = settings.add_subparsers(dest="settings_command", required=True)
    settings_sub.add_parser("show", help="Print the note settings.")
    set_cmd = settings_sub.add_parser("set", help="Change one note setting.")
    set_cmd.add_argument(
        "field",
        help="noteFilenameTemplate, noteContentTemplate or noteDirectory.",
    )
    set_cmd.add_argument("value")
    settings_sub.add_parser("reset", help="Restore default note settings.")

    return parser


def resolve_app_settings(args: argparse.Namespace) -> AppSettings:
    app_settings = get_settings()
    overrides: dict = {}
    if args.vault is not None:
        overrides["obsidian_vault_path"] = args.vault
    if args.no_open:
        overrides["open_after_create"] = False
    return app_settings.model_copy(update=overrides) if overrides else app_settings


def print_result(result: NoteResult | None) -> None:
    if result is None:
        return
    console.print(f"Created [bold]{escape(result.note.path)}[/bold]")
    if result.open_result is not None and not result.open_result.opened:
        console.print(f"[dim]{escape(result.open_result.warning or '')}[/dim]")


def print_settings(note_settings: NoteSettings) -> None:
    table = Table(title="Note settings")
    table.add_column("Field")
    table.add_column("Value")
    for name, info in NoteSettings.model_fields.items():
        table.add_row(info.alias or name, escape(getattr(note_settings, name)))
    console.print(table)

    console.print(
        "Filename variables: "
        + ", ".join("{{%s}}" % p for p in SourceField.GENERIC.filename_placeholders),
        highlight=False,
    )
    for source in SourceField:
        console.print(
            f"Content variables ({source.action}): "
            + ", ".join("{{%s}}" % p for p in source.content_placeholders),
            highlight=False,
        )


async def run(args: argparse.Namespace, app_settings: AppSettings) -> int:
    store = SettingsStore(app_settings.note_settings_path)
    note_settings = await store.load()

    if args.command == "settings":
        if args.settings_command == "set":
            note_settings = await store.update(args.field, args.value)
        elif args.settings_command == "reset":
            note_settings = await store.reset()
        print_settings(note_settings)
        return 0

    generator = LinkNoteGenerator.from_settings(app_settings, note_settings)

    if args.command == "add":
        source = SourceField.SPOTIFY_ONLY if args.spotify else SourceField.GENERIC
        result = await generator.handle_activation(
            {source.param_name: args.url}, source
        )
    else:
        router = ProtocolRouter()
        generator.register(router)
        result = await router.dispatch(args.uri)

    print_result(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()
    logger = get_logger("main")

    app_settings = resolve_app_settings(args)
    logger.debug(
        "Starting SongLink Notes",
        version=__version__,
        vault=str(app_settings.obsidian_vault_path),
    )

    try:
        return asyncio.run(run(args, app_settings))
    except (SongLinkNotesError, OSError) as exc:
        logger.error("Command failed", error=str(exc), error_type=type(exc).__name__)
        console.print(
            f"[bold red]{type(exc).__name__}:[/bold red] {escape(str(exc))}",
            highlight=False,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
