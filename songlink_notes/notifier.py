"""User-visible notices"""

from typing import Protocol

from rich.console import Console
from rich.markup import escape

from songlink_notes.utils.mixins import LoggerMixin


class Notifier(Protocol):
    """Shows a short transient message to the user."""

    def notify(self, message: str) -> None: ...


class ConsoleNotifier(LoggerMixin):
    """Prints notices to stderr"""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def notify(self, message: str) -> None:
        self.logger.warning("Notice", message=message)
        self.console.print(
            f"[bold yellow]{escape(message)}[/bold yellow]", highlight=False
        )
