"""Template system base classes"""

from dataclasses import dataclass


@dataclass
class GeneratedNote:
    """A rendered note, ready to be written to the vault"""

    filename: str
    content: str
    path: str  # vault-relative, "<noteDirectory>/<filename>.md"
