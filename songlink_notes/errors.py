"""Exception hierarchy for SongLink Notes"""


class SongLinkNotesError(Exception):
    """Base class for errors raised by this package"""


class EmptyInputError(SongLinkNotesError):
    """The activation carried no source URL"""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"{field_name} is empty")


class LinkLookupError(SongLinkNotesError):
    """The song.link lookup failed or returned an undecodable payload"""

    def __init__(
        self, message: str, source_url: str, status: int | None = None
    ) -> None:
        self.source_url = source_url
        self.status = status
        super().__init__(message)


class InvalidProtocolURIError(SongLinkNotesError):
    """The activation URI is not an obsidian:// action URI"""


class UnknownActionError(SongLinkNotesError):
    """No handler is registered for the protocol action"""

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"No handler registered for action: {action}")


class SettingsError(SongLinkNotesError):
    """Unknown settings field or unreadable settings file"""
