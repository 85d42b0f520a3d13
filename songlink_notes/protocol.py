"""
obsidian:// protocol activation routing
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from songlink_notes.errors import InvalidProtocolURIError, UnknownActionError
from songlink_notes.utils.mixins import LoggerMixin

PROTOCOL_SCHEME = "obsidian"


@dataclass(frozen=True)
class ProtocolData:
    """An activation: the action name plus its decoded query parameters"""

    action: str
    params: dict[str, str] = field(default_factory=dict)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.params.get(name, default)


ProtocolHandler = Callable[[ProtocolData], Awaitable[Any]]


def parse_protocol_uri(uri: str) -> ProtocolData:
    """Parse ``obsidian://<action>?<query>``.

    ``obsidian:///action`` and ``obsidian:action`` are accepted as well. The
    action is also present in the parameters under ``action``.
    """
    parts = urlsplit(uri.strip())
    if parts.scheme.lower() != PROTOCOL_SCHEME:
        raise InvalidProtocolURIError(f"Not an {PROTOCOL_SCHEME}:// URI: {uri}")

    action = (parts.netloc or parts.path).strip("/")
    if not action:
        raise InvalidProtocolURIError(f"Missing action in URI: {uri}")

    params = dict(parse_qsl(parts.query, keep_blank_values=True))
    params["action"] = action
    return ProtocolData(action=action, params=params)


class ProtocolRouter(LoggerMixin):
    """Maps protocol actions to async handlers"""

    def __init__(self) -> None:
        self._handlers: dict[str, ProtocolHandler] = {}

    @property
    def actions(self) -> list[str]:
        return sorted(self._handlers)

    def register(self, action: str, handler: ProtocolHandler) -> None:
        """Register ``handler`` for ``action``, replacing any previous one"""
        if action in self._handlers:
            self.logger.debug("Replacing protocol handler", action=action)
        self._handlers[action] = handler

    async def dispatch(self, uri: str) -> Any:
        data = parse_protocol_uri(uri)
        handler = self._handlers.get(data.action)
        if handler is None:
            raise UnknownActionError(data.action)

        self.logger.info("Protocol activation", action=data.action)
        return await handler(data)
