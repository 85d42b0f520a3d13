"""song.link (Odesli) lookup"""

from songlink_notes.songlink.client import SongLinkClient
from songlink_notes.songlink.models import (
    Entity,
    LinkAggregationRecord,
    PlatformLink,
)
from songlink_notes.songlink.selector import METADATA_PROVIDER, select_entity

__all__ = [
    "SongLinkClient",
    "Entity",
    "LinkAggregationRecord",
    "PlatformLink",
    "METADATA_PROVIDER",
    "select_entity",
]
