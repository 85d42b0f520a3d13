"""Render context built from a song.link record"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from songlink_notes.songlink.models import Entity, LinkAggregationRecord


@dataclass(frozen=True)
class RenderContext:
    """Values available to note templates.

    ``None`` marks a value the lookup did not provide; the renderer decides
    how it is written out.
    """

    now: str
    title: str | None
    artist_name: str | None
    thumbnail_url: str | None
    youtube_url: str | None
    youtube_music_url: str | None
    spotify_url: str | None
    apple_music_url: str | None
    amazon_music_url: str | None
    songlink_url: str | None

    def as_placeholders(self) -> dict[str, Any]:
        """Map placeholder names to values"""
        return {
            "now": self.now,
            "title": self.title,
            "artistName": self.artist_name,
            "thumbnailUrl": self.thumbnail_url,
            "youtubeUrl": self.youtube_url,
            "youtubeMusicUrl": self.youtube_music_url,
            "spotifyUrl": self.spotify_url,
            "appleMusicUrl": self.apple_music_url,
            "amazonMusicUrl": self.amazon_music_url,
            "songlinkUrl": self.songlink_url,
        }


def build_render_context(
    record: LinkAggregationRecord,
    entity: Entity | None,
    today: date | None = None,
) -> RenderContext:
    """Collect template values from the record and the selected entity"""
    if today is None:
        today = date.today()

    return RenderContext(
        now=today.isoformat(),
        title=entity.title if entity else None,
        artist_name=entity.artist_name if entity else None,
        thumbnail_url=entity.thumbnail_url if entity else None,
        youtube_url=record.platform_url("youtube"),
        youtube_music_url=record.platform_url("youtubeMusic"),
        spotify_url=record.platform_url("spotify"),
        apple_music_url=record.platform_url("appleMusic"),
        amazon_music_url=record.platform_url("amazonMusic"),
        songlink_url=record.page_url,
    )
