"""song.link API response models"""

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """One platform's metadata record for the track"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    #: Entity type (song, album)
    type: str = "song"
    #: Title (can be missing)
    title: str | None = None
    #: Artist (can be missing)
    artist_name: str | None = Field(None, alias="artistName")
    #: Thumbnail URL
    thumbnail_url: str | None = Field(None, alias="thumbnailUrl")
    #: Provider tag
    api_provider: str | None = Field(None, alias="apiProvider")


class PlatformLink(BaseModel):
    """Link to the track on one platform"""

    model_config = ConfigDict(extra="ignore")

    url: str


class LinkAggregationRecord(BaseModel):
    """song.link response for a single source URL"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    #: song.link page for the track
    page_url: str = Field(..., alias="pageUrl")
    #: Dictionary of platform -> link
    links_by_platform: dict[str, PlatformLink] = Field(
        default_factory=dict, alias="linksByPlatform"
    )
    #: Dictionary of entity_id -> entity, in payload order
    entities_by_unique_id: dict[str, Entity] = Field(
        default_factory=dict, alias="entitiesByUniqueId"
    )

    def platform_url(self, platform: str) -> str | None:
        link = self.links_by_platform.get(platform)
        return link.url if link else None
