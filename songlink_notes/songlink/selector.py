"""Entity selection from a song.link record"""

import structlog

from songlink_notes.songlink.models import Entity, LinkAggregationRecord

logger = structlog.get_logger(__name__)

# Metadata always comes from the spotify entity, whichever URL was looked up
METADATA_PROVIDER = "spotify"


def select_entity(record: LinkAggregationRecord) -> Entity | None:
    """Return the first entity tagged with the spotify provider, or None"""
    for entity_id, entity in record.entities_by_unique_id.items():
        if entity.api_provider == METADATA_PROVIDER:
            logger.debug("Metadata entity selected", entity_id=entity_id)
            return entity

    logger.info(
        "No entity for metadata provider",
        provider=METADATA_PROVIDER,
        entities=len(record.entities_by_unique_id),
    )
    return None
