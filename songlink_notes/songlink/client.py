"""
song.link lookup client
"""

from typing import Any

import aiohttp
from pydantic import ValidationError

from songlink_notes import __version__
from songlink_notes.config.settings import SONGLINK_API_URL
from songlink_notes.errors import LinkLookupError
from songlink_notes.songlink.models import LinkAggregationRecord
from songlink_notes.utils.mixins import LoggerMixin


class SongLinkClient(LoggerMixin):
    """Resolves a track URL into a song.link record.

    One GET per lookup, no retry and no caching. When no session is given a
    short-lived ``aiohttp.ClientSession`` is opened for each call, using the
    transport's default timeout.
    """

    def __init__(
        self,
        api_url: str = SONGLINK_API_URL,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.api_url = api_url
        self._session = session
        self.headers = {
            "User-Agent": f"songlink-notes/{__version__}",
            "Accept": "application/json",
        }

    async def resolve(self, source_url: str) -> LinkAggregationRecord:
        """
        Look up ``source_url`` on song.link

        Raises:
            LinkLookupError: on transport failure, non-200 status or a payload
                that does not match the expected shape
        """
        self.logger.debug("Looking up source URL", url=source_url)

        try:
            if self._session is not None:
                payload = await self._fetch(self._session, source_url)
            else:
                async with aiohttp.ClientSession() as session:
                    payload = await self._fetch(session, source_url)
        except TimeoutError as e:
            raise LinkLookupError(
                "song.link lookup timed out", source_url=source_url
            ) from e
        except aiohttp.ClientError as e:
            raise LinkLookupError(
                f"song.link lookup failed: {e}", source_url=source_url
            ) from e

        try:
            record = LinkAggregationRecord.model_validate(payload)
        except ValidationError as e:
            raise LinkLookupError(
                f"Unexpected song.link payload: {e.error_count()} validation errors",
                source_url=source_url,
            ) from e

        self.logger.info(
            "song.link lookup succeeded",
            url=source_url,
            page_url=record.page_url,
            platforms=len(record.links_by_platform),
            entities=len(record.entities_by_unique_id),
        )
        return record

    async def _fetch(self, session: aiohttp.ClientSession, source_url: str) -> Any:
        async with session.get(
            self.api_url, params={"url": source_url}, headers=self.headers
        ) as response:
            if response.status != 200:
                self.logger.warning(
                    "HTTP error from song.link", url=source_url, status=response.status
                )
                raise LinkLookupError(
                    f"song.link returned HTTP {response.status}",
                    source_url=source_url,
                    status=response.status,
                )

            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise LinkLookupError(
                    "song.link response is not valid JSON", source_url=source_url
                ) from e
