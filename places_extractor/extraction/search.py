"""
Search Execution

Runs nearby-search queries through the places provider.
"""

import logging
from dataclasses import dataclass, field
from typing import List

import httpx

from ..config import SEARCH_RADIUS_METERS
from ..exceptions import ProviderError
from ..models import Coordinate, RawPlaceSummary
from ..provider import PlacesProvider, STATUS_OK

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of one nearby search.

    Any status other than OK carries an empty summary list; zero matches
    and provider errors both read as "no results".
    """
    status: str
    summaries: List[RawPlaceSummary] = field(default_factory=list)

    @property
    def no_results(self) -> bool:
        return self.status != STATUS_OK or not self.summaries


class PlaceSearchClient:
    """Wraps the provider's nearby search with a fixed radius."""

    def __init__(self, provider: PlacesProvider, radius_meters: int = SEARCH_RADIUS_METERS):
        self._provider = provider
        self.radius_meters = radius_meters

    async def search(self, center: Coordinate, keyword: str) -> SearchResult:
        """
        Search for places matching keyword around center.

        Args:
            center: Search center
            keyword: Non-empty search keyword

        Returns:
            SearchResult with summaries in provider order

        Raises:
            ValueError: If keyword is empty
        """
        if not keyword:
            raise ValueError("keyword must not be empty")

        try:
            status, summaries = await self._provider.nearby_search(center, self.radius_meters, keyword)
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning("Nearby search for %r failed: %s", keyword, e)
            return SearchResult(status='ERROR')

        if status != STATUS_OK:
            logger.info("Nearby search for %r returned status %s", keyword, status)
            return SearchResult(status=status)

        logger.debug("Nearby search for %r returned %d places", keyword, len(summaries))
        return SearchResult(status=status, summaries=list(summaries))
