"""
Current Location

Resolves the starting search center once per session.
"""

import logging
from typing import Optional

import httpx

from ..exceptions import ProviderError
from ..models import Coordinate
from ..provider import PlacesProvider

logger = logging.getLogger(__name__)


class LocationProvider:
    """Asks the provider for the current position exactly once.

    A failed attempt is final: later calls return the same fallback
    coordinate instead of trying again.
    """

    def __init__(self, provider: PlacesProvider, default: Coordinate):
        self._provider = provider
        self.default = default
        self._attempted = False
        self._located: Optional[Coordinate] = None

    @property
    def attempted(self) -> bool:
        return self._attempted

    async def locate(self) -> Optional[Coordinate]:
        """
        Request the current coordinate.

        Returns:
            The located coordinate, or None if the lookup failed (the
            caller keeps its default center in that case)
        """
        if self._attempted:
            return self._located
        self._attempted = True

        try:
            self._located = await self._provider.geocode_current_position()
        except (ProviderError, httpx.HTTPError) as e:
            logger.warning("Geolocation unavailable, using default center %s: %s", self.default, e)
            return None

        logger.info("Located at (%.5f, %.5f)", self._located.latitude, self._located.longitude)
        return self._located

    async def current(self) -> Coordinate:
        """Located coordinate, or the default when geolocation failed."""
        located = await self.locate()
        return located if located is not None else self.default
