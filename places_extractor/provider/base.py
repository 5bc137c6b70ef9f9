"""
Provider Interface

The four remote capabilities the search session consumes. Anything that
implements them (the Google binding, a fake in tests) can back a session.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..models import Coordinate, RawPlaceSummary

STATUS_OK = "OK"
STATUS_ZERO_RESULTS = "ZERO_RESULTS"


class PlacesProvider(ABC):
    """Geolocation, nearby search, place details and photo URLs.

    Implementations must be opened before use; `ready` reports whether
    initialization has finished. Remote operations raise ProviderError
    on transport or protocol failure.
    """

    def __init__(self):
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    async def open(self) -> None:
        self._ready = True

    async def aclose(self) -> None:
        self._ready = False

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    @abstractmethod
    async def geocode_current_position(self) -> Coordinate:
        """Return the caller's current coordinate."""

    @abstractmethod
    async def nearby_search(
        self,
        center: Coordinate,
        radius_meters: int,
        keyword: str,
    ) -> Tuple[str, List[RawPlaceSummary]]:
        """Return (status, summaries) for places matching keyword around center."""

    @abstractmethod
    async def get_place_details(
        self,
        place_id: str,
        fields: Sequence[str],
    ) -> Tuple[str, Optional[str]]:
        """Return (status, phone) for one place."""

    @abstractmethod
    def resolve_photo_url(self, photo_ref: str, max_width: int, max_height: int) -> str:
        """Return a display URL for a photo reference."""
