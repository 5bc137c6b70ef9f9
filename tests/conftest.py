"""
Shared fixtures: an in-memory places provider.
"""

import asyncio
from typing import Dict, List, Optional

import pytest

from places_extractor.exceptions import ProviderError
from places_extractor.models import Coordinate, RawPlaceSummary
from places_extractor.provider import PlacesProvider


class FakeProvider(PlacesProvider):
    """Provider double with scripted responses.

    Args:
        results: keyword -> summaries returned by nearby_search
        phones: place_id -> phone returned by get_place_details
        location: coordinate for geocode_current_position (None raises)
        search_status: status returned with every nearby search
        failing_details: place ids whose detail lookup raises
        detail_delays: place_id -> seconds to sleep before answering
        gates: keyword -> asyncio.Event the search waits on
    """

    def __init__(
        self,
        results: Optional[Dict[str, List[RawPlaceSummary]]] = None,
        phones: Optional[Dict[str, str]] = None,
        location: Optional[Coordinate] = None,
        search_status: str = "OK",
        failing_details=(),
        detail_delays: Optional[Dict[str, float]] = None,
        gates: Optional[Dict[str, asyncio.Event]] = None,
        search_error: bool = False,
    ):
        super().__init__()
        self.results = results or {}
        self.phones = phones or {}
        self.location = location
        self.search_status = search_status
        self.failing_details = set(failing_details)
        self.detail_delays = detail_delays or {}
        self.gates = gates or {}
        self.search_error = search_error
        self.search_calls = []
        self.detail_calls = []
        self.geocode_calls = 0
        self.closed = False

    async def aclose(self):
        self.closed = True
        await super().aclose()

    async def geocode_current_position(self):
        self.geocode_calls += 1
        if self.location is None:
            raise ProviderError("permission denied")
        return self.location

    async def nearby_search(self, center, radius_meters, keyword):
        self.search_calls.append((center, radius_meters, keyword))
        if keyword in self.gates:
            await self.gates[keyword].wait()
        if self.search_error:
            raise ProviderError("boom")
        if self.search_status != "OK":
            return self.search_status, []
        return "OK", list(self.results.get(keyword, []))

    async def get_place_details(self, place_id, fields):
        self.detail_calls.append((place_id, tuple(fields)))
        if place_id in self.detail_delays:
            await asyncio.sleep(self.detail_delays[place_id])
        if place_id in self.failing_details:
            raise ProviderError(f"details failed for {place_id}")
        phone = self.phones.get(place_id)
        return ("OK", phone) if phone else ("NOT_FOUND", None)

    def resolve_photo_url(self, photo_ref, max_width, max_height):
        return f"https://photos.test/{photo_ref}?w={max_width}&h={max_height}"


def make_summaries(count: int, prefix: str = "p") -> List[RawPlaceSummary]:
    return [
        RawPlaceSummary(
            place_id=f"{prefix}{i}",
            name=f"Place {prefix}{i}",
            vicinity=f"{i} Main St, Springfield",
            rating=4.0 + i / 10,
        )
        for i in range(count)
    ]


@pytest.fixture
def sf() -> Coordinate:
    return Coordinate(37.7749, -122.4194)


@pytest.fixture
def fake_provider() -> FakeProvider:
    summaries = make_summaries(3)
    return FakeProvider(
        results={"coffee": summaries},
        phones={"p0": "555-0000", "p1": "555-0001", "p2": "555-0002"},
        location=Coordinate(40.7128, -74.0060),
    )
