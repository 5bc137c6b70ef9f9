"""
Data Model

Records passed between the search, enrichment and export stages.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in degrees."""
    latitude: float
    longitude: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.latitude, "lng": self.longitude}


@dataclass(frozen=True)
class RawPlaceSummary:
    """One entry of a nearby-search response, before enrichment."""
    place_id: str
    name: str
    vicinity: Optional[str] = None
    rating: Optional[float] = None
    photo_ref: Optional[str] = None


@dataclass(frozen=True)
class Place:
    """A point of interest as shown to the user and exported to CSV."""
    name: str
    vicinity: str = "N/A"
    rating: Optional[float] = None
    photo_url: Optional[str] = None
    phone: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SearchStatus(Enum):
    """Lifecycle of the single search session."""
    IDLE = "idle"
    SEARCHING = "searching"
    POPULATED = "populated"
    EMPTY = "empty"
