"""
Places Extractor

Search for points of interest near a location and export them to CSV.

Quick start (library usage):
    import asyncio
    from places_extractor import ExtractorConfig, SearchSessionController

    async def main():
        async with SearchSessionController.from_config(ExtractorConfig()) as session:
            await session.search("coffee")
            for place in session.state.results:
                print(place.name, place.phone)

    asyncio.run(main())
"""

from .config_manager import ExtractorConfig
from .exceptions import PlacesExtractorError, ProviderError, ConfigurationError
from .export import CsvExporter, DirectorySink, FileSink
from .extraction import (
    PlaceDetailClient,
    PlaceSearchClient,
    ResultAggregator,
    SearchResult,
    SearchSession,
    SearchSessionController,
    transition,
)
from .geo import LocationProvider
from .models import Coordinate, Place, RawPlaceSummary, SearchStatus
from .provider import GooglePlacesProvider, PlacesProvider

__version__ = "1.0.0"
__all__ = [
    "ExtractorConfig",
    "PlacesExtractorError",
    "ProviderError",
    "ConfigurationError",
    "CsvExporter",
    "DirectorySink",
    "FileSink",
    "PlaceDetailClient",
    "PlaceSearchClient",
    "ResultAggregator",
    "SearchResult",
    "SearchSession",
    "SearchSessionController",
    "transition",
    "LocationProvider",
    "Coordinate",
    "Place",
    "RawPlaceSummary",
    "SearchStatus",
    "GooglePlacesProvider",
    "PlacesProvider",
]
