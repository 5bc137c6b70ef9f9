"""
Search Session

Holds the single search session and moves it between states.

State changes go through transition(state, event), a pure function; the
controller turns each async step (location resolved, search started,
search finished) into one event. Every search carries a token, and a
completion whose token is not the latest one is dropped, so a slow
earlier search can never overwrite a newer one.
"""

import itertools
import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ..config import DEFAULT_ZOOM, SEARCH_RADIUS_METERS
from ..config_manager import ExtractorConfig
from ..export import CsvExporter, FileSink
from ..geo import LocationProvider
from ..models import Coordinate, Place, SearchStatus
from ..provider import GooglePlacesProvider, PlacesProvider
from .enrichment import ResultAggregator
from .search import PlaceSearchClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchSession:
    center: Coordinate
    keyword: str = ""
    status: SearchStatus = SearchStatus.IDLE
    results: Tuple[Place, ...] = ()
    token: int = 0


@dataclass(frozen=True)
class LocationResolved:
    center: Coordinate


@dataclass(frozen=True)
class SearchStarted:
    keyword: str
    token: int


@dataclass(frozen=True)
class SearchCompleted:
    token: int
    results: Tuple[Place, ...] = ()


SessionEvent = Union[LocationResolved, SearchStarted, SearchCompleted]


def transition(state: SearchSession, event: SessionEvent) -> SearchSession:
    """Return the session that follows state once event has happened."""
    if isinstance(event, LocationResolved):
        return replace(state, center=event.center)

    if isinstance(event, SearchStarted):
        if not event.keyword.strip():
            return state
        return replace(
            state,
            keyword=event.keyword,
            status=SearchStatus.SEARCHING,
            token=event.token,
        )

    if isinstance(event, SearchCompleted):
        # stale or unsolicited
        if event.token != state.token or state.status != SearchStatus.SEARCHING:
            return state
        results = tuple(event.results)
        return replace(
            state,
            status=SearchStatus.POPULATED if results else SearchStatus.EMPTY,
            results=results,
        )

    raise TypeError(f"Unknown session event: {event!r}")


class SearchSessionController:
    """Wires user actions to the search, enrichment and export stages.

    Args:
        provider: Places provider backing every remote call.
        default_center: Center used until (or unless) geolocation succeeds.
        radius_meters: Nearby-search radius.
        zoom: Zoom level reported to the map display.
        search_client: Override for the nearby-search wrapper.
        aggregator: Override for the enrichment stage.
        exporter: Override for the CSV exporter.
        locate: Whether initialize() asks the provider for the current position.

    Example:
        async with SearchSessionController(GooglePlacesProvider(), center) as controller:
            await controller.search("coffee")
            data = controller.export()
    """

    def __init__(
        self,
        provider: PlacesProvider,
        default_center: Coordinate,
        radius_meters: int = SEARCH_RADIUS_METERS,
        zoom: int = DEFAULT_ZOOM,
        search_client: Optional[PlaceSearchClient] = None,
        aggregator: Optional[ResultAggregator] = None,
        exporter: Optional[CsvExporter] = None,
        locate: bool = True,
    ):
        self._provider = provider
        self._locate = locate
        self._location = LocationProvider(provider, default_center)
        self._search_client = search_client or PlaceSearchClient(provider, radius_meters)
        self._aggregator = aggregator or ResultAggregator(provider)
        self._exporter = exporter or CsvExporter()
        self._tokens = itertools.count(1)
        self._state = SearchSession(center=default_center)
        self.zoom = zoom

    @classmethod
    def from_config(cls, cfg: ExtractorConfig, locate: bool = True) -> "SearchSessionController":
        """Build a controller backed by the Google provider."""
        provider = GooglePlacesProvider(
            api_key=cfg.api_key,
            proxy_url=cfg.proxy_url,
            timeout=cfg.timeout,
        )
        return cls(
            provider,
            cfg.default_center,
            radius_meters=cfg.search_radius,
            zoom=cfg.zoom,
            aggregator=ResultAggregator(
                provider,
                photo_max_width=cfg.photo_max_width,
                photo_max_height=cfg.photo_max_height,
            ),
            locate=locate,
        )

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
        return False

    @property
    def state(self) -> SearchSession:
        return self._state

    @property
    def ready(self) -> bool:
        return self._provider.ready

    @property
    def can_search(self) -> bool:
        return self.ready and self._state.status != SearchStatus.SEARCHING

    @property
    def can_export(self) -> bool:
        return len(self._state.results) > 0

    @property
    def status_message(self) -> Optional[str]:
        if self._state.status == SearchStatus.SEARCHING:
            return "Loading..."
        if self._state.status == SearchStatus.EMPTY:
            return "No results found"
        return None

    @property
    def export_filename(self) -> str:
        return self._exporter.filename

    @property
    def map_view(self) -> dict:
        return {"center": self._state.center.to_dict(), "zoom": self.zoom}

    def dispatch(self, event: SessionEvent) -> SearchSession:
        self._state = transition(self._state, event)
        return self._state

    async def initialize(self):
        """Open the provider and resolve the starting center once."""
        if not self._provider.ready:
            await self._provider.open()

        if self._locate and not self._location.attempted:
            located = await self._location.locate()
            if located is not None:
                self.dispatch(LocationResolved(located))

    async def aclose(self):
        await self._provider.aclose()

    async def search(self, keyword: str) -> bool:
        """
        Run a keyword search around the current center.

        Overlapping calls are allowed; whichever search was started last
        is the one whose results become visible. Any failure while
        searching or enriching ends the search as Empty.

        Keywords made only of whitespace are ignored like empty ones,
        rather than sent to the provider.

        Args:
            keyword: Search keyword

        Returns:
            False if the search was ignored (blank keyword or provider not
            ready), True otherwise
        """
        if not keyword or not keyword.strip() or not self.ready:
            logger.debug("Ignoring search for %r (ready=%s)", keyword, self.ready)
            return False

        token = next(self._tokens)
        self.dispatch(SearchStarted(keyword, token))
        center = self._state.center

        try:
            result = await self._search_client.search(center, keyword)
            places = [] if result.no_results else await self._aggregator.enrich(result.summaries)
        except Exception:
            logger.exception("Search %d for %r failed", token, keyword)
            places = []

        if token != self._state.token:
            logger.info("Discarding stale results for %r (search %d superseded)", keyword, token)
        self.dispatch(SearchCompleted(token, tuple(places)))
        return True

    def export(self, sink: Optional[FileSink] = None) -> Optional[bytes]:
        """
        Serialize the current results as CSV.

        Args:
            sink: If given, the CSV is also delivered to it

        Returns:
            The CSV bytes, or None when there are no results
        """
        if not self.can_export:
            return None

        data = self._exporter.export(self._state.results)
        if sink is not None:
            self._exporter.deliver(data, sink)
        return data
