"""
Place Enrichment

Fetches phone numbers for search results and assembles Place records.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from ..config import PHONE_FIELD, PHOTO_MAX_HEIGHT, PHOTO_MAX_WIDTH, MISSING_VALUE
from ..models import Place, RawPlaceSummary
from ..provider import PlacesProvider, STATUS_OK

logger = logging.getLogger(__name__)


class PlaceDetailClient:
    """Looks up the phone number of a single place."""

    def __init__(self, provider: PlacesProvider):
        self._provider = provider

    async def get_phone_number(self, place_id: str) -> Optional[str]:
        """
        Fetch the phone number for a place.

        Only the phone field is requested. A non-OK status or a missing
        field yields None; transport failures propagate to the caller.
        """
        if not place_id:
            return None

        status, phone = await self._provider.get_place_details(place_id, fields=(PHONE_FIELD,))
        if status != STATUS_OK or not phone:
            return None
        return phone


class ResultAggregator:
    """Turns raw summaries into Place records, one detail lookup per summary."""

    def __init__(
        self,
        provider: PlacesProvider,
        detail_client: Optional[PlaceDetailClient] = None,
        photo_max_width: int = PHOTO_MAX_WIDTH,
        photo_max_height: int = PHOTO_MAX_HEIGHT,
    ):
        self._provider = provider
        self.detail_client = detail_client or PlaceDetailClient(provider)
        self.photo_max_width = photo_max_width
        self.photo_max_height = photo_max_height

    def _photo_url(self, summary: RawPlaceSummary) -> Optional[str]:
        if not summary.photo_ref:
            return None
        return self._provider.resolve_photo_url(
            summary.photo_ref, self.photo_max_width, self.photo_max_height
        )

    async def enrich(self, summaries: Sequence[RawPlaceSummary]) -> List[Place]:
        """
        Enrich all summaries concurrently.

        All lookups are launched together and joined by index, so the
        output order is the input order whatever order they finish in.
        A failed lookup only blanks that place's phone.

        Args:
            summaries: Summaries from one nearby search

        Returns:
            One Place per summary, in input order
        """
        if not summaries:
            return []

        outcomes = await asyncio.gather(
            *(self.detail_client.get_phone_number(s.place_id) for s in summaries),
            return_exceptions=True,
        )

        places = []
        for index, (summary, outcome) in enumerate(zip(summaries, outcomes)):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning("Detail lookup %d (%s) failed: %s", index, summary.place_id, outcome)
                phone = None
            else:
                phone = outcome

            places.append(Place(
                name=summary.name,
                vicinity=MISSING_VALUE if summary.vicinity is None else summary.vicinity,
                rating=summary.rating,
                photo_url=self._photo_url(summary),
                phone=phone,
            ))

        return places
