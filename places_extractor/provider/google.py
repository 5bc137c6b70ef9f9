"""
Google Maps Platform Provider

Talks to the Places and Geolocation web services over a shared
httpx.AsyncClient.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

import httpx

from ..config import (
    API_KEY,
    GEOLOCATION_URL,
    PHONE_FIELD,
    PLACES_API_BASE_URL,
    REQUEST_TIMEOUT,
    get_proxy_url,
)
from ..exceptions import ProviderError
from ..models import Coordinate, RawPlaceSummary
from ..parsers import extract_location, extract_phone_number, extract_place_summaries
from .base import PlacesProvider

logger = logging.getLogger(__name__)


class GooglePlacesProvider(PlacesProvider):
    """Places provider backed by the Google Maps Platform.

    Args:
        api_key: Access credential, passed through untouched.
        proxy_url: Optional outbound proxy URL.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        proxy_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__()
        self.api_key = API_KEY if api_key is None else api_key
        self.proxy_url = proxy_url if proxy_url is not None else get_proxy_url()
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        if self._client is not None:
            return
        if not self.api_key:
            logger.warning("No GMAPS_API_KEY configured; provider requests will be rejected")

        kwargs = {'timeout': self.timeout, 'follow_redirects': True}
        if self._transport is not None:
            kwargs['transport'] = self._transport
        elif self.proxy_url:
            kwargs['proxy'] = self.proxy_url

        self._client = httpx.AsyncClient(**kwargs)
        await super().open()
        logger.debug("Google places provider ready")

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        await super().aclose()

    async def _request_json(self, method: str, url: str, **kwargs) -> Dict:
        if self._client is None:
            raise ProviderError("Provider is not open")

        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise ProviderError(f"Request timed out: {url}") from e
        except httpx.HTTPError as e:
            raise ProviderError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise ProviderError(f"API error: {response.status_code} - {response.text[:200]}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"Malformed JSON response from {url}") from e

        if not isinstance(data, dict):
            raise ProviderError(f"Unexpected response type: {type(data).__name__}")
        return data

    async def geocode_current_position(self) -> Coordinate:
        data = await self._request_json(
            'POST',
            GEOLOCATION_URL,
            params={'key': self.api_key},
            json={'considerIp': True},
        )
        coordinate = extract_location(data)
        if coordinate is None:
            raise ProviderError("Geolocation response has no location")
        return coordinate

    async def nearby_search(
        self,
        center: Coordinate,
        radius_meters: int,
        keyword: str,
    ) -> Tuple[str, List[RawPlaceSummary]]:
        params = {
            'location': f"{center.latitude},{center.longitude}",
            'radius': radius_meters,
            'keyword': keyword,
            'key': self.api_key,
        }
        data = await self._request_json('GET', f"{PLACES_API_BASE_URL}/nearbysearch/json", params=params)
        status = data.get('status', 'UNKNOWN_ERROR')
        return status, extract_place_summaries(data)

    async def get_place_details(
        self,
        place_id: str,
        fields: Sequence[str] = (PHONE_FIELD,),
    ) -> Tuple[str, Optional[str]]:
        params = {
            'place_id': place_id,
            'fields': ','.join(fields),
            'key': self.api_key,
        }
        data = await self._request_json('GET', f"{PLACES_API_BASE_URL}/details/json", params=params)
        return data.get('status', 'UNKNOWN_ERROR'), extract_phone_number(data, PHONE_FIELD)

    def resolve_photo_url(self, photo_ref: str, max_width: int, max_height: int) -> str:
        query = urlencode({
            'maxwidth': max_width,
            'maxheight': max_height,
            'photo_reference': photo_ref,
            'key': self.api_key,
        })
        return f"{PLACES_API_BASE_URL}/photo?{query}"
