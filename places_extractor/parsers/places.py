"""
Places Response Parser

Extracts records from Google Maps Platform JSON responses.

Nearby search (/place/nearbysearch/json):
    results[i].place_id
    results[i].name
    results[i].vicinity
    results[i].rating
    results[i].photos[0].photo_reference

Place details (/place/details/json):
    result.formatted_phone_number

Geolocation (/geolocation/v1/geolocate):
    location.lat, location.lng
"""

from typing import Any, Dict, List, Optional

from ..models import Coordinate, RawPlaceSummary


def safe_get(obj: Any, *keys, default=None) -> Any:
    """Safely traverse nested dicts and lists"""
    current = obj
    for key in keys:
        if current is None:
            return default
        if isinstance(current, list) and isinstance(key, int):
            if -len(current) <= key < len(current):
                current = current[key]
            else:
                return default
        elif isinstance(current, dict):
            current = current.get(key)
        else:
            return default
    return default if current is None else current


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def extract_place_summary(result: Dict) -> Optional[RawPlaceSummary]:
    """Build a summary from one nearby-search result entry."""
    if not isinstance(result, dict):
        return None

    vicinity = result.get('vicinity')
    photo_ref = safe_get(result, 'photos', 0, 'photo_reference')

    return RawPlaceSummary(
        place_id=result.get('place_id') or '',
        name=result.get('name') or '',
        vicinity=vicinity if isinstance(vicinity, str) else None,
        rating=_to_float(result.get('rating')),
        photo_ref=photo_ref if isinstance(photo_ref, str) and photo_ref else None,
    )


def extract_place_summaries(data: Dict) -> List[RawPlaceSummary]:
    """
    Extract all place summaries from a nearby-search response.

    Args:
        data: Decoded JSON body of the nearby-search call

    Returns:
        Summaries in response order (malformed entries are skipped)
    """
    results = safe_get(data, 'results', default=[])
    if not isinstance(results, list):
        return []

    summaries = []
    for result in results:
        summary = extract_place_summary(result)
        if summary is not None:
            summaries.append(summary)
    return summaries


def extract_phone_number(data: Dict, field: str = 'formatted_phone_number') -> Optional[str]:
    """Extract the phone number from a place-details response."""
    phone = safe_get(data, 'result', field)
    if isinstance(phone, str) and phone.strip():
        return phone
    return None


def extract_location(data: Dict) -> Optional[Coordinate]:
    """Extract the coordinate from a geolocation response."""
    lat = _to_float(safe_get(data, 'location', 'lat'))
    lng = _to_float(safe_get(data, 'location', 'lng'))
    if lat is None or lng is None:
        return None
    return Coordinate(lat, lng)
