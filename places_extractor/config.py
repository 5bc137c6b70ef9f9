"""
Default configuration for the Places Extractor.

Module-level constants used across the package. Credentials come from
environment variables; everything else has a sensible default.
Override per instance with ExtractorConfig (see config_manager.py).
"""

import os

# Google Maps Platform credential (passed through as-is, never validated)
API_KEY = os.environ.get("GMAPS_API_KEY", "")

# Proxy Configuration
PROXY_HOST = os.environ.get("GMAPS_PROXY_HOST", "")
PROXY_USER = os.environ.get("GMAPS_PROXY_USER", "")
PROXY_PASS = os.environ.get("GMAPS_PROXY_PASS", "")


def get_proxy_url():
    """Get proxy URL. Returns single URL string for httpx."""
    if PROXY_HOST and PROXY_USER and PROXY_PASS:
        return f"http://{PROXY_USER}:{PROXY_PASS}@{PROXY_HOST}"
    return None


# Provider Endpoints
PLACES_API_BASE_URL = "https://maps.googleapis.com/maps/api/place"
GEOLOCATION_URL = "https://www.googleapis.com/geolocation/v1/geolocate"
REQUEST_TIMEOUT = 30.0

# API Server
API_HOST = "0.0.0.0"
API_PORT = 8000

# Fallback search center (San Francisco) when geolocation is unavailable
DEFAULT_LATITUDE = 37.7749
DEFAULT_LONGITUDE = -122.4194
DEFAULT_ZOOM = 12

# Search Parameters
SEARCH_RADIUS_METERS = 5000
PHONE_FIELD = "formatted_phone_number"

# Photo thumbnails
PHOTO_MAX_WIDTH = 200
PHOTO_MAX_HEIGHT = 200

# CSV Output
CSV_FILENAME = "places.csv"
CSV_HEADER = ("Name", "Full Address", "Rating", "Phone")
MISSING_VALUE = "N/A"
