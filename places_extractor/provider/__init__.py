"""
Places provider module.

- base.py: Abstract provider interface used by the search session
- google.py: Google Maps Platform web service implementation
"""

from .base import PlacesProvider, STATUS_OK, STATUS_ZERO_RESULTS
from .google import GooglePlacesProvider
