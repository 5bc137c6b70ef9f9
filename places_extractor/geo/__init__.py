"""
Geographic utilities module.

- location.py: One-shot current-position lookup with a fixed fallback
"""

from .location import LocationProvider
