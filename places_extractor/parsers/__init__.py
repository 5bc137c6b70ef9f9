"""
Parsers module for extracting data from Google Maps Platform responses.

- places.py: Extract place summaries, phone numbers and coordinates
"""

from .places import safe_get, extract_place_summaries, extract_phone_number, extract_location
