"""
Tests for response parsing helpers
"""
from places_extractor.models import Coordinate
from places_extractor.parsers import (
    extract_location,
    extract_phone_number,
    extract_place_summaries,
    safe_get,
)


def test_safe_get_traverses_dicts_and_lists():
    data = {"a": [{"b": 1}]}

    assert safe_get(data, "a", 0, "b") == 1
    assert safe_get(data, "a", 5, "b") is None
    assert safe_get(data, "x", "y", default="N/A") == "N/A"
    assert safe_get(data, "a", "b") is None


def test_extract_place_summaries_skips_malformed_entries():
    data = {"results": ["junk", {"place_id": "x", "name": "X", "rating": "4.2", "photos": []}]}

    summaries = extract_place_summaries(data)

    assert len(summaries) == 1
    assert summaries[0].rating == 4.2
    assert summaries[0].photo_ref is None


def test_extract_place_summaries_missing_results():
    assert extract_place_summaries({"status": "INVALID_REQUEST"}) == []
    assert extract_place_summaries({"results": None}) == []


def test_extract_phone_number():
    assert extract_phone_number({"result": {"formatted_phone_number": "555"}}) == "555"
    assert extract_phone_number({"result": {"formatted_phone_number": "  "}}) is None
    assert extract_phone_number({}) is None


def test_extract_location():
    assert extract_location({"location": {"lat": 1.5, "lng": 2}}) == Coordinate(1.5, 2.0)
    assert extract_location({"location": {"lat": 1.5}}) is None
