"""
Tests for configuration resolution
"""
import pytest

from places_extractor.config_manager import ExtractorConfig
from places_extractor.exceptions import ConfigurationError
from places_extractor.models import Coordinate


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("GMAPS_API_KEY", "env-key")

    assert ExtractorConfig().api_key == "env-key"
    assert ExtractorConfig(api_key="explicit").api_key == "explicit"


def test_defaults():
    cfg = ExtractorConfig(api_key="k")

    assert cfg.search_radius == 5000
    assert (cfg.photo_max_width, cfg.photo_max_height) == (200, 200)
    assert cfg.zoom == 12
    assert cfg.default_center == Coordinate(37.7749, -122.4194)


@pytest.mark.parametrize("overrides", [
    {"search_radius": 0},
    {"timeout": -1},
    {"server_port": 70000},
])
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigurationError):
        ExtractorConfig(api_key="k", **overrides)
