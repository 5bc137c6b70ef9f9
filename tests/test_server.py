"""
Tests for the API server
"""
from fastapi.testclient import TestClient

from places_extractor.config_manager import ExtractorConfig
from places_extractor.export import CsvExporter
from places_extractor.extraction import SearchSessionController
from places_extractor.server import create_app
from tests.conftest import FakeProvider, make_summaries


def make_client(provider, sf):
    controller = SearchSessionController(provider, sf)
    return TestClient(create_app(controller=controller))


def test_health(fake_provider, sf):
    with make_client(fake_provider, sf) as client:
        assert client.get("/api/health").json() == {"status": "ok"}


def test_initial_session(fake_provider, sf):
    with make_client(fake_provider, sf) as client:
        body = client.get("/api/session").json()

    assert body["status"] == "idle"
    assert body["map"] == {"center": {"lat": 40.7128, "lng": -74.006}, "zoom": 12}
    assert body["results"] == []
    assert body["can_search"] is True
    assert body["can_export"] is False
    assert body["message"] is None


def test_search_and_export(fake_provider, sf):
    with make_client(fake_provider, sf) as client:
        response = client.post("/api/search", json={"keyword": "coffee"})
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "populated"
        assert [r["phone"] for r in body["results"]] == ["555-0000", "555-0001", "555-0002"]
        assert body["results"][0]["vicinity"] == "0 Main St, Springfield"
        assert body["can_export"] is True

        export = client.get("/api/export")

    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/csv")
    assert 'filename="places.csv"' in export.headers["content-disposition"]
    assert export.text.split("\n")[0] == "Name,Full Address,Rating,Phone"
    assert len(export.text.split("\n")) == 4


def test_empty_keyword_is_rejected_without_state_change(fake_provider, sf):
    with make_client(fake_provider, sf) as client:
        response = client.post("/api/search", json={"keyword": ""})
        assert response.status_code == 400
        assert client.get("/api/session").json()["status"] == "idle"

    assert fake_provider.search_calls == []


def test_no_results(sf):
    provider = FakeProvider(search_status="ZERO_RESULTS", results={"x": make_summaries(1)})
    with make_client(provider, sf) as client:
        body = client.post("/api/search", json={"keyword": "x"}).json()
        assert body["status"] == "empty"
        assert body["message"] == "No results found"
        assert client.get("/api/export").status_code == 204


def test_provider_closed_on_shutdown(fake_provider, sf):
    with make_client(fake_provider, sf):
        pass

    assert fake_provider.closed


def test_export_filename_follows_exporter(fake_provider, sf):
    controller = SearchSessionController(fake_provider, sf, exporter=CsvExporter(filename="coffee.csv"))
    with TestClient(create_app(controller=controller)) as client:
        client.post("/api/search", json={"keyword": "coffee"})
        export = client.get("/api/export")

    assert 'filename="coffee.csv"' in export.headers["content-disposition"]


def test_app_built_from_config_uses_its_center():
    cfg = ExtractorConfig(api_key="k", default_latitude=48.8566, default_longitude=2.3522)
    with TestClient(create_app(config=cfg, locate=False)) as client:
        body = client.get("/api/session").json()

    assert body["map"]["center"] == {"lat": 48.8566, "lng": 2.3522}
