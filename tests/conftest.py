import os

# Settings() requires the key at import time; set it before the app is imported
os.environ.setdefault("GOOGLE_MAPS_API_KEY", "test-maps-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services import maps_client


SAN_FRANCISCO = (37.7749, -122.4194)
LONDON = (51.5074, -0.1278)


def google_geocode_ok(name: str) -> dict:
    """Minimal Geocoding API body for a country-filtered reverse lookup."""
    return {
        "status": "OK",
        "results": [{"formatted_address": name, "types": ["country", "political"]}],
    }


def google_timezone_ok(time_zone_id: str, name: str = "Standard Time") -> dict:
    """Minimal Time Zone API body."""
    return {
        "status": "OK",
        "dstOffset": 0,
        "rawOffset": 0,
        "timeZoneId": time_zone_id,
        "timeZoneName": name,
    }


class FakeMaps:
    """
    In-process stand-in for the Geocoding and Time Zone web services.

    `countries` and `zones` map the "lat,lng" param to either a value or an
    httpx.Response to return verbatim. Every request is recorded.
    """

    def __init__(self):
        self.countries: dict = {}
        self.zones: dict = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/geocode/json"):
            value = self.countries.get(request.url.params["latlng"])
            body = google_geocode_ok(value) if isinstance(value, str) else None
        elif request.url.path.endswith("/timezone/json"):
            value = self.zones.get(request.url.params["location"])
            body = google_timezone_ok(value) if isinstance(value, str) else None
        else:
            return httpx.Response(404, text="not found")

        if isinstance(value, httpx.Response):
            return value
        if body is None:
            return httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})
        return httpx.Response(200, json=body)


@pytest.fixture
def fake_maps(monkeypatch):
    """Route maps_client.new_client() through a FakeMaps MockTransport."""
    fake = FakeMaps()
    monkeypatch.setattr(
        maps_client,
        "new_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(fake)),
    )
    return fake


@pytest.fixture(scope="function")
def client():
    """Create a test client for the API."""
    with TestClient(app) as client:
        yield client
