"""Pytest configuration and fixtures."""

import httpx
import pytest
import pytest_asyncio

from app import config
from app.main import app
from app.models import GeocodeResult, Location, PlaceInfo, PlacesResult, WeatherResult


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch):
    monkeypatch.setattr(config, "RETRY_DELAY", 0.0)
    monkeypatch.setattr(config, "LOCATIONIQ_KEY", None)


@pytest.fixture
def bangalore() -> Location:
    return Location(lat=12.9716, lon=77.5946, display_name="Bangalore, Karnataka, India")


@pytest.fixture
def sunny() -> WeatherResult:
    return WeatherResult(
        available=True,
        temperature_c=24,
        precipitation_probability_percent=35,
        forecast="Currently 24°C with a 35% chance of rain.",
    )


@pytest.fixture
def sights() -> PlacesResult:
    return PlacesResult(
        found=True,
        places=[PlaceInfo(name="Lalbagh"), PlaceInfo(name="Bangalore Palace")],
    )


class FakeLookups:
    """Recording stand-ins for the three agents."""

    def __init__(self, geo, weather=None, places=None):
        self.geo = geo
        self.weather = weather
        self.places = places
        self.calls = []

    async def resolve(self, place):
        self.calls.append(("geocode", place))
        if isinstance(self.geo, Exception):
            raise self.geo
        return self.geo

    async def fetch_weather(self, lat, lon):
        self.calls.append(("weather", lat, lon))
        if isinstance(self.weather, Exception):
            raise self.weather
        return self.weather

    async def fetch_places(self, lat, lon):
        self.calls.append(("places", lat, lon))
        if isinstance(self.places, Exception):
            raise self.places
        return self.places

    def called(self, name):
        return any(c[0] == name for c in self.calls)

    def as_kwargs(self):
        return {
            "resolve": self.resolve,
            "fetch_weather": self.fetch_weather,
            "fetch_places": self.fetch_places,
        }


@pytest.fixture
def lookups(bangalore, sunny, sights):
    return FakeLookups(GeocodeResult(found=True, location=bangalore), sunny, sights)


@pytest.fixture
def mock_http(monkeypatch):
    """Route every httpx.AsyncClient through a MockTransport handler."""
    real_client = httpx.AsyncClient

    def install(handler):
        def factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", factory)

    return install


@pytest_asyncio.fixture
async def api_client():
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
