from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class RequestedFacet(str, Enum):
    WEATHER = "weather"
    PLACES = "places"
    ALL = "all"

    @classmethod
    def from_hint(cls, hint: Optional[str]) -> "RequestedFacet":
        """Case-insensitive lookup; anything unrecognized means all."""
        if not hint:
            return cls.ALL
        try:
            return cls(hint.strip().lower())
        except ValueError:
            return cls.ALL

    @property
    def needs_weather(self) -> bool:
        return self in (RequestedFacet.WEATHER, RequestedFacet.ALL)

    @property
    def needs_places(self) -> bool:
        return self in (RequestedFacet.PLACES, RequestedFacet.ALL)


class PlanRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    place: str
    what: RequestedFacet = RequestedFacet.ALL


class PlanBody(BaseModel):
    # wrong types become a 400 at the route; an unknown "what" means all
    place: Optional[Any] = None
    what: Optional[Any] = None


class QueryRequest(BaseModel):
    query: Optional[Any] = None  # e.g. "I'm going to go to Bangalore, let's plan my trip."


class Location(BaseModel):
    lat: float
    lon: float
    display_name: str


class GeocodeResult(BaseModel):
    found: bool
    location: Optional[Location] = None
    reason: Optional[str] = None  # unknown_place | geocoding_failed


class WeatherResult(BaseModel):
    available: bool
    temperature_c: Optional[int] = None
    precipitation_probability_percent: Optional[int] = None
    forecast: Optional[str] = None
    reason: Optional[str] = None  # weather_data_unavailable | weather_fetch_failed


class PlaceInfo(BaseModel):
    name: str
    type: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None


class PlacesResult(BaseModel):
    found: bool
    places: List[PlaceInfo] = Field(default_factory=list)
    reason: Optional[str] = None  # no_places_found | places_data_unavailable | places_fetch_failed

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.places]


class PlanResult(BaseModel):
    ok: bool
    place: str
    message: str
    error: Optional[str] = None
    coords: Optional[Location] = None
    weather: Optional[WeatherResult] = None
    places: Optional[PlacesResult] = None
