# app/orchestrator.py
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .agents.geocode import geocode
from .agents.places import get_places
from .agents.weather import get_weather
from .models import (
    GeocodeResult,
    PlacesResult,
    PlanRequest,
    PlanResult,
    RequestedFacet,
    WeatherResult,
)

logger = logging.getLogger(__name__)

UNKNOWN_PLACE_MESSAGE = "I don't know this place exists"

Resolver = Callable[[str], Awaitable[GeocodeResult]]
WeatherLookup = Callable[[float, float], Awaitable[WeatherResult]]
PlacesLookup = Callable[[float, float], Awaitable[PlacesResult]]


def city_name(display_name: str) -> str:
    # "Bangalore, Karnataka, India" -> "Bangalore"
    return display_name.split(",")[0].strip()


def compose_message(
    place_name: str,
    weather: Optional[WeatherResult],
    places: Optional[PlacesResult],
    facet: RequestedFacet,
) -> str:
    """
    Build the reply text from whatever arrived. `None` means the facet was
    not requested and is never mentioned.
    """
    city = city_name(place_name)
    parts = []

    weather_ok = weather is not None and weather.available
    if weather_ok:
        parts.append(
            f"In {city} it's currently {weather.temperature_c}°C "
            f"with a chance of {weather.precipitation_probability_percent}% to rain."
        )

    if places is not None and places.found:
        names = "\n".join(places.names)
        if facet.needs_weather and weather_ok:
            parts.append(f"And these are the places you can go:\n{names}")
        else:
            parts.append(f"In {city} these are the places you can go, \n{names}")

    if weather is not None and not weather.available:
        parts.append("(Weather data unavailable)")
    if places is not None and not places.found:
        parts.append("(Places data unavailable)")

    return " ".join(parts)


def _settle(result, failure, label: str):
    if isinstance(result, BaseException):
        logger.error(f"{label} lookup raised instead of reporting a failure", exc_info=result)
        return failure
    if not isinstance(result, type(failure)):
        logger.error(f"{label} lookup returned {type(result).__name__}, expected {type(failure).__name__}")
        return failure
    return result


async def plan(
    request: PlanRequest,
    *,
    resolve: Optional[Resolver] = None,
    fetch_weather: Optional[WeatherLookup] = None,
    fetch_places: Optional[PlacesLookup] = None,
) -> PlanResult:
    """
    Resolve the place, run the requested lookups concurrently and compose
    the reply. Never raises: an unresolvable place is a failed result,
    a failed weather or places lookup only degrades the message.
    """
    resolve = resolve or geocode
    fetch_weather = fetch_weather or get_weather
    fetch_places = fetch_places or get_places
    facet = request.what

    # -----------------------------------------
    # GEOCODE (fatal on failure)
    # -----------------------------------------
    try:
        geo = await resolve(request.place)
    except Exception as e:
        geo = e
    geo = _settle(geo, GeocodeResult(found=False, reason="geocoding_failed"), "Resolver")

    if not geo.found or geo.location is None:
        return PlanResult(
            ok=False,
            place=request.place,
            message=UNKNOWN_PLACE_MESSAGE,
            error=geo.reason or "unknown_place",
        )

    location = geo.location

    # ----------------------------------------------------
    # WEATHER + PLACES CONCURRENTLY, only what was asked
    # ----------------------------------------------------
    coros = {}
    if facet.needs_weather:
        coros["weather"] = fetch_weather(location.lat, location.lon)
    if facet.needs_places:
        coros["places"] = fetch_places(location.lat, location.lon)

    completed = await asyncio.gather(*coros.values(), return_exceptions=True)
    results = dict(zip(coros.keys(), completed))

    weather = None
    if "weather" in results:
        weather = _settle(
            results["weather"], WeatherResult(available=False, reason="weather_fetch_failed"), "Weather"
        )
        if not weather.available:
            logger.warning(f"Weather unavailable for {location.display_name!r}: {weather.reason}")

    places = None
    if "places" in results:
        places = _settle(
            results["places"], PlacesResult(found=False, reason="places_fetch_failed"), "Places"
        )
        if not places.found:
            logger.warning(f"Places unavailable for {location.display_name!r}: {places.reason}")

    return PlanResult(
        ok=True,
        place=location.display_name,
        message=compose_message(location.display_name, weather, places, facet),
        coords=location,
        weather=weather,
        places=places,
    )
