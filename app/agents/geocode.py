# app/agents/geocode.py
import logging
from typing import Optional

import httpx

from .. import config
from ..models import GeocodeResult, Location
from .http import request_json

logger = logging.getLogger(__name__)


def _first_location(data, place: str) -> Optional[Location]:
    if not data:
        return None
    first = data[0]
    return Location(
        lat=float(first["lat"]),
        lon=float(first["lon"]),
        display_name=first.get("display_name") or place,
    )


async def _try_nominatim(place: str) -> Optional[Location]:
    params = {"q": place, "format": "json", "limit": 1}
    data = await request_json(
        "GET", config.NOMINATIM_URL, params=params, headers=config.HEADERS,
        timeout=config.GEOCODE_TIMEOUT,
    )
    return _first_location(data, place)


async def _try_locationiq(place: str) -> Optional[Location]:
    if not config.LOCATIONIQ_KEY:
        return None
    params = {"key": config.LOCATIONIQ_KEY, "q": place, "format": "json", "limit": 1}
    data = await request_json(
        "GET", config.LOCATIONIQ_URL, params=params, headers=config.HEADERS,
        timeout=config.GEOCODE_TIMEOUT, max_retries=0,
    )
    return _first_location(data, place)


async def geocode(place: str) -> GeocodeResult:
    """
    Resolve a place name to coordinates and a display name.

      1) Nominatim, retried on transient errors
      2) LocationIQ once, if LOCATIONIQ_KEY is set and Nominatim failed

    An empty Nominatim answer is final: unknown_place, no retry, no fallback.
    """
    try:
        location = await _try_nominatim(place)
    except (httpx.HTTPError, ValueError, KeyError) as e:
        logger.warning(f"Nominatim lookup for {place!r} failed: {e}")
    else:
        if location is None:
            logger.info(f"No geocoding match for {place!r}")
            return GeocodeResult(found=False, reason="unknown_place")
        return GeocodeResult(found=True, location=location)

    if config.LOCATIONIQ_KEY:
        try:
            location = await _try_locationiq(place)
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.warning(f"LocationIQ fallback for {place!r} failed: {e}")
        else:
            if location is not None:
                return GeocodeResult(found=True, location=location)
            return GeocodeResult(found=False, reason="unknown_place")

    return GeocodeResult(found=False, reason="geocoding_failed")
