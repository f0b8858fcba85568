import logging
import httpx
from typing import List, Optional
from .. import config
from ..models import PlaceInfo, PlacesResult
from .http import request_json

logger = logging.getLogger(__name__)


def build_query(lat: float, lon: float, radius: int) -> str:
    return f"""
    [out:json][timeout:25];
    (
      node(around:{radius},{lat},{lon})["tourism"~"attraction|museum|viewpoint|zoo|theme_park|gallery"];
      way(around:{radius},{lat},{lon})["tourism"~"attraction|museum|viewpoint|zoo|theme_park|gallery"];
      relation(around:{radius},{lat},{lon})["tourism"~"attraction|museum|viewpoint|zoo|theme_park|gallery"];
      node(around:{radius},{lat},{lon})["historic"];
      way(around:{radius},{lat},{lon})["historic"];
      node(around:{radius},{lat},{lon})["amenity"="museum"];
      node(around:{radius},{lat},{lon})["leisure"~"park|garden"];
      way(around:{radius},{lat},{lon})["leisure"~"park|garden"];
    );
    out center 50;
    """


def _coord(el: dict, key: str) -> Optional[float]:
    if el.get(key) is not None:
        return el[key]
    return (el.get("center") or {}).get(key)


def extract_places(elements: list, limit: int) -> List[PlaceInfo]:
    """Named elements only, first occurrence of each name wins, at most `limit`."""
    places: List[PlaceInfo] = []
    seen = set()
    for el in elements:
        tags = el.get("tags", {}) or {}
        name = (tags.get("name") or tags.get("name:en") or "").strip()
        if not name or name in seen:
            continue
        seen.add(name)

        ptype = tags.get("tourism") or tags.get("historic") or tags.get("amenity") or tags.get("leisure")
        places.append(PlaceInfo(name=name, type=ptype, lat=_coord(el, "lat"), lon=_coord(el, "lon")))
        if len(places) >= limit:
            break

    return places


async def get_places(lat: float, lon: float, radius: Optional[int] = None, limit: Optional[int] = None) -> PlacesResult:
    """
    Query Overpass API for nearby tourist/historic/leisure POIs.
    Returns up to `limit` deduplicated places, or a reason code.
    """
    radius = radius or config.PLACES_RADIUS
    limit = limit or config.MAX_PLACES

    try:
        data = await request_json(
            "POST", config.OVERPASS_URL,
            data={"data": build_query(lat, lon, radius)},
            headers=config.HEADERS,
            timeout=config.PLACES_TIMEOUT,
        )
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Overpass request for ({lat}, {lon}) failed: {e}")
        return PlacesResult(found=False, reason="places_fetch_failed")

    elements = (data or {}).get("elements")
    if elements is None:
        return PlacesResult(found=False, reason="places_data_unavailable")

    places = extract_places(elements, limit)
    if not places:
        return PlacesResult(found=False, reason="no_places_found")
    return PlacesResult(found=True, places=places)
