
import logging

import httpx

from .. import config
from ..models import WeatherResult
from .http import request_json

logger = logging.getLogger(__name__)


def summarize(temp: int, rain: int) -> str:
    return f"Currently {temp}°C with a {rain}% chance of rain."


async def get_weather(lat: float, lon: float) -> WeatherResult:
    params = {
        "latitude": lat,
        "longitude": lon,
        "current": "temperature_2m,precipitation_probability",
        "forecast_days": 1,
    }

    try:
        data = await request_json(
            "GET", config.OPEN_METEO_URL, params=params, timeout=config.WEATHER_TIMEOUT
        )
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Open-Meteo request for ({lat}, {lon}) failed: {e}")
        return WeatherResult(available=False, reason="weather_fetch_failed")

    current = (data or {}).get("current") or {}
    temp = current.get("temperature_2m")
    if temp is None:
        return WeatherResult(available=False, reason="weather_data_unavailable")
    rain = current.get("precipitation_probability") or 0

    temp, rain = round(temp), round(rain)
    return WeatherResult(
        available=True,
        temperature_c=temp,
        precipitation_probability_percent=rain,
        forecast=summarize(temp, rain),
    )
