# app/config.py
import os
from dotenv import load_dotenv

load_dotenv()

USER_AGENT = os.getenv("USER_AGENT", "inkle-tourism/1.0 (contact: chaurasiya.saloni18@gmail.com)")
LOCATIONIQ_KEY = os.getenv("LOCATIONIQ_KEY")  # optional

NOMINATIM_URL = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org/search")
LOCATIONIQ_URL = os.getenv("LOCATIONIQ_URL", "https://us1.locationiq.com/v1/search.php")
OPEN_METEO_URL = os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
OVERPASS_URL = os.getenv("OVERPASS_URL", "https://overpass-api.de/api/interpreter")

GEOCODE_TIMEOUT = float(os.getenv("GEOCODE_TIMEOUT", "10"))
WEATHER_TIMEOUT = float(os.getenv("WEATHER_TIMEOUT", "10"))
PLACES_TIMEOUT = float(os.getenv("PLACES_TIMEOUT", "30"))

# retries after the first attempt; delay doubles each time
MAX_RETRIES = int(os.getenv("MAX_RETRIES", "2"))
RETRY_DELAY = float(os.getenv("RETRY_DELAY", "1.0"))

PLACES_RADIUS = int(os.getenv("PLACES_RADIUS", "10000"))
MAX_PLACES = int(os.getenv("MAX_PLACES", "5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

HEADERS = {"User-Agent": USER_AGENT, "Accept-Language": "en"}
