import logging
import os
import re
import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

AVIATIONWEATHER_BASE = os.getenv("AVIATIONWEATHER_BASE", "https://aviationweather.gov/api/data")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

STATION_PATTERN = re.compile(r"[a-zA-Z]{3,4}")


class WeatherServiceError(Exception):
    """Base class for failures while getting a station's reports."""


class InvalidStationError(WeatherServiceError):
    pass


class StationNotFoundError(WeatherServiceError):
    def __init__(self, station: str):
        super().__init__(f"No data found for station \"{station}\".")
        self.station = station


class UpstreamFetchError(WeatherServiceError):
    pass


def normalize_station(station: str | None) -> str:
    """Validate a 3-4 letter station identifier and return it upper-cased."""
    if not station or not STATION_PATTERN.fullmatch(station):
        raise InvalidStationError("Invalid station. Must be 3–4 letters only (e.g. KORD).")
    return station.upper()


def _fetch_raw(product: str, station: str) -> str:
    url = f"{AVIATIONWEATHER_BASE}/{product}"
    logger.info(f"🌐 Fetching {product.upper()}: {url}?ids={station}")
    try:
        r = requests.get(url, params={"ids": station, "format": "raw"}, timeout=REQUEST_TIMEOUT)
    except requests.exceptions.Timeout as e:
        logger.error(f"⏱ {product.upper()} request timed out for {station}")
        raise UpstreamFetchError(f"{product.upper()} request timed out") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ {product.upper()} request failed for {station}: {e}")
        raise UpstreamFetchError(str(e)) from e

    logger.info(f"📊 {product.upper()} Response Status: {r.status_code}")

    if not r.ok:
        logger.warning(f"❌ {product.upper()} API Error {r.status_code} for {station}: {r.text}")
        raise StationNotFoundError(station)

    return r.text.strip()


def fetch_metar(station: str) -> str:
    """Raw METAR text for a station, whitespace-trimmed."""
    return _fetch_raw("metar", station)


def fetch_taf(station: str) -> str:
    """Raw TAF text for a station, whitespace-trimmed. May be empty."""
    return _fetch_raw("taf", station)
