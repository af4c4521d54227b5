"""Field extractors for raw METAR/TAF strings.

Each extractor is an independent regex scan over the whole report. Missing
groups come back as None (or an empty list), never as an exception, since
real-world reports routinely omit groups or carry remarks we don't decode.
"""
import re
from typing import List, NamedTuple, Optional, Tuple, Union

from .lookups import (
    CHANGE_INDICATORS,
    CLEAR_SKY_METAR,
    CLEAR_SKY_TAF,
    WEATHER_DESCRIPTORS,
    WEATHER_PHENOMENA,
)


class Wind(NamedTuple):
    direction: str  # "VRB" or three digits, e.g. "280"
    speed: int
    gust: Optional[int] = None


class WeatherGroup(NamedTuple):
    intensity: Optional[str]
    descriptor: Optional[str]
    code: str


class SkyLayer(NamedTuple):
    cover: str
    altitude_ft: int
    cloud_type: Optional[str] = None


class ValidityPeriod(NamedTuple):
    from_day: int
    from_hour: int
    to_day: int
    to_hour: int


_VIS_BELOW_MIN = re.compile(r"\bM\d+/\d+SM\b")
# Whole part is a single digit so a "dddd/dddd" time range ahead of a
# fraction isn't read as miles
_VIS_MIXED = re.compile(r"\b(\d)\s+(\d)/(\d{1,2})SM\b")
_VIS_FRACTION = re.compile(r"\b(\d+)/(\d+)SM\b")
_VIS_WHOLE = re.compile(r"\b(\d+)SM\b")

_CEILING = re.compile(r"\b(BKN|OVC)(\d{3})(?:CB|TCU)?\b")
_SKY_LAYER = re.compile(r"\b(FEW|SCT|BKN|OVC)(\d{3})(CB|TCU)?\b")
_CLEAR_SKY_METAR = re.compile(r"\b(%s)\b" % "|".join(CLEAR_SKY_METAR))
_CLEAR_SKY_TAF = re.compile(r"\b(%s)\b" % "|".join(CLEAR_SKY_TAF))

_WIND = re.compile(r"\b(VRB|\d{3})(\d{2,3})(?:G(\d{2,3}))?KT\b")

# Intensity only counts at the start of a group, so anchor on whitespace
# rather than \b (which never sits between a space and "-" or "+").
_WEATHER = re.compile(
    r"(?<!\S)([-+]|VC)?(%s)?(%s)\b" % (
        "|".join(WEATHER_DESCRIPTORS),
        "|".join(WEATHER_PHENOMENA),
    )
)

_TEMPERATURE = re.compile(r"\b(M?\d{2})/(M?\d{2})\b")
_ALTIMETER = re.compile(r"\bA(\d{4})\b")

_VALIDITY = re.compile(r"\b(\d{2})(\d{2})/(\d{2})(\d{2})\b")
_CHANGE_GROUP = re.compile(r"\b(%s|FM\d{6})\b" % "|".join(CHANGE_INDICATORS))


def extract_visibility(report: str) -> Optional[Union[int, float]]:
    """Prevailing visibility in statute miles, or None when not reported.

    "M1/4SM" (below the lowest reportable value) is returned as 0.
    """
    if _VIS_BELOW_MIN.search(report):
        return 0

    match = _VIS_MIXED.search(report)
    if match:
        whole, num, den = (int(g) for g in match.groups())
        if den == 0:
            return None
        return whole + num / den

    match = _VIS_FRACTION.search(report)
    if match:
        num, den = (int(g) for g in match.groups())
        if den == 0:
            return None
        return num / den

    match = _VIS_WHOLE.search(report)
    if match:
        return int(match.group(1))

    return None


def extract_ceiling(report: str) -> Optional[int]:
    """Height in feet of the lowest broken or overcast layer."""
    heights = [int(m.group(2)) * 100 for m in _CEILING.finditer(report)]
    return min(heights) if heights else None


def extract_sky_layers(report: str) -> List[SkyLayer]:
    return [
        SkyLayer(cover=m.group(1), altitude_ft=int(m.group(2)) * 100, cloud_type=m.group(3))
        for m in _SKY_LAYER.finditer(report)
    ]


def first_sky_layer(report: str) -> Optional[SkyLayer]:
    layers = extract_sky_layers(report)
    return layers[0] if layers else None


def metar_sky_clear(report: str) -> bool:
    """True for a CLR, SKC or CAVOK group."""
    return _CLEAR_SKY_METAR.search(report) is not None


def taf_sky_clear(report: str) -> bool:
    """True for an SKC or CAVOK group. CLR isn't used in forecasts."""
    return _CLEAR_SKY_TAF.search(report) is not None


def extract_wind(report: str) -> Optional[Wind]:
    match = _WIND.search(report)
    if not match:
        return None
    direction, speed, gust = match.groups()
    return Wind(
        direction=direction,
        speed=int(speed),
        gust=int(gust) if gust else None,
    )


def extract_weather(report: str) -> List[WeatherGroup]:
    return [
        WeatherGroup(intensity=m.group(1), descriptor=m.group(2), code=m.group(3))
        for m in _WEATHER.finditer(report)
    ]


def _signed_celsius(value: str) -> int:
    # "M" prefix marks a negative value
    if value.startswith("M"):
        return -int(value[1:])
    return int(value)


def extract_temperature(report: str) -> Optional[Tuple[int, int]]:
    """(temperature, dewpoint) in degrees Celsius."""
    match = _TEMPERATURE.search(report)
    if not match:
        return None
    return _signed_celsius(match.group(1)), _signed_celsius(match.group(2))


def extract_altimeter(report: str) -> Optional[float]:
    """Altimeter setting in inches of mercury."""
    match = _ALTIMETER.search(report)
    if not match:
        return None
    return int(match.group(1)) / 100


def extract_validity(report: str) -> Optional[ValidityPeriod]:
    match = _VALIDITY.search(report)
    if not match:
        return None
    return ValidityPeriod(*(int(g) for g in match.groups()))


def extract_change_groups(report: str) -> List[str]:
    """Literal TEMPO / BECMG / FMddhhmm tokens, in report order."""
    return _CHANGE_GROUP.findall(report)
