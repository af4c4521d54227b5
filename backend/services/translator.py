"""Plain-English rendering of raw METAR and TAF reports."""
from typing import List, Optional, Union
from .extractors import (
    SkyLayer,
    Wind,
    extract_altimeter,
    extract_change_groups,
    extract_sky_layers,
    extract_temperature,
    extract_validity,
    extract_visibility,
    extract_weather,
    extract_wind,
    first_sky_layer,
    metar_sky_clear,
    taf_sky_clear,
)
from .lookups import (
    CLOUD_TYPES,
    INTENSITY,
    SKY_COVER,
    WEATHER_PHENOMENA,
)

METAR_FALLBACK = "Unable to translate METAR."
TAF_FALLBACK = "Unable to translate TAF."
NO_TAF = "No TAF available."


def _capitalize_first(text: str) -> str:
    # str.capitalize() would lowercase the rest
    return text[:1].upper() + text[1:]


def wind_sentence(wind: Optional[Wind], label: str = "Wind") -> Optional[str]:
    if wind is None:
        return None
    if wind.speed == 0:
        return "Winds calm."
    direction = "variable" if wind.direction == "VRB" else f"{wind.direction}°"
    gust = f" gusting {wind.gust} knots" if wind.gust is not None else ""
    return f"{label} {direction} at {wind.speed} knots{gust}."


def visibility_sentence(visibility: Optional[Union[int, float]]) -> Optional[str]:
    if visibility is None:
        return None
    shown = str(int(visibility)) if float(visibility).is_integer() else f"{visibility:.2f}"
    unit = "mile" if visibility == 1 else "miles"
    return f"Visibility {shown} statute {unit}."


def layer_phrase(layer: SkyLayer) -> str:
    cover = SKY_COVER.get(layer.cover, layer.cover)
    phrase = f"{cover} at {layer.altitude_ft:,} feet"
    if layer.cloud_type in CLOUD_TYPES:
        phrase += f" with {CLOUD_TYPES[layer.cloud_type]}"
    return phrase


def weather_sentence(report: str) -> Optional[str]:
    found = [
        INTENSITY.get(group.intensity, "") + WEATHER_PHENOMENA.get(group.code, group.code.lower())
        for group in extract_weather(report)
    ]
    if not found:
        return None
    return _capitalize_first(", ".join(found)) + "."


def sky_sentence(report: str) -> Optional[str]:
    layers = [layer_phrase(layer) for layer in extract_sky_layers(report)]
    if not layers and metar_sky_clear(report):
        layers.append("sky clear")
    if not layers:
        return None
    return _capitalize_first(", ".join(layers)) + "."


def temperature_sentence(report: str) -> Optional[str]:
    reading = extract_temperature(report)
    if reading is None:
        return None
    temperature, dewpoint = reading
    return f"Temperature {temperature}°C, dewpoint {dewpoint}°C."


def altimeter_sentence(report: str) -> Optional[str]:
    setting = extract_altimeter(report)
    if setting is None:
        return None
    return f"Altimeter {setting:.2f} inHg."


def translate_report(report: str) -> str:
    """Translate a raw METAR into plain English."""
    sentences: List[Optional[str]] = [
        wind_sentence(extract_wind(report)),
        visibility_sentence(extract_visibility(report)),
        weather_sentence(report),
        sky_sentence(report),
        temperature_sentence(report),
        altimeter_sentence(report),
    ]
    parts = [s for s in sentences if s]
    return " ".join(parts) if parts else METAR_FALLBACK


def validity_sentence(report: str) -> Optional[str]:
    period = extract_validity(report)
    if period is None:
        return None
    return (
        f"Forecast valid day {period.from_day} from {period.from_hour:02d}:00Z "
        f"to day {period.to_day} {period.to_hour:02d}:00Z."
    )


def forecast_sky_sentence(report: str) -> Optional[str]:
    # TAF summary only describes the first layer
    layer = first_sky_layer(report)
    if layer is not None:
        return _capitalize_first(layer_phrase(layer)) + "."
    if taf_sky_clear(report):
        return "Sky clear."
    return None


def change_groups_sentence(report: str) -> Optional[str]:
    groups = extract_change_groups(report)
    if not groups:
        return None
    noun = "change group" if len(groups) == 1 else "change groups"
    return f"Contains {len(groups)} {noun} ({', '.join(groups)})."


def translate_forecast(report: str) -> str:
    """Translate a raw TAF into a short plain-English summary."""
    if not report or not report.strip():
        return NO_TAF

    sentences: List[Optional[str]] = [
        validity_sentence(report),
        wind_sentence(extract_wind(report), label="Initial wind"),
        visibility_sentence(extract_visibility(report)),
        forecast_sky_sentence(report),
        change_groups_sentence(report),
    ]
    parts = [s for s in sentences if s]
    return " ".join(parts) if parts else TAF_FALLBACK
