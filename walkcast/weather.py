"""Normalize weather payloads into WeatherReading values and format them for display.

Callers fetch weather themselves; this module only understands the shape of an
OpenWeatherMap current-weather response (imperial units) so the payload can be
handed to the engine unchanged.
"""
from __future__ import annotations

import datetime as dt
import math
from typing import Any, Mapping

from walkcast.domain import WeatherReading
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather")

UNKNOWN_CONDITION = "Unknown"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def format_temperature(temperature: float) -> str:
    return f"{round_half_away(temperature)}°F"


def format_humidity(humidity: float) -> str:
    return f"{round_half_away(humidity)}%"


def format_wind_speed(wind_speed: float) -> str:
    return f"{round_half_away(wind_speed)} mph"


def _number(value: Any, field: str) -> float:
    """Coerce a JSON number to float, rejecting bools, strings and non-finite values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{field}' must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"'{field}' must be finite")
    return number


def _integer(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{field}' must be an integer, got {type(value).__name__}")
    return value


def _local_timestamp(payload: Mapping[str, Any]) -> dt.datetime | None:
    """Convert `dt` (unix seconds) + `timezone` (offset seconds) to an aware local datetime."""
    epoch = payload.get("dt")
    if epoch is None:
        return None
    epoch = _integer(epoch, "dt")
    offset = payload.get("timezone")
    offset = 0 if offset is None else _integer(offset, "timezone")
    try:
        tz = dt.timezone(dt.timedelta(seconds=offset))
        return dt.datetime.fromtimestamp(epoch, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"'dt'/'timezone' out of range: {e}") from e


def _condition(payload: Mapping[str, Any]) -> str:
    """First weather condition label, or 'Unknown'."""
    conditions = payload.get("weather")
    if conditions is None:
        return UNKNOWN_CONDITION
    if not isinstance(conditions, list):
        raise ValueError("'weather' must be a list")
    if conditions and isinstance(conditions[0], Mapping):
        label = conditions[0].get("main")
        if isinstance(label, str) and label:
            return label
    return UNKNOWN_CONDITION


def reading_from_openweather(payload: Mapping[str, Any]) -> WeatherReading:
    """Build a WeatherReading from an OpenWeatherMap current-weather payload.

    Raises ValueError for any malformed payload: missing or non-numeric
    ``main.temp``/``main.humidity``/``wind.speed``, a non-list ``weather``, or
    a ``dt``/``timezone`` that is not an in-range integer. A missing ``wind``
    block is treated as calm air.
    """
    main = payload.get("main")
    if not isinstance(main, Mapping):
        raise ValueError("payload is missing the 'main' block")
    temperature = main.get("temp")
    humidity = main.get("humidity")
    if temperature is None or humidity is None:
        raise ValueError("payload 'main' block needs both 'temp' and 'humidity'")

    wind = payload.get("wind") or {}
    if not isinstance(wind, Mapping):
        raise ValueError("'wind' must be an object")
    wind_speed = wind.get("speed")
    if wind_speed is None:
        logger.debug("No wind speed in payload; assuming 0 mph")
        wind_speed = 0.0

    timestamp = _local_timestamp(payload)
    return WeatherReading(
        temperature=_number(temperature, "main.temp"),
        humidity=_number(humidity, "main.humidity"),
        wind_speed=_number(wind_speed, "wind.speed"),
        timestamp=timestamp,
        hour=timestamp.hour if timestamp else None,
        condition=_condition(payload),
    )


def to_display_strings(reading: WeatherReading) -> dict[str, str]:
    """Return a display-friendly dict for API serialization."""
    return {
        "temperature": format_temperature(reading.temperature),
        "humidity": format_humidity(reading.humidity),
        "wind_speed": format_wind_speed(reading.wind_speed),
        "condition": reading.condition or UNKNOWN_CONDITION,
    }
