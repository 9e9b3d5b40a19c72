"""Rank the four canonical daily walking windows for a breed.

Each window gets one representative reading (first matching forecast hour,
else the current reading), a weighted 0-1 score and display labels. When no
reading is available at all the window falls back to a fixed default entry.

The score-derived safety level is independent of ``BreedProfile.assess`` and
can disagree with it for the same reading.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Sequence

from walkcast.breeds import resolve_profile
from walkcast.config import Settings, settings as default_settings
from walkcast.domain import (
    BreedId,
    BreedProfile,
    OptimalWalkTime,
    SafetyLevel,
    WeatherReading,
)
from walkcast.weather import format_temperature, round_half_away
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="best_times")

TIME_WINDOWS: tuple[tuple[int, int], ...] = (
    (6, 9),    # early morning
    (9, 12),   # late morning
    (15, 18),  # late afternoon
    (18, 21),  # evening
)

FALLBACK_SCORE = 0.7
FALLBACK_TEMPERATURE = "70°F"
LOW_UV = "Low UV"
MODERATE_UV = "Moderate UV"


def generate_time_windows() -> list[tuple[int, int]]:
    """The fixed (start, end) hour windows, end exclusive."""
    return list(TIME_WINDOWS)


def _clamp_score(score: float) -> float:
    """Clamp a score to the 0-1 range."""
    return max(0.0, min(1.0, score))


def _select_reading(window: tuple[int, int], current_weather: WeatherReading | None,
                    hourly_forecast: Sequence[WeatherReading] | None) -> WeatherReading | None:
    """First forecast hour inside the window, else the current reading."""
    start, end = window
    for reading in hourly_forecast or ():
        hour = reading.hour_of_day
        if hour is not None and start <= hour < end:
            return reading
    return current_weather


def calculate_safety_score(temperature: float, humidity: float, wind_speed: float,
                           breed: BreedProfile, *, settings: Settings | None = None) -> float:
    """Weighted temperature/humidity/wind fitness in [0, 1].

    Only the primary caution range counts toward the temperature term.
    """
    cfg = settings or default_settings

    if breed.safe_temperature_range.contains(temperature):
        temp_score = 1.0
    elif breed.caution_temperature_range.contains(temperature):
        temp_score = 0.6
    else:
        temp_score = 0.2

    humidity_score = 1.0 if humidity <= breed.max_humidity else 0.5
    wind_score = 1.0 if wind_speed <= breed.max_wind_speed else 0.5

    weighted = (temp_score * cfg.temperature_weight
                + humidity_score * cfg.humidity_weight
                + wind_score * cfg.wind_weight)
    return _clamp_score(weighted)


def determine_safety_level(score: float) -> SafetyLevel:
    """Bucket a window score into a safety level."""
    if 0.8 <= score <= 1.0:
        return SafetyLevel.SAFE
    if 0.5 <= score < 0.8:
        return SafetyLevel.CAUTION
    return SafetyLevel.UNSAFE


def _format_hour(hour: int, day: date) -> str:
    """Render an hour offset on the given day as 'h:mm AM'."""
    moment = datetime.combine(day, time()) + timedelta(hours=hour)
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{moment.hour % 12 or 12}:{moment.minute:02d} {suffix}"


def format_time_range(start: int, end: int, *, today: date | None = None) -> str:
    """Format a window as 'h:mm AM - h:mm PM' on today's calendar day."""
    day = today or date.today()
    return f"{_format_hour(start, day)} - {_format_hour(end, day)}"


def generate_reasoning(temperature: float, breed: BreedProfile) -> str:
    """Short explanation keyed off the temperature band."""
    name = breed.name
    temp = round_half_away(temperature)
    if 70 <= temperature <= 80:
        return f"Perfect {temp}°F conditions for {name}"
    if 60 <= temperature < 70:
        return f"Good {temp}°F weather for {name} walks"
    if 50 <= temperature < 60:
        return f"Cool {temp}°F - suitable for {name} with proper gear"
    if temperature > 80:
        return f"Warm {temp}°F - keep walks short for {name}"
    return f"Cold {temp}°F - limit outdoor time for {name}"


def estimate_uv_index(window: tuple[int, int]) -> str:
    """Coarse UV label from the window's hour bounds alone."""
    start, end = window
    if start >= 6 and end <= 10:
        return LOW_UV
    if start >= 10 and end <= 16:
        return MODERATE_UV
    return LOW_UV


def generate_recommendation(safety_level: SafetyLevel, breed: BreedProfile) -> str:
    name = breed.name
    if safety_level == SafetyLevel.SAFE:
        return f"Ideal for longer walks with {name}"
    if safety_level == SafetyLevel.CAUTION:
        return f"Moderate walks recommended for {name}"
    return f"Short walks only for {name}"


def default_optimal_time(window: tuple[int, int], breed: BreedProfile, *,
                         today: date | None = None) -> OptimalWalkTime:
    """Fallback entry used when no weather data is available for a window."""
    return OptimalWalkTime(
        time_range=format_time_range(*window, today=today),
        safety_level=SafetyLevel.CAUTION,
        temperature=FALLBACK_TEMPERATURE,
        reasoning=f"Typical conditions for {breed.name}",
        uv_index=LOW_UV,
        recommendation=f"Standard walking time for {breed.name}",
        score=FALLBACK_SCORE,
    )


def calculate_optimal_time(window: tuple[int, int], breed: BreedProfile,
                           current_weather: WeatherReading | None = None,
                           hourly_forecast: Sequence[WeatherReading] | None = None, *,
                           settings: Settings | None = None,
                           today: date | None = None) -> OptimalWalkTime:
    """Score and label a single window."""
    reading = _select_reading(window, current_weather, hourly_forecast)
    if reading is None:
        logger.debug("No weather for window %s-%s; using default entry", *window)
        return default_optimal_time(window, breed, today=today)

    score = calculate_safety_score(
        reading.temperature, reading.humidity, reading.wind_speed, breed, settings=settings,
    )
    safety_level = determine_safety_level(score)
    return OptimalWalkTime(
        time_range=format_time_range(*window, today=today),
        safety_level=safety_level,
        temperature=format_temperature(reading.temperature),
        reasoning=generate_reasoning(reading.temperature, breed),
        uv_index=estimate_uv_index(window),
        recommendation=generate_recommendation(safety_level, breed),
        score=score,
    )


def calculate_best_times(breed: BreedProfile | BreedId | str,
                         current_weather: WeatherReading | None = None,
                         hourly_forecast: Sequence[WeatherReading] | None = None, *,
                         settings: Settings | None = None,
                         today: date | None = None) -> list[OptimalWalkTime]:
    """
    Score the four daily windows and return the best ones.

    - Windows are ordered by descending score; ties keep window order.
    - At most ``settings.max_time_windows`` entries are returned.
    """
    cfg = settings or default_settings
    profile = resolve_profile(breed)
    day = today or date.today()

    times = [
        calculate_optimal_time(window, profile, current_weather, hourly_forecast,
                               settings=cfg, today=day)
        for window in generate_time_windows()
    ]

    # sorted() is stable, so equal scores keep window order
    ranked = sorted(times, key=lambda t: -t.score)
    return ranked[: cfg.max_time_windows]
