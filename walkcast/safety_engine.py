"""Deterministic point-in-time safety assessment.

This module converts one weather reading + one breed profile into a
SafetyAssessment: the threshold-based level, the active warnings, a walk
duration band, a recommendation message and coarse time-of-day hints. No
window ranking is done here (see ``best_times``).
"""

from __future__ import annotations

from typing import Sequence

from walkcast.breeds import resolve_profile
from walkcast.domain import (
    CAUTION_MESSAGE,
    SAFE_MESSAGE,
    TOO_COLD_MESSAGE,
    TOO_HOT_MESSAGE,
    UNSAFE_MESSAGE,
    BreedId,
    BreedProfile,
    HeatSensitivity,
    SafetyAssessment,
    SafetyLevel,
    TimeRange,
    WalkDuration,
    WarningType,
    WeatherReading,
)
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="safety_engine")

HEAT_CUTOFF_F = 85.0
WARM_CUTOFF_F = 75.0
EVENING_CUTOFF_F = 80.0
HUMIDITY_CUTOFF_PERCENT = 70.0
FREEZING_CUTOFF_F = 32.0
WIND_CHILL_TEMP_F = 45.0
WIND_CHILL_SPEED_MPH = 15.0

_HEAT_SENSITIVE = {HeatSensitivity.HIGH, HeatSensitivity.EXTREME}

EARLY_MORNING = TimeRange(start_time="6:00 AM", end_time="8:00 AM", period="Early Morning")
EVENING = TimeRange(start_time="7:00 PM", end_time="9:00 PM", period="Evening")
MID_DAY = TimeRange(start_time="12:00 PM", end_time="2:00 PM", period="Mid-day")


def _add_warning(warnings: list[WarningType], warning: WarningType) -> None:
    """Append a warning unless it is already present."""
    if warning not in warnings:
        warnings.append(warning)


def generate_warnings(temperature: float, humidity: float, wind_speed: float,
                      breed: BreedProfile) -> list[WarningType]:
    """Collect every warning the reading triggers, first occurrence wins."""
    warnings: list[WarningType] = []

    # heat
    if temperature > HEAT_CUTOFF_F:
        _add_warning(warnings, WarningType.HEATSTROKE)
        _add_warning(warnings, WarningType.PAW_BURN)
    elif temperature > WARM_CUTOFF_F and humidity > HUMIDITY_CUTOFF_PERCENT:
        _add_warning(warnings, WarningType.DEHYDRATION)

    # cold
    if temperature < FREEZING_CUTOFF_F:
        _add_warning(warnings, WarningType.HYPOTHERMIA)
    if temperature < WIND_CHILL_TEMP_F and wind_speed > WIND_CHILL_SPEED_MPH:
        _add_warning(warnings, WarningType.WIND_CHILL)

    # heat-sensitive breeds pick up heatstroke risk earlier
    if breed.heat_sensitivity in _HEAT_SENSITIVE and temperature > WARM_CUTOFF_F:
        _add_warning(warnings, WarningType.HEATSTROKE)

    return warnings


def recommend_walk_duration(safety_level: SafetyLevel) -> WalkDuration:
    """Map a safety level to its walk duration band."""
    if safety_level == SafetyLevel.SAFE:
        return WalkDuration.RECOMMENDED
    if safety_level == SafetyLevel.CAUTION:
        return WalkDuration.MODERATE
    return WalkDuration.SHORT


def build_recommendation(safety_level: SafetyLevel, warnings: Sequence[WarningType]) -> str:
    """Pick the recommendation message for a level and its warnings."""
    if safety_level == SafetyLevel.SAFE:
        return SAFE_MESSAGE

    if safety_level == SafetyLevel.CAUTION:
        if not warnings:
            return CAUTION_MESSAGE
        names = ", ".join(w.display_name for w in warnings)
        return f"{CAUTION_MESSAGE} Active warnings: {names}."

    if WarningType.HEATSTROKE in warnings or WarningType.PAW_BURN in warnings:
        return TOO_HOT_MESSAGE
    if WarningType.HYPOTHERMIA in warnings:
        return TOO_COLD_MESSAGE
    return UNSAFE_MESSAGE


def suggest_time_ranges(temperature: float, humidity: float) -> list[TimeRange]:
    """Coarse time-of-day hints; conditions are not exclusive."""
    ranges: list[TimeRange] = []
    if temperature > WARM_CUTOFF_F or humidity > HUMIDITY_CUTOFF_PERCENT:
        ranges.append(EARLY_MORNING)
    if temperature > EVENING_CUTOFF_F:
        ranges.append(EVENING)
    if temperature < WIND_CHILL_TEMP_F:
        ranges.append(MID_DAY)
    return ranges


def assess(weather: WeatherReading, breed: BreedProfile | BreedId | str) -> SafetyAssessment:
    """Pure function: evaluate one reading for one breed."""
    profile = resolve_profile(breed)
    temperature = weather.temperature
    humidity = weather.humidity
    wind_speed = weather.wind_speed

    safety_level = profile.assess(temperature, humidity, wind_speed)
    warnings = generate_warnings(temperature, humidity, wind_speed, profile)

    assessment = SafetyAssessment(
        safety_level=safety_level,
        active_warnings=warnings,
        walk_duration=recommend_walk_duration(safety_level),
        recommendation=build_recommendation(safety_level, warnings),
        best_time_recommendations=suggest_time_ranges(temperature, humidity),
    )
    logger.debug(
        "Assessed %s at %.1fF/%.0f%%/%.1fmph -> %s",
        profile.name, temperature, humidity, wind_speed, safety_level.value,
    )
    return assessment
