"""Static breed catalog.

Every ``BreedId`` has exactly one profile; the table is built once at import
and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from walkcast.domain import (
    BreedId,
    BreedProfile,
    CoatType,
    HeatSensitivity,
    SizeCategory,
    TemperatureRange,
)


def _range(low: float, high: float) -> TemperatureRange:
    return TemperatureRange(low=low, high=high)


def _profile(name: str, safe: tuple[float, float], caution: tuple[float, float], *,
             max_humidity: float, max_wind_speed: float, coat_type: CoatType,
             size_category: SizeCategory, heat_sensitivity: HeatSensitivity,
             extra_caution: tuple[tuple[float, float], ...] = ()) -> BreedProfile:
    """Build a profile from plain (low, high) tuples."""
    return BreedProfile(
        name=name,
        safe_temperature_range=_range(*safe),
        caution_temperature_range=_range(*caution),
        extra_caution_ranges=tuple(_range(*band) for band in extra_caution),
        max_humidity=max_humidity,
        max_wind_speed=max_wind_speed,
        coat_type=coat_type,
        size_category=size_category,
        heat_sensitivity=heat_sensitivity,
    )


BREED_PROFILES: Mapping[BreedId, BreedProfile] = MappingProxyType({
    BreedId.LABRADOR_RETRIEVER: _profile(
        "Labrador Retriever", (60.0, 80.0), (81.0, 90.0),
        max_humidity=70.0, max_wind_speed=20.0,
        coat_type=CoatType.SHORT, size_category=SizeCategory.LARGE,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    BreedId.GOLDEN_RETRIEVER: _profile(
        "Golden Retriever", (60.0, 80.0), (81.0, 90.0),
        max_humidity=70.0, max_wind_speed=20.0,
        coat_type=CoatType.LONG, size_category=SizeCategory.LARGE,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    BreedId.BULLDOG: _profile(
        "Bulldog", (60.0, 75.0), (76.0, 85.0),
        max_humidity=60.0, max_wind_speed=15.0,
        coat_type=CoatType.SHORT, size_category=SizeCategory.MEDIUM,
        heat_sensitivity=HeatSensitivity.HIGH,
    ),
    BreedId.HUSKY: _profile(
        "Husky", (20.0, 75.0), (76.0, 85.0),
        max_humidity=50.0, max_wind_speed=25.0,
        coat_type=CoatType.DOUBLE, size_category=SizeCategory.LARGE,
        heat_sensitivity=HeatSensitivity.HIGH,
    ),
    BreedId.GERMAN_SHEPHERD: _profile(
        "German Shepherd", (55.0, 80.0), (81.0, 90.0),
        max_humidity=65.0, max_wind_speed=20.0,
        coat_type=CoatType.DOUBLE, size_category=SizeCategory.LARGE,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    BreedId.CHIHUAHUA: _profile(
        "Chihuahua", (50.0, 80.0), (81.0, 85.0),
        max_humidity=70.0, max_wind_speed=15.0,
        coat_type=CoatType.SHORT, size_category=SizeCategory.SMALL,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    BreedId.POODLE: _profile(
        "Poodle", (60.0, 80.0), (81.0, 90.0),
        max_humidity=70.0, max_wind_speed=20.0,
        coat_type=CoatType.LONG, size_category=SizeCategory.MEDIUM,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    BreedId.BEAGLE: _profile(
        "Beagle", (60.0, 80.0), (81.0, 90.0),
        max_humidity=70.0, max_wind_speed=20.0,
        coat_type=CoatType.SHORT, size_category=SizeCategory.MEDIUM,
        heat_sensitivity=HeatSensitivity.MODERATE,
    ),
    # Mixed breeds get a cool band below the safe range and a warm band above it.
    BreedId.MIXED: _profile(
        "Mixed Breed", (65.0, 78.0), (55.0, 64.0),
        max_humidity=65.0, max_wind_speed=18.0,
        coat_type=CoatType.MIXED, size_category=SizeCategory.VARIES,
        heat_sensitivity=HeatSensitivity.MODERATE,
        extra_caution=((55.0, 64.0), (79.0, 85.0)),
    ),
})


def profile_for(breed_id: BreedId | str) -> BreedProfile:
    """Return the profile for a breed id (enum member or its string value).

    Raises ValueError for strings that are not a known breed id.
    """
    return BREED_PROFILES[BreedId(breed_id)]


def list_profiles() -> list[tuple[BreedId, BreedProfile]]:
    """All (id, profile) pairs in catalog order."""
    return [(breed_id, BREED_PROFILES[breed_id]) for breed_id in BreedId]


def resolve_profile(breed: BreedProfile | BreedId | str) -> BreedProfile:
    """Accept either a profile or an identifier and return the profile."""
    if isinstance(breed, BreedProfile):
        return breed
    return profile_for(breed)
