"""Domain vocabulary and strict schemas for breed-aware walk assessments.

This module defines the stable contract between the scoring engine and its
callers: enums, breed profiles, weather readings and the result payloads that
flow out of the system. Interpretation logic lives in ``safety_engine`` and
``best_times``; the only behavior here is the breed-level threshold check.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class _StrictBaseModel(BaseModel):
    """Base model with strict extra handling."""

    model_config = ConfigDict(extra="forbid")


class _FrozenModel(_StrictBaseModel):
    """Strict model that cannot be mutated after construction."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class BreedId(str, Enum):
    """Identifiers for every breed with a profile in the catalog."""
    LABRADOR_RETRIEVER = "labrador_retriever"
    GOLDEN_RETRIEVER = "golden_retriever"
    BULLDOG = "bulldog"
    HUSKY = "husky"
    GERMAN_SHEPHERD = "german_shepherd"
    CHIHUAHUA = "chihuahua"
    POODLE = "poodle"
    BEAGLE = "beagle"
    MIXED = "mixed"


class CoatType(str, Enum):
    """Coat category of a breed."""
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    DOUBLE = "double"
    MIXED = "mixed"

    @property
    def display_name(self) -> str:
        return self.value.title()


class SizeCategory(str, Enum):
    """Body size category of a breed."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra_large"
    VARIES = "varies"

    @property
    def display_name(self) -> str:
        if self is SizeCategory.EXTRA_LARGE:
            return "XL"
        return self.value.title()


class HeatSensitivity(str, Enum):
    """How strongly a breed reacts to heat."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"

    @property
    def display_name(self) -> str:
        return self.value.title()


class SafetyLevel(str, Enum):
    """Coarse verdict for walking a breed in given conditions."""
    SAFE = "safe"
    CAUTION = "caution"
    UNSAFE = "unsafe"


class WarningType(str, Enum):
    """Named risks that can co-occur in a single assessment."""
    HEATSTROKE = "heatstroke"
    DEHYDRATION = "dehydration"
    PAW_BURN = "paw_burn"
    HYPOTHERMIA = "hypothermia"
    WIND_CHILL = "wind_chill"

    @property
    def display_name(self) -> str:
        return _WARNING_DISPLAY_NAMES[self]


_WARNING_DISPLAY_NAMES = {
    WarningType.HEATSTROKE: "Heatstroke Risk",
    WarningType.DEHYDRATION: "Dehydration Risk",
    WarningType.PAW_BURN: "Paw Burn Risk",
    WarningType.HYPOTHERMIA: "Hypothermia Risk",
    WarningType.WIND_CHILL: "Wind Chill Risk",
}


class WalkDuration(str, Enum):
    """Recommended maximum walk length bucket, correlated with safety level."""
    SHORT = "short"
    MODERATE = "moderate"
    RECOMMENDED = "recommended"
    EXTENDED = "extended"

    @property
    def display_name(self) -> str:
        return _DURATION_LABELS[self][0]

    @property
    def max_minutes(self) -> int:
        return _DURATION_LABELS[self][1]


_DURATION_LABELS = {
    WalkDuration.SHORT: ("5-15 minutes", 15),
    WalkDuration.MODERATE: ("20-30 minutes", 30),
    WalkDuration.RECOMMENDED: ("30-45 minutes", 45),
    WalkDuration.EXTENDED: ("45+ minutes", 120),
}


# Fixed messages shared by the breed profile and the assessment engine.
SAFE_MESSAGE = "Perfect for walks!"
CAUTION_MESSAGE = "Exercise caution during walks"
UNSAFE_MESSAGE = "Avoid outdoor activities"
TOO_HOT_MESSAGE = "Too hot for walks! Risk of paw burns and overheating."
TOO_COLD_MESSAGE = "Too cold for most dogs! Keep walks very short."


class TemperatureRange(_FrozenModel):
    """Closed interval of temperatures in °F."""
    low: float
    high: float

    def contains(self, value: float) -> bool:
        """Return True if value lies within [low, high]."""
        return self.low <= value <= self.high


class WeatherReading(_FrozenModel):
    """A single weather observation or forecast hour supplied by the caller."""
    temperature: float
    humidity: float = Field(ge=0.0, le=100.0)
    wind_speed: float = Field(default=0.0, ge=0.0)
    timestamp: datetime | None = None
    hour: int | None = Field(default=None, ge=0, le=23)
    condition: str | None = None

    @property
    def hour_of_day(self) -> int | None:
        """Hour used to match the reading to a daily window, if known."""
        if self.hour is not None:
            return self.hour
        if self.timestamp is not None:
            return self.timestamp.hour
        return None


class BreedProfile(_FrozenModel):
    """Static temperature/humidity/wind tolerances for one breed."""
    name: str
    safe_temperature_range: TemperatureRange
    caution_temperature_range: TemperatureRange
    extra_caution_ranges: Tuple[TemperatureRange, ...] = ()
    max_humidity: float
    max_wind_speed: float
    coat_type: CoatType
    size_category: SizeCategory
    heat_sensitivity: HeatSensitivity

    def in_caution_band(self, temperature: float) -> bool:
        """True if the temperature falls in the caution range or any extra caution band."""
        if self.caution_temperature_range.contains(temperature):
            return True
        return any(band.contains(temperature) for band in self.extra_caution_ranges)

    def assess(self, temperature: float, humidity: float, wind_speed: float) -> SafetyLevel:
        """Threshold-based safety level for this breed.

        Humidity and wind only ever downgrade a safe temperature to caution,
        never to unsafe.
        """
        if self.safe_temperature_range.contains(temperature):
            if humidity > self.max_humidity or wind_speed > self.max_wind_speed:
                return SafetyLevel.CAUTION
            return SafetyLevel.SAFE
        if self.in_caution_band(temperature):
            return SafetyLevel.CAUTION
        return SafetyLevel.UNSAFE

    def walk_recommendation(self, reading: WeatherReading) -> str:
        """Short breed-level message for a reading."""
        level = self.assess(reading.temperature, reading.humidity, reading.wind_speed)
        if level == SafetyLevel.SAFE:
            return SAFE_MESSAGE
        if level == SafetyLevel.CAUTION:
            return CAUTION_MESSAGE
        return UNSAFE_MESSAGE


class TimeRange(_FrozenModel):
    """Suggested walking time range expressed as display labels."""
    start_time: str
    end_time: str
    period: str

    @property
    def display_text(self) -> str:
        return f"{self.start_time} - {self.end_time} ({self.period})"


class SafetyAssessment(_FrozenModel):
    """Point-in-time safety verdict for a breed and a reading."""
    safety_level: SafetyLevel
    active_warnings: List[WarningType] = Field(default_factory=list)
    walk_duration: WalkDuration
    recommendation: str
    best_time_recommendations: List[TimeRange] = Field(default_factory=list)


class OptimalWalkTime(_FrozenModel):
    """One scored daily walking window."""
    time_range: str
    safety_level: SafetyLevel
    temperature: str
    reasoning: str
    uv_index: str
    recommendation: str
    score: float = Field(ge=0.0, le=1.0)
