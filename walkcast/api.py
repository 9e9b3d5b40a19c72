"""HTTP API for breed-aware walk safety."""

import hmac
from typing import Any, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, status
from pydantic import BaseModel, Field

from .best_times import calculate_best_times
from .breeds import list_profiles, profile_for
from .config import settings
from .domain import BreedId, BreedProfile, OptimalWalkTime, SafetyAssessment, WeatherReading
from .safety_engine import assess
from .weather import reading_from_openweather, to_display_strings
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="walkcast/api")


def require_api_key(x_api_key: str | None = Header(default=None)):
    """
    Validate X-API-Key header against the static api_key setting.
    """
    # If no key configured, allow requests (dev/default mode).
    if not settings.api_key:
        logger.debug("No API key configured; allowing all requests")
        return

    if not x_api_key:
        logger.debug("No API key provided")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing API key")

    if hmac.compare_digest(str(x_api_key), str(settings.api_key)):
        return

    logger.debug("Invalid API key provided")
    raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


router = APIRouter(dependencies=[Depends(require_api_key)])


class BreedEntry(BaseModel):
    """Catalog entry: identifier plus its static profile."""
    id: BreedId
    profile: BreedProfile


class AssessmentRequest(BaseModel):
    """A breed and a single weather reading."""
    breed: BreedId
    weather: WeatherReading


class OpenWeatherAssessmentRequest(BaseModel):
    """A breed and a raw OpenWeatherMap current-weather payload."""
    breed: BreedId
    payload: dict[str, Any]


class AssessmentResponse(BaseModel):
    """Safety verdict plus the breed-level message and formatted conditions."""
    breed: BreedId
    assessment: SafetyAssessment
    breed_recommendation: str
    conditions: dict[str, str] = Field(default_factory=dict)


class BestTimesRequest(BaseModel):
    """Inputs for ranking the daily walking windows."""
    breed: BreedId
    current_weather: Optional[WeatherReading] = None
    hourly_forecast: Optional[list[WeatherReading]] = None


class BestTimesResponse(BaseModel):
    """Ranked walking windows for a breed."""
    breed: BreedId
    windows: list[OptimalWalkTime]


def _assessment_response(breed_id: BreedId, reading: WeatherReading) -> AssessmentResponse:
    """Run the engine and wrap the result for the API."""
    profile = profile_for(breed_id)
    return AssessmentResponse(
        breed=breed_id,
        assessment=assess(reading, profile),
        breed_recommendation=profile.walk_recommendation(reading),
        conditions=to_display_strings(reading),
    )


@router.get("/breeds", response_model=list[BreedEntry])
def get_breeds():
    """List every breed in the catalog."""
    return [BreedEntry(id=breed_id, profile=profile) for breed_id, profile in list_profiles()]


@router.get("/breeds/{breed_id}", response_model=BreedEntry)
def get_breed(breed_id: str):
    """Return one breed profile."""
    try:
        profile = profile_for(breed_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown breed: {breed_id}")
    return BreedEntry(id=BreedId(breed_id), profile=profile)


@router.post("/assessment", response_model=AssessmentResponse)
def post_assessment(req: AssessmentRequest):
    """Assess a single reading for a breed."""
    return _assessment_response(req.breed, req.weather)


@router.post("/assessment/openweather", response_model=AssessmentResponse)
def post_openweather_assessment(req: OpenWeatherAssessmentRequest):
    """Assess a raw OpenWeatherMap payload for a breed."""
    try:
        reading = reading_from_openweather(req.payload)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError subclass, so range errors land here too
        logger.warning("Rejected weather payload: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return _assessment_response(req.breed, reading)


@router.post("/best-times", response_model=BestTimesResponse)
def post_best_times(req: BestTimesRequest):
    """Rank the daily walking windows for a breed."""
    windows = calculate_best_times(
        req.breed,
        current_weather=req.current_weather,
        hourly_forecast=req.hourly_forecast,
        settings=settings,
    )
    return BestTimesResponse(breed=req.breed, windows=windows)
