"""
Advisor Models - domain types flowing through the advisory pipeline

Pydantic models for requests, observations and stream chunks, plus the tagged
events produced by the incremental text generator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from advisor_service.errors import GenerationError


class CityRequest(BaseModel):
    """Single place name supplied by the caller"""
    model_config = ConfigDict(frozen=True)

    location: str = Field(description="Free-text place name, may be ambiguous or unresolvable")


class AdvisoryRequest(BaseModel):
    """Batch of cities to advise on, in caller order"""
    model_config = ConfigDict(frozen=True)

    cities: List[CityRequest] = Field(default_factory=list)


class Coordinate(BaseModel):
    """Resolved latitude/longitude pair"""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class WeatherObservation(BaseModel):
    """Current conditions for one successfully resolved city"""
    model_config = ConfigDict(frozen=True)

    location: str
    temperature_c: float
    condition: str
    humidity_pct: int
    wind_speed_ms: float


class FailureReason(str, Enum):
    """Why a city dropped out of a streaming advisory"""
    RESOLUTION_FAILED = "resolution_failed"
    WEATHER_FAILED = "weather_failed"


class FailedCity(BaseModel):
    """City that could not contribute an observation"""
    model_config = ConfigDict(frozen=True)

    location: str
    reason: FailureReason

    def describe(self) -> str:
        if self.reason == FailureReason.WEATHER_FAILED:
            return f"{self.location} (weather failed)"
        return self.location


class AdvisoryResponse(BaseModel):
    """Unary advisory result"""
    advice: str


class AdvisoryChunk(BaseModel):
    """One element of a streamed advisory"""
    text: str = ""
    is_complete: bool = False


# Incremental generation events


@dataclass(frozen=True)
class Fragment:
    """Piece of generated text, in emission order"""
    text: str


@dataclass(frozen=True)
class End:
    """Model stream finished normally"""


@dataclass(frozen=True)
class Failure:
    """Model stream broke; no further events follow"""
    error: GenerationError


GenerationEvent = Union[Fragment, End, Failure]
