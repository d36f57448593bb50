"""
Advisor domain models
"""

from advisor_service.models.advisor_models import (
    AdvisoryChunk,
    AdvisoryRequest,
    AdvisoryResponse,
    CityRequest,
    Coordinate,
    End,
    FailedCity,
    Failure,
    FailureReason,
    Fragment,
    GenerationEvent,
    WeatherObservation,
)

__all__ = [
    "AdvisoryChunk",
    "AdvisoryRequest",
    "AdvisoryResponse",
    "CityRequest",
    "Coordinate",
    "End",
    "FailedCity",
    "Failure",
    "FailureReason",
    "Fragment",
    "GenerationEvent",
    "WeatherObservation",
]
