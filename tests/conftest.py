"""Shared fakes for advisor tests."""

import asyncio
from typing import Dict, List, Optional, Sequence

import pytest

from advisor_service.engines.advisor_engine import AdvisorEngine
from advisor_service.errors import ResolutionError, WeatherServiceError
from advisor_service.models import (
    AdvisoryChunk,
    Coordinate,
    End,
    Fragment,
    GenerationEvent,
    WeatherObservation,
)

PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)
TOKYO = Coordinate(latitude=35.6762, longitude=139.6503)


def observation(location: str, temperature_c: float = 22.5, condition: str = "clear sky",
                humidity_pct: int = 40, wind_speed_ms: float = 3.2) -> WeatherObservation:
    return WeatherObservation(
        location=location,
        temperature_c=temperature_c,
        condition=condition,
        humidity_pct=humidity_pct,
        wind_speed_ms=wind_speed_ms,
    )


class FakeGeocoder:
    """Resolves names from a table; unknown names fail resolution."""

    def __init__(self, table: Dict[str, Coordinate], delays: Optional[Dict[str, float]] = None):
        self.table = table
        self.delays = delays or {}
        self.calls: List[str] = []

    async def resolve(self, location: str) -> Coordinate:
        self.calls.append(location)
        await asyncio.sleep(self.delays.get(location, 0))
        if location not in self.table:
            raise ResolutionError(location, f"no results found for city: {location}")
        return self.table[location]


class FakeWeatherClient:
    """Returns canned observations; locations in `failing` raise WeatherServiceError."""

    def __init__(self, observations: Dict[str, WeatherObservation], failing: Sequence[str] = ()):
        self.observations = observations
        self.failing = set(failing)
        self.calls: List[str] = []

    async def current_weather(self, coordinate: Coordinate, location: str) -> WeatherObservation:
        self.calls.append(location)
        if location in self.failing:
            raise WeatherServiceError(location, "HTTP 503")
        return self.observations[location]


class FakeGenerator:
    """Records prompts and replays a scripted answer."""

    def __init__(self, advice: str = "Pack sunglasses.",
                 events: Optional[List[GenerationEvent]] = None,
                 once_error: Optional[Exception] = None):
        self.advice = advice
        self.events = events if events is not None else [Fragment("Sunny "), Fragment("day."), End()]
        self.once_error = once_error
        self.once_prompts: List[str] = []
        self.stream_prompts: List[str] = []

    @property
    def called(self) -> bool:
        return bool(self.once_prompts or self.stream_prompts)

    async def generate_once(self, prompt: str) -> str:
        self.once_prompts.append(prompt)
        if self.once_error is not None:
            raise self.once_error
        return self.advice

    async def generate_stream(self, prompt: str):
        self.stream_prompts.append(prompt)
        for event in self.events:
            yield event


class RecordingMetrics:
    def __init__(self):
        self.outcomes: List[str] = []
        self.durations: List[float] = []

    def record_outcome(self, status: str) -> None:
        self.outcomes.append(status)

    def observe_duration(self, seconds: float) -> None:
        self.durations.append(seconds)


class ChunkSink:
    """Collects relayed chunks; optionally fails on the n-th send."""

    def __init__(self, fail_on: Optional[int] = None):
        self.chunks: List[AdvisoryChunk] = []
        self.fail_on = fail_on

    async def __call__(self, chunk: AdvisoryChunk) -> None:
        if self.fail_on is not None and len(self.chunks) == self.fail_on:
            raise ConnectionResetError("client went away")
        self.chunks.append(chunk)


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def geocoder() -> FakeGeocoder:
    return FakeGeocoder({"Paris": PARIS, "London": LONDON, "Tokyo": TOKYO})


@pytest.fixture
def weather_client() -> FakeWeatherClient:
    return FakeWeatherClient({
        "Paris": observation("Paris"),
        "London": observation("London", 14.0, "overcast", 82, 5.55),
        "Tokyo": observation("Tokyo", 27.25, "slight rain", 90, 1.0),
    })


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def make_engine(geocoder, weather_client, generator, metrics):
    def _make(**overrides) -> AdvisorEngine:
        kwargs = dict(
            geocoder=geocoder,
            weather_client=weather_client,
            generator=generator,
            metrics=metrics,
            lookup_concurrency=4,
        )
        kwargs.update(overrides)
        return AdvisorEngine(**kwargs)

    return _make

