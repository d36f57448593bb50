"""
Advisor Engine - turns a batch of place names into a weather advisory.

Unary path (get_advice): every city must resolve and report weather; the first
failing city, in input order, aborts the request before any generation.

Streaming path (stream_advice): failing cities are recorded and skipped. If no
city produced an observation a single terminal diagnostic chunk is sent and the
model is never called; otherwise model fragments are relayed in emission order
and followed by exactly one empty terminal chunk.

City lookups run concurrently (bounded by a semaphore) but outcomes are always
kept in input order.
"""

import asyncio
import logging
import time
from contextlib import aclosing
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, Union

from advisor_service.clients.geocoding_client import GeocodingClient
from advisor_service.clients.weather_client import WeatherClient
from advisor_service.config.settings import settings
from advisor_service.engines.advice_generator import AdviceGenerator
from advisor_service.engines.prompt_builder import build_advice_prompt, build_stream_advice_prompt
from advisor_service.errors import (
    GenerationError,
    RelayError,
    ResolutionError,
    WeatherServiceError,
)
from advisor_service.models import (
    AdvisoryChunk,
    AdvisoryRequest,
    AdvisoryResponse,
    CityRequest,
    End,
    FailedCity,
    Failure,
    FailureReason,
    Fragment,
    WeatherObservation,
)
from advisor_service.observability.metrics import STATUS_ERROR, STATUS_SUCCESS, MetricsCollector

logger = logging.getLogger(__name__)

CityOutcome = Union[WeatherObservation, ResolutionError, WeatherServiceError]
ChunkSender = Callable[[AdvisoryChunk], Awaitable[None]]


def build_diagnostic_message(failed_cities: Sequence[FailedCity]) -> str:
    """Terminal message for a stream in which no city produced weather data."""
    message = "I could not get any weather data for any of the cities"
    if failed_cities:
        message += "\nFailed to get weather data for: " + ", ".join(f.describe() for f in failed_cities)
    message += "\nPlease check the city names and try again."
    return message


def partition_outcomes(outcomes: Sequence[CityOutcome]) -> Tuple[List[WeatherObservation], List[FailedCity]]:
    """Split lookup outcomes into observations and failed cities, keeping input order."""
    observations: List[WeatherObservation] = []
    failed: List[FailedCity] = []
    for outcome in outcomes:
        if isinstance(outcome, ResolutionError):
            failed.append(FailedCity(location=outcome.location, reason=FailureReason.RESOLUTION_FAILED))
        elif isinstance(outcome, WeatherServiceError):
            failed.append(FailedCity(location=outcome.location, reason=FailureReason.WEATHER_FAILED))
        else:
            observations.append(outcome)
    return observations, failed


class AdvisorEngine:
    """Orchestrates geocoding, weather lookups and advice generation."""

    def __init__(
        self,
        geocoder: GeocodingClient,
        weather_client: WeatherClient,
        generator: AdviceGenerator,
        metrics: MetricsCollector,
        lookup_concurrency: Optional[int] = None,
    ) -> None:
        self._geocoder = geocoder
        self._weather_client = weather_client
        self._generator = generator
        self._metrics = metrics
        self._lookup_concurrency = max(1, lookup_concurrency or settings.CITY_LOOKUP_CONCURRENCY)

    # ------------------------------------------------------------------
    # City lookups
    # ------------------------------------------------------------------

    @staticmethod
    def _check_cancelled(cancellation_token: Optional[asyncio.Event]) -> None:
        if cancellation_token is not None and cancellation_token.is_set():
            raise RelayError("client disconnected")

    async def _lookup_city(
        self,
        city: CityRequest,
        semaphore: asyncio.Semaphore,
        cancellation_token: Optional[asyncio.Event],
        stop: Optional[asyncio.Event],
    ) -> Optional[CityOutcome]:
        """
        Resolve then fetch weather for one city. Per-city failures are returned, not raised.

        Returns None without calling upstream when `stop` was set by an
        earlier failure.
        """
        async with semaphore:
            if stop is not None and stop.is_set():
                return None
            self._check_cancelled(cancellation_token)
            try:
                coordinate = await self._geocoder.resolve(city.location)
            except ResolutionError as e:
                logger.warning("Resolution failed for %s: %s", city.location, e.message)
                if stop is not None:
                    stop.set()
                return e

            self._check_cancelled(cancellation_token)
            try:
                return await self._weather_client.current_weather(coordinate, city.location)
            except WeatherServiceError as e:
                logger.warning("Weather lookup failed for %s: %s", city.location, e.message)
                if stop is not None:
                    stop.set()
                return e

    async def _collect(
        self,
        cities: Sequence[CityRequest],
        fail_fast: bool = False,
        cancellation_token: Optional[asyncio.Event] = None,
    ) -> List[CityOutcome]:
        """
        Look up every city, returning outcomes by input position.

        With fail_fast the first failure in input order stops collection; lookups
        that have not started yet are skipped and the rest are cancelled.
        """
        semaphore = asyncio.Semaphore(self._lookup_concurrency)
        stop = asyncio.Event() if fail_fast else None
        tasks = [
            asyncio.create_task(self._lookup_city(city, semaphore, cancellation_token, stop))
            for city in cities
        ]
        outcomes: List[CityOutcome] = []
        try:
            for task in tasks:
                outcome = await task
                # Skipped lookups always follow the failure that set `stop`
                if outcome is None:
                    break
                outcomes.append(outcome)
                if fail_fast and not isinstance(outcome, WeatherObservation):
                    break
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            # Retrieve results of abandoned tasks so none is left unobserved
            await asyncio.gather(*tasks, return_exceptions=True)
        return outcomes

    def _record(self, status: str, started: float) -> None:
        self._metrics.record_outcome(status)
        self._metrics.observe_duration(time.perf_counter() - started)

    # ------------------------------------------------------------------
    # Unary
    # ------------------------------------------------------------------

    async def get_advice(self, request: AdvisoryRequest) -> AdvisoryResponse:
        """
        Build a complete advisory for every city in the request.

        Raises:
            ResolutionError: A city could not be geocoded.
            WeatherServiceError: Weather could not be fetched for a city.
            GenerationError: The model call failed.
        """
        started = time.perf_counter()
        status = STATUS_ERROR
        logger.info("GetAdvice request for %d cities", len(request.cities))
        try:
            outcomes = await self._collect(request.cities, fail_fast=True)
            observations: List[WeatherObservation] = []
            for outcome in outcomes:
                if not isinstance(outcome, WeatherObservation):
                    raise outcome
                observations.append(outcome)

            advice = await self._generator.generate_once(build_advice_prompt(observations))
            status = STATUS_SUCCESS
            return AdvisoryResponse(advice=advice)
        finally:
            self._record(status, started)

    # ------------------------------------------------------------------
    # Streaming
    # ------------------------------------------------------------------

    async def _relay(self, send: ChunkSender, chunk: AdvisoryChunk, index: int) -> None:
        try:
            await send(chunk)
        except Exception as e:
            raise RelayError(f"failed to send chunk {index}: {e}", chunk_index=index) from e

    async def stream_advice(
        self,
        request: AdvisoryRequest,
        send: ChunkSender,
        cancellation_token: Optional[asyncio.Event] = None,
    ) -> None:
        """
        Stream an advisory through `send`, tolerating per-city failures.

        Raises:
            GenerationError: The model stream broke or ended without completing.
            RelayError: A chunk could not be delivered or the client went away.
        """
        started = time.perf_counter()
        status = STATUS_ERROR
        logger.info("StreamAdvice request for %d cities", len(request.cities))
        try:
            outcomes = await self._collect(request.cities, cancellation_token=cancellation_token)
            observations, failed = partition_outcomes(outcomes)

            if not observations:
                logger.info("No weather data for any of %d cities, sending diagnostic", len(request.cities))
                await self._relay(send, AdvisoryChunk(text=build_diagnostic_message(failed), is_complete=True), 0)
                status = STATUS_SUCCESS
                return

            if failed:
                logger.info("Skipping %d failed cities: %s", len(failed), ", ".join(f.describe() for f in failed))

            self._check_cancelled(cancellation_token)
            prompt = build_stream_advice_prompt(observations)
            index = 0
            async with aclosing(self._generator.generate_stream(prompt)) as events:
                async for event in events:
                    if isinstance(event, Fragment):
                        self._check_cancelled(cancellation_token)
                        await self._relay(send, AdvisoryChunk(text=event.text, is_complete=False), index)
                        index += 1
                    elif isinstance(event, End):
                        await self._relay(send, AdvisoryChunk(text="", is_complete=True), index)
                        status = STATUS_SUCCESS
                        logger.info("StreamAdvice complete after %d chunks", index)
                        return
                    elif isinstance(event, Failure):
                        raise event.error

            raise GenerationError("advice stream ended without a completion marker")
        finally:
            self._record(status, started)
