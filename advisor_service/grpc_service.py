"""
Weather Advisor gRPC Service Implementation
Maps AdvisorService RPCs onto the advisor engine and engine errors onto gRPC status codes
"""

import asyncio
import logging

import grpc

from advisor_service.config.settings import settings
from advisor_service.engines.advisor_engine import AdvisorEngine
from advisor_service.errors import (
    AdvisorError,
    GenerationError,
    RelayError,
    ResolutionError,
    WeatherServiceError,
)
from advisor_service.models import AdvisoryChunk, AdvisoryRequest, CityRequest
from advisor_service.protos.advisor_pb2 import (
    AdvisorRequest,
    AdvisorResponse,
    HealthCheckRequest,
    HealthCheckResponse,
    StreamAdviceResponse,
)
from advisor_service.protos.advisor_pb2_grpc import AdvisorServiceServicer

logger = logging.getLogger(__name__)


def _to_advisory_request(request: AdvisorRequest) -> AdvisoryRequest:
    return AdvisoryRequest(cities=[CityRequest(location=c.location) for c in request.cities])


def status_code_for(error: AdvisorError) -> grpc.StatusCode:
    """gRPC status reported to callers for an engine failure."""
    if isinstance(error, ResolutionError):
        return grpc.StatusCode.NOT_FOUND
    if isinstance(error, WeatherServiceError):
        return grpc.StatusCode.UNAVAILABLE
    if isinstance(error, RelayError):
        return grpc.StatusCode.CANCELLED
    return grpc.StatusCode.INTERNAL


class AdvisorServiceImplementation(AdvisorServiceServicer):
    """AdvisorService gRPC implementation backed by AdvisorEngine."""

    def __init__(self, engine: AdvisorEngine):
        self._engine = engine
        self._initialized = False

    async def initialize(self):
        self._initialized = True
        logger.info("Advisor Service initialized")

    async def GetAdvice(
        self,
        request: AdvisorRequest,
        context: grpc.aio.ServicerContext
    ) -> AdvisorResponse:
        """Unary advisory; fails the whole call on the first collaborator error"""
        try:
            response = await self._engine.get_advice(_to_advisory_request(request))
            return AdvisorResponse(advice=response.advice)
        except AdvisorError as e:
            logger.error("GetAdvice failed: %s", e)
            await context.abort(status_code_for(e), str(e))

    async def StreamAdvice(
        self,
        request: AdvisorRequest,
        context: grpc.aio.ServicerContext
    ) -> None:
        """
        Stream advisory chunks back to the client

        Detects client disconnect and stops the engine from issuing further
        lookups or generation calls.
        """
        cancellation_token = asyncio.Event()

        async def monitor_cancellation():
            """Monitor gRPC context for client disconnect"""
            while not context.cancelled():
                await asyncio.sleep(0.1)
            if not cancellation_token.is_set():
                logger.info("Client disconnected - signalling cancellation")
                cancellation_token.set()

        async def send(chunk: AdvisoryChunk) -> None:
            await context.write(StreamAdviceResponse(chunk=chunk.text, is_complete=chunk.is_complete))

        monitor_task = asyncio.create_task(monitor_cancellation())
        try:
            await self._engine.stream_advice(_to_advisory_request(request), send, cancellation_token)
        except RelayError as e:
            logger.warning("StreamAdvice relay failed: %s", e)
            if not context.cancelled():
                await context.abort(status_code_for(e), str(e))
        except GenerationError as e:
            logger.error("StreamAdvice generation failed: %s", e)
            await context.abort(status_code_for(e), f"advice generation failed: {e}")
        finally:
            monitor_task.cancel()
            try:
                await monitor_task
            except asyncio.CancelledError:
                pass

    async def HealthCheck(
        self,
        request: HealthCheckRequest,
        context: grpc.aio.ServicerContext
    ) -> HealthCheckResponse:
        """Health check endpoint"""
        return HealthCheckResponse(
            status="healthy" if self._initialized else "starting",
            service_name=settings.SERVICE_NAME,
            version=settings.SERVICE_VERSION,
        )
