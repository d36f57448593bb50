"""
Weather Advisor Service - Main Entry Point
"""

import asyncio
import logging
import signal

import grpc
from concurrent import futures

from advisor_service.config.settings import settings

# Setup logging before service imports
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from advisor_service.clients import GeocodingClient, OpenMeteoWeatherClient
from advisor_service.engines.advice_generator import AdviceGenerator
from advisor_service.engines.advisor_engine import AdvisorEngine
from advisor_service.grpc_service import AdvisorServiceImplementation
from advisor_service.observability.metrics import PrometheusMetricsCollector, start_metrics_server
from advisor_service.protos.advisor_pb2_grpc import add_AdvisorServiceServicer_to_server


class GracefulShutdown:
    """Handle graceful shutdown"""

    def __init__(self, server):
        self.server = server
        self.shutdown_event = asyncio.Event()

    def signal_handler(self, signum, frame):
        """Handle shutdown signal"""
        logger.info("Received signal %s, initiating graceful shutdown...", signum)
        asyncio.create_task(self.shutdown())

    async def shutdown(self):
        """Shutdown server gracefully"""
        logger.info("Stopping server...")
        await self.server.stop(grace=5)
        logger.info("Server shutdown complete")
        self.shutdown_event.set()


def build_engine(metrics: PrometheusMetricsCollector) -> AdvisorEngine:
    """Wire the engine with the process-level collaborators."""
    return AdvisorEngine(
        geocoder=GeocodingClient(),
        weather_client=OpenMeteoWeatherClient(),
        generator=AdviceGenerator(api_key=settings.GEMINI_API_KEY),
        metrics=metrics,
        lookup_concurrency=settings.CITY_LOOKUP_CONCURRENCY,
    )


async def serve():
    """Start the gRPC server"""
    try:
        settings.validate()
        logger.info("Starting %s on port %s", settings.SERVICE_NAME, settings.GRPC_PORT)

        metrics = PrometheusMetricsCollector()
        start_metrics_server(settings.METRICS_PORT, metrics.registry)

        service_impl = AdvisorServiceImplementation(engine=build_engine(metrics))
        await service_impl.initialize()

        server = grpc.aio.server(futures.ThreadPoolExecutor(max_workers=settings.MAX_WORKERS))
        add_AdvisorServiceServicer_to_server(service_impl, server)
        server.add_insecure_port(f"[::]:{settings.GRPC_PORT}")

        shutdown_handler = GracefulShutdown(server)
        signal.signal(signal.SIGINT, shutdown_handler.signal_handler)
        signal.signal(signal.SIGTERM, shutdown_handler.signal_handler)

        await server.start()
        logger.info("Weather Advisor Service ready on port %s", settings.GRPC_PORT)
        logger.info("Models: advice=%s stream=%s", settings.ADVICE_MODEL, settings.STREAM_ADVICE_MODEL)

        await shutdown_handler.shutdown_event.wait()
    except Exception as e:
        logger.exception("Failed to start server: %s", e)
        raise


def main():
    """Main entry point"""
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.error("Fatal error: %s", e)
        raise


if __name__ == "__main__":
    main()
