"""
Prometheus metrics for the advisor service.

The collector is created once per process and handed to the engine; the
engine only records outcomes and durations through it.
"""

import logging
from typing import Optional, Protocol

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"

# Advisories include several upstream round trips plus generation
LATENCY_BUCKETS = [0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 20.0, 30.0, 60.0]


class MetricsCollector(Protocol):
    """Outcome and latency sink used by the advisor engine."""

    def record_outcome(self, status: str) -> None:
        ...

    def observe_duration(self, seconds: float) -> None:
        ...


class PrometheusMetricsCollector:
    """Request counter and duration histogram backed by prometheus_client."""

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry if registry is not None else REGISTRY
        self.requests_total = Counter(
            "advisor_requests_total",
            "Total advisor requests",
            ["status"],
            registry=self.registry,
        )
        self.request_duration_seconds = Histogram(
            "advisor_request_duration_seconds",
            "Advisor request duration",
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )

    def record_outcome(self, status: str) -> None:
        self.requests_total.labels(status=status).inc()

    def observe_duration(self, seconds: float) -> None:
        self.request_duration_seconds.observe(seconds)


def start_metrics_server(port: int, registry: Optional[CollectorRegistry] = None) -> bool:
    """Expose metrics over HTTP. Returns False when disabled (port <= 0)."""
    if port <= 0:
        logger.info("Metrics exporter disabled")
        return False
    start_http_server(port, registry=registry if registry is not None else REGISTRY)
    logger.info("Metrics exporter listening on port %s", port)
    return True
