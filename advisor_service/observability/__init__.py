from advisor_service.observability.metrics import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    MetricsCollector,
    PrometheusMetricsCollector,
    start_metrics_server,
)

__all__ = [
    "STATUS_ERROR",
    "STATUS_SUCCESS",
    "MetricsCollector",
    "PrometheusMetricsCollector",
    "start_metrics_server",
]
