"""Tests for the Prometheus metrics collector."""

import pytest
from prometheus_client import CollectorRegistry

from advisor_service.models import AdvisoryRequest, CityRequest
from advisor_service.observability.metrics import (
    STATUS_ERROR,
    STATUS_SUCCESS,
    PrometheusMetricsCollector,
    start_metrics_server,
)

from conftest import ChunkSink


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.mark.unit
def test_outcomes_are_counted_by_status(registry):
    collector = PrometheusMetricsCollector(registry=registry)

    collector.record_outcome(STATUS_SUCCESS)
    collector.record_outcome(STATUS_SUCCESS)
    collector.record_outcome(STATUS_ERROR)

    assert registry.get_sample_value("advisor_requests_total", {"status": "success"}) == 2.0
    assert registry.get_sample_value("advisor_requests_total", {"status": "error"}) == 1.0


@pytest.mark.unit
def test_durations_are_observed(registry):
    collector = PrometheusMetricsCollector(registry=registry)

    collector.observe_duration(0.3)
    collector.observe_duration(4.0)

    assert registry.get_sample_value("advisor_request_duration_seconds_count") == 2.0
    assert registry.get_sample_value("advisor_request_duration_seconds_sum") == pytest.approx(4.3)


@pytest.mark.unit
def test_metrics_server_disabled_for_non_positive_port(registry):
    assert start_metrics_server(0, registry) is False


@pytest.mark.unit
@pytest.mark.asyncio
async def test_engine_records_through_prometheus(registry, make_engine):
    collector = PrometheusMetricsCollector(registry=registry)
    engine = make_engine(metrics=collector)

    await engine.stream_advice(AdvisoryRequest(cities=[CityRequest(location="Paris")]), ChunkSink())

    assert registry.get_sample_value("advisor_requests_total", {"status": "success"}) == 1.0
    assert registry.get_sample_value("advisor_request_duration_seconds_count") == 1.0
