"""Tests for the geocoding HTTP client."""

import httpx
import pytest

from advisor_service.clients.geocoding_client import GeocodingClient
from advisor_service.errors import ResolutionError

GEOCODING_URL = "https://geocoding.test/v1/search"


def make_client(handler) -> GeocodingClient:
    return GeocodingClient(base_url=GEOCODING_URL, timeout=10, transport=httpx.MockTransport(handler))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_returns_first_result():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": [
            {"name": "Paris", "latitude": 48.8566, "longitude": 2.3522, "country": "France"},
            {"name": "Paris", "latitude": 33.6609, "longitude": -95.5555, "country": "United States"},
        ]})

    coordinate = await make_client(handler).resolve("Paris")

    assert coordinate.latitude == 48.8566
    assert coordinate.longitude == 2.3522
    assert len(seen) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_resolve_escapes_place_name():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": [{"latitude": -23.55, "longitude": -46.63}]})

    await make_client(handler).resolve("  São Paulo & Co ")

    request = seen[0]
    assert request.url.params["name"] == "São Paulo & Co"
    assert "&Co" not in str(request.url)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_empty_results_fail_resolution():
    client = make_client(lambda request: httpx.Response(200, json={"results": []}))

    with pytest.raises(ResolutionError) as exc_info:
        await client.resolve("Atlantis")

    assert exc_info.value.location == "Atlantis"
    assert "no results found" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_missing_results_key_fails_resolution():
    client = make_client(lambda request: httpx.Response(200, json={"generationtime_ms": 0.4}))

    with pytest.raises(ResolutionError):
        await client.resolve("Nowhere")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_non_200_fails_resolution():
    client = make_client(lambda request: httpx.Response(503, text="upstream down"))

    with pytest.raises(ResolutionError) as exc_info:
        await client.resolve("Paris")

    assert "HTTP 503" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unparseable_body_fails_resolution():
    client = make_client(lambda request: httpx.Response(200, text="<html>not json</html>"))

    with pytest.raises(ResolutionError) as exc_info:
        await client.resolve("Paris")

    assert "JSON decoding failed" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_out_of_range_coordinate_fails_resolution():
    client = make_client(lambda request: httpx.Response(200, json={"results": [{"latitude": 123.0, "longitude": 0.0}]}))

    with pytest.raises(ResolutionError):
        await client.resolve("Paris")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unreachable_service_fails_resolution():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ResolutionError) as exc_info:
        await make_client(handler).resolve("Paris")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
async def test_blank_name_is_rejected_without_a_request(name):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"results": [{"latitude": 0.0, "longitude": 0.0}]})

    with pytest.raises(ResolutionError) as exc_info:
        await make_client(handler).resolve(name)

    assert "empty place name" in str(exc_info.value)
    assert seen == []


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("results", [{"name": "x"}, "Paris", 42])
async def test_non_list_results_fail_resolution(results):
    client = make_client(lambda request: httpx.Response(200, json={"results": results}))

    with pytest.raises(ResolutionError) as exc_info:
        await client.resolve("Paris")

    assert exc_info.value.location == "Paris"
    assert "malformed results" in str(exc_info.value)
