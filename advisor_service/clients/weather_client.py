"""
Weather clients - current conditions for a resolved coordinate.

The orchestrator only depends on the WeatherClient interface; the Open-Meteo
implementation is the default handle built at process start.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from advisor_service.config.settings import settings
from advisor_service.errors import WeatherServiceError
from advisor_service.models import Coordinate, WeatherObservation

logger = logging.getLogger(__name__)


# WMO weather interpretation codes used by Open-Meteo
WMO_CONDITIONS: Dict[int, str] = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    53: "moderate drizzle",
    55: "dense drizzle",
    56: "light freezing drizzle",
    57: "dense freezing drizzle",
    61: "slight rain",
    63: "moderate rain",
    65: "heavy rain",
    66: "light freezing rain",
    67: "heavy freezing rain",
    71: "slight snow fall",
    73: "moderate snow fall",
    75: "heavy snow fall",
    77: "snow grains",
    80: "slight rain showers",
    81: "moderate rain showers",
    82: "violent rain showers",
    85: "slight snow showers",
    86: "heavy snow showers",
    95: "thunderstorm",
    96: "thunderstorm with slight hail",
    99: "thunderstorm with heavy hail",
}


def describe_weather_code(code: Optional[int]) -> str:
    """Map a WMO weather code to a short textual condition."""
    if code is None:
        return "unknown"
    return WMO_CONDITIONS.get(int(code), f"unknown (code {code})")


class WeatherClient(ABC):
    """Abstract current-weather capability."""

    @abstractmethod
    async def current_weather(self, coordinate: Coordinate, location: str) -> WeatherObservation:
        """
        Return current conditions at a coordinate.

        Raises:
            WeatherServiceError: Provider unreachable or erroring.
        """
        pass


class OpenMeteoWeatherClient(WeatherClient):
    """Current weather from the Open-Meteo forecast API."""

    CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,wind_speed_10m,weather_code"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url or settings.WEATHER_URL
        self._timeout = timeout if timeout is not None else settings.WEATHER_TIMEOUT
        self._transport = transport

    async def current_weather(self, coordinate: Coordinate, location: str) -> WeatherObservation:
        params = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "current": self.CURRENT_FIELDS,
            "wind_speed_unit": "ms",
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._base_url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Weather request failed: status=%s body=%s", e.response.status_code, e.response.text[:200])
            raise WeatherServiceError(location, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Weather connection error for %s: %s", location, e)
            raise WeatherServiceError(location, str(e)) from e
        except ValueError as e:
            raise WeatherServiceError(location, f"JSON decoding failed: {e}") from e

        return self._to_observation(data, location)

    def _to_observation(self, data: Any, location: str) -> WeatherObservation:
        current = data.get("current") if isinstance(data, dict) else None
        if not isinstance(current, dict):
            raise WeatherServiceError(location, "response has no current conditions")
        try:
            return WeatherObservation(
                location=location,
                temperature_c=current["temperature_2m"],
                condition=describe_weather_code(current.get("weather_code")),
                humidity_pct=round(current["relative_humidity_2m"]),
                wind_speed_ms=current["wind_speed_10m"],
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise WeatherServiceError(location, f"malformed current conditions: {e}") from e
