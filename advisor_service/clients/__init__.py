"""
Upstream clients used by the advisor engine
"""

from advisor_service.clients.geocoding_client import GeocodingClient
from advisor_service.clients.weather_client import OpenMeteoWeatherClient, WeatherClient

__all__ = ["GeocodingClient", "OpenMeteoWeatherClient", "WeatherClient"]
