"""
Geocoding HTTP client - resolves place names to coordinates.

Calls the Open-Meteo geocoding search API and keeps only the first
(highest-confidence) match. One request per lookup, no retry.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from advisor_service.config.settings import settings
from advisor_service.errors import ResolutionError
from advisor_service.models import Coordinate

logger = logging.getLogger(__name__)


class GeocodingClient:
    """HTTP client for the place-name lookup service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url or settings.GEOCODING_URL
        self._timeout = timeout if timeout is not None else settings.GEOCODING_TIMEOUT
        self._transport = transport

    async def resolve(self, location: str) -> Coordinate:
        """
        Resolve a place name to a coordinate pair.

        Args:
            location: Free-text place name (e.g. "Paris", "San Francisco").

        Returns:
            Coordinate of the first search result.

        Raises:
            ResolutionError: Blank name, unreachable service, non-200 status,
                unparseable body, or no results.
        """
        query = (location or "").strip()
        if not query:
            raise ResolutionError(location, "empty place name")

        params = {"name": query, "count": 1, "format": "json"}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            logger.warning("Geocoding connection error for %s: %s", location, e)
            raise ResolutionError(location, str(e)) from e

        if resp.status_code != 200:
            logger.warning("Geocoding request failed: status=%s body=%s", resp.status_code, resp.text[:200])
            raise ResolutionError(location, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise ResolutionError(location, f"JSON decoding failed: {e}") from e

        results = data.get("results") if isinstance(data, dict) else None
        if results is not None and not isinstance(results, list):
            raise ResolutionError(location, f"malformed results: expected a list, got {type(results).__name__}")
        if not results:
            raise ResolutionError(location, f"no results found for city: {location}")

        first = results[0]
        try:
            coordinate = Coordinate(latitude=first["latitude"], longitude=first["longitude"])
        except (KeyError, TypeError, ValidationError) as e:
            raise ResolutionError(location, f"malformed result: {e}") from e

        logger.debug("Geocoded '%s' to (%s, %s)", location, coordinate.latitude, coordinate.longitude)
        return coordinate
