"""
Advisor error taxonomy.

Per-city failures carry the location they belong to so the unary path can name
the offending city and the streaming path can build its diagnostic message.
"""

from typing import Optional


class AdvisorError(Exception):
    """Base class for every failure raised by the advisor core."""


class ResolutionError(AdvisorError):
    """Place name could not be turned into coordinates."""

    def __init__(self, location: str, message: str = ""):
        self.location = location
        self.message = message
        super().__init__(f"geocoding failed for {location}: {message}")


class WeatherServiceError(AdvisorError):
    """Weather provider was unreachable or returned an error."""

    def __init__(self, location: str, message: str = ""):
        self.location = location
        self.message = message
        super().__init__(f"weather request failed for {location}: {message}")


class GenerationError(AdvisorError):
    """Text generation call failed or produced no content."""


class RelayError(AdvisorError):
    """A stream chunk could not be delivered to the caller."""

    def __init__(self, message: str, chunk_index: Optional[int] = None):
        self.chunk_index = chunk_index
        super().__init__(message)
