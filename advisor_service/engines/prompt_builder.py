"""
Prompt assembly for weather advisories.

The unary and streaming templates differ on purpose: only the unary advisory
asks for places to visit.
"""

from typing import Iterable, List

from advisor_service.models import WeatherObservation

ADVICE_TEMPLATE = (
    "Weather advisor. Based on this data provide practical advice: {weather_data} "
    "Include: summary, clothing advice, activity suggestions, places to visit if good weather, "
    "warnings. Keep it concise."
)

STREAM_ADVICE_TEMPLATE = (
    "Weather advisor. Based on this data provide practical advice: {weather_data} "
    "Include: summary, clothing advice, activity suggestions, warnings. Keep it concise."
)


def format_observation(observation: WeatherObservation) -> str:
    """One summary line per city, e.g. 'City: Paris, Temp: 22.5°C, ...'."""
    return (
        f"City: {observation.location}, "
        f"Temp: {observation.temperature_c:.1f}°C, "
        f"Condition: {observation.condition}, "
        f"Humidity: {observation.humidity_pct}%, "
        f"Wind: {observation.wind_speed_ms:.1f} m/s"
    )


def format_weather_data(observations: Iterable[WeatherObservation]) -> str:
    lines: List[str] = [format_observation(o) for o in observations]
    return "\n".join(lines)


def build_advice_prompt(observations: Iterable[WeatherObservation]) -> str:
    """Prompt for the single-shot advisory."""
    return ADVICE_TEMPLATE.format(weather_data=format_weather_data(observations))


def build_stream_advice_prompt(observations: Iterable[WeatherObservation]) -> str:
    """Prompt for the streamed advisory."""
    return STREAM_ADVICE_TEMPLATE.format(weather_data=format_weather_data(observations))
