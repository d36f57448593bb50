"""
Weather Advisor Service Configuration
"""

import os


class Settings:
    """Advisor service settings from environment variables"""

    # Service Configuration
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "weather-advisor")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    GRPC_PORT: int = int(os.getenv("GRPC_PORT", "50058"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    MAX_WORKERS: int = int(os.getenv("MAX_WORKERS", "4"))

    # Text generation (OpenAI-compatible endpoint; Gemini by default)
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    LLM_BASE_URL: str = os.getenv(
        "LLM_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
    )
    ADVICE_MODEL: str = os.getenv("ADVICE_MODEL", "gemini-2.5-flash")
    STREAM_ADVICE_MODEL: str = os.getenv("STREAM_ADVICE_MODEL", "gemini-2.5-pro")
    LLM_TEMPERATURE: float = float(os.getenv("LLM_TEMPERATURE", "0.7"))

    # Geocoding and weather upstreams
    GEOCODING_URL: str = os.getenv("GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search")
    GEOCODING_TIMEOUT: float = float(os.getenv("GEOCODING_TIMEOUT", "10"))
    WEATHER_URL: str = os.getenv("WEATHER_URL", "https://api.open-meteo.com/v1/forecast")
    WEATHER_TIMEOUT: float = float(os.getenv("WEATHER_TIMEOUT", "10"))

    # Per-request fan-out; 1 makes city lookups strictly sequential
    CITY_LOOKUP_CONCURRENCY: int = int(os.getenv("CITY_LOOKUP_CONCURRENCY", "4"))

    # Prometheus exporter; 0 disables it
    METRICS_PORT: int = int(os.getenv("METRICS_PORT", "9108"))

    @classmethod
    def validate(cls) -> None:
        """Validate required settings"""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY must be set")
        if cls.CITY_LOOKUP_CONCURRENCY < 1:
            raise ValueError(
                f"CITY_LOOKUP_CONCURRENCY must be >= 1, got: {cls.CITY_LOOKUP_CONCURRENCY}"
            )
        if cls.GEOCODING_TIMEOUT <= 0 or cls.WEATHER_TIMEOUT <= 0:
            raise ValueError("GEOCODING_TIMEOUT and WEATHER_TIMEOUT must be positive")


# Global settings instance
settings = Settings()
