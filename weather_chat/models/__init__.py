"""Models package."""
from .schemas import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    CitiesResponse,
    CityWeatherRecord,
    ClassificationResult,
    ConfigResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "CitiesResponse",
    "CityWeatherRecord",
    "ClassificationResult",
    "ConfigResponse",
    "ErrorResponse",
    "HealthResponse",
]
