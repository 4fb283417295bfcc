"""Pydantic models and schemas for the application."""
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Single message of a conversation."""
    role: Literal["user", "assistant", "system"] = Field(..., description="Message author role")
    content: str = Field(..., description="Message content")


class ChatRequest(BaseModel):
    """Weather chat request model."""
    messages: Optional[List[ChatMessage]] = Field(
        None, description="Conversation so far, oldest first; the last entry must be from the user"
    )


class ChatResponse(BaseModel):
    """Weather chat reply."""
    reply: str


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx responses."""
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    message: str


class CitiesResponse(BaseModel):
    """Cities available in the knowledge base."""
    cities: List[str] = Field(default_factory=list)


class CityWeatherRecord(BaseModel):
    """Static weather facts for one city or region."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Lowercase lookup key")
    city: str = Field(..., description="Display name")
    climate: str
    summer: str
    monsoon: str
    winter: str
    spring: str
    notable_features: Tuple[str, ...] = ()
    safety_tips: Tuple[str, ...] = ()


class ClassificationResult(BaseModel):
    """Keyword classification of the latest user message."""
    model_config = ConfigDict(frozen=True)

    is_greeting: bool = Field(..., description="Message contains a greeting keyword")
    is_non_weather: bool = Field(..., description="Message contains an off-topic keyword")

    @property
    def is_off_topic(self) -> bool:
        """Greetings win over an off-topic keyword collision."""
        return self.is_non_weather and not self.is_greeting


class ConfigResponse(BaseModel):
    """Configuration response (sanitized)."""
    default_model: str
    models: Dict
    knowledge_cities: List[str]
