"""API router with all endpoints."""
import logging

from fastapi import APIRouter

from weather_chat.models import (
    ChatRequest,
    ChatResponse,
    CitiesResponse,
    CityWeatherRecord,
    ConfigResponse,
    ErrorResponse,
    HealthResponse,
)

logger = logging.getLogger(__name__)


def create_router(chat_controller, config_controller, knowledge_controller) -> APIRouter:
    """Create API router with all endpoints.

    Args:
        chat_controller: Chat controller instance
        config_controller: Config controller instance
        knowledge_controller: Knowledge controller instance

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api")

    @router.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return config_controller.get_health()

    @router.post(
        "/weather-chat",
        response_model=ChatResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
        tags=["Weather Chat"],
    )
    async def weather_chat(request: ChatRequest):
        """Chat with the weather assistant.

        Args:
            request: ChatRequest with the conversation; last message from the user

        Returns:
            Reply from the assistant
        """
        return await chat_controller.handle_chat(request)

    @router.get("/cities", response_model=CitiesResponse, tags=["Knowledge"])
    async def list_cities():
        """List cities covered by the reference knowledge base."""
        return knowledge_controller.list_cities()

    @router.get(
        "/cities/{query}",
        response_model=CityWeatherRecord,
        responses={404: {"model": ErrorResponse}},
        tags=["Knowledge"],
    )
    async def get_city(query: str):
        """Look up reference weather facts for a city."""
        return knowledge_controller.get_city(query)

    @router.get("/config", response_model=ConfigResponse, tags=["Config"])
    async def get_config():
        """Get current configuration (without sensitive data)."""
        return config_controller.get_config()

    return router
