"""Chat controller for handling chat-related operations."""
import logging

from fastapi.responses import JSONResponse

from weather_chat.errors import WeatherChatError
from weather_chat.models import ChatRequest

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat operations."""

    def __init__(self, chat_orchestration_service):
        """Initialize chat controller.

        Args:
            chat_orchestration_service: Chat orchestration service
        """
        self.chat_orchestration_service = chat_orchestration_service

    async def handle_chat(self, request: ChatRequest) -> JSONResponse:
        """Handle weather chat request.

        Args:
            request: ChatRequest with the conversation

        Returns:
            200 {"reply": ...} or an {"error": ...} body with the error's status
        """
        message_count = len(request.messages) if request.messages is not None else 0
        logger.info(f"Processing weather chat with {message_count} messages")

        try:
            reply = await self.chat_orchestration_service.process_chat(request.messages)
        except WeatherChatError as e:
            logger.warning(f"Weather chat rejected ({e.status_code}): {e}")
            return JSONResponse(status_code=e.status_code, content={"error": str(e)})

        return JSONResponse(content={"reply": reply})
