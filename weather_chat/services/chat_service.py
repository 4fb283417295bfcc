"""Chat orchestration: validation, classification, generation and error mapping."""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel

from weather_chat.errors import (
    INVALID_MESSAGES_ERROR,
    LAST_MESSAGE_NOT_USER_ERROR,
    EmptyCompletionError,
    InvalidRequestError,
    translate_error,
)

logger = logging.getLogger(__name__)

OFF_TOPIC_REPLY = (
    "I'm a weather-specific assistant. I can only help with weather-related questions "
    "about cities and regions worldwide. Please ask me about weather, climate, seasons, "
    "or specific cities anywhere in the world."
)


def _as_message_dict(message: Any) -> Dict:
    if isinstance(message, BaseModel):
        return message.model_dump()
    if isinstance(message, dict):
        return message
    raise InvalidRequestError(INVALID_MESSAGES_ERROR)


class ChatOrchestrationService:
    """Turns a conversation into a single weather assistant reply."""

    def __init__(
        self,
        knowledge_service,
        classification_service,
        prompt_service,
        llm_service,
        config_service,
        clock: Callable[[], datetime] = datetime.now
    ):
        """Initialize chat orchestration service.

        Args:
            knowledge_service: Static knowledge base
            classification_service: Keyword classifier
            prompt_service: System prompt builder
            llm_service: LLM API service
            config_service: Configuration service
            clock: Source of the current time for the date context
        """
        self.knowledge_service = knowledge_service
        self.classification_service = classification_service
        self.prompt_service = prompt_service
        self.llm_service = llm_service
        self.config_service = config_service
        self.clock = clock

    def validate_messages(self, messages: Any) -> List[Dict]:
        """Check the conversation shape.

        Args:
            messages: Caller-supplied conversation

        Returns:
            Messages as plain dicts

        Raises:
            InvalidRequestError: If messages is missing, not a list, empty,
                or the last message is not from the user
        """
        if not isinstance(messages, list):
            raise InvalidRequestError(INVALID_MESSAGES_ERROR)

        conversation = [_as_message_dict(message) for message in messages]
        if not conversation or conversation[-1].get("role") != "user":
            raise InvalidRequestError(LAST_MESSAGE_NOT_USER_ERROR)

        return conversation

    async def process_chat(self, messages: Any) -> str:
        """Process a chat request and return the reply text.

        Args:
            messages: Conversation, oldest first

        Returns:
            Reply text, either generated or a fixed informational reply

        Raises:
            InvalidRequestError: If the conversation shape is invalid
            EmptyCompletionError: If the model returned no text
        """
        conversation = self.validate_messages(messages)
        user_query = str(conversation[-1].get("content") or "")

        classification = self.classification_service.classify(user_query)
        if classification.is_off_topic:
            logger.info("Off-topic message, replying without calling the model")
            return OFF_TOPIC_REPLY

        try:
            reply = await self._generate(conversation)
        except Exception as e:
            logger.error(f"Error in weather-chat: {e}", exc_info=True)
            return translate_error(e)

        if not reply:
            logger.warning("Model returned an empty completion")
            raise EmptyCompletionError()

        return reply

    async def _generate(self, conversation: List[Dict]) -> Optional[str]:
        model_config = self.config_service.get_model_config()

        system_prompt = self.prompt_service.build_system_prompt(
            self.clock(), self.knowledge_service.render_all()
        )
        chat_messages = [{"role": "system", "content": system_prompt}]
        chat_messages.extend(
            {"role": message.get("role"), "content": message.get("content")}
            for message in conversation
        )

        logger.info(
            f"Generating reply: model={model_config['model_id']}, history={len(conversation)}"
        )
        return await self.llm_service.generate_completion(chat_messages, model_config)
