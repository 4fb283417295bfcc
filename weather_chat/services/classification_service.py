"""Keyword classification of user messages."""
import logging
from typing import FrozenSet

from weather_chat.models import ClassificationResult
from weather_chat.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'classification')


GREETING_KEYWORDS: FrozenSet[str] = frozenset({
    "hi", "hello", "hey", "good morning", "good afternoon", "good evening",
    "how are you", "how r u", "what's up", "whats up", "sup", "greetings",
    "thanks", "thank you", "bye", "goodbye", "see you", "nice to meet you",
})

OFF_TOPIC_KEYWORDS: FrozenSet[str] = frozenset({
    "math", "calculate", "equation", "solve", "joke", "funny", "story", "recipe",
    "cooking", "sports", "football", "soccer", "basketball", "game",
    "movie", "music", "song", "book", "news", "politics", "election", "vote",
    "shopping", "buy", "price", "cost", "translate", "language", "meaning",
    "definition", "what is", "who is", "when did", "history", "war", "battle",
})


def contains_any(text: str, keywords: FrozenSet[str]) -> bool:
    """Plain substring test, no word boundaries."""
    return any(keyword in text for keyword in keywords)


class ClassificationService:
    """Service deciding whether a message bypasses the model."""

    def __init__(
        self,
        greeting_keywords: FrozenSet[str] = GREETING_KEYWORDS,
        off_topic_keywords: FrozenSet[str] = OFF_TOPIC_KEYWORDS
    ):
        """Initialize classification service.

        Args:
            greeting_keywords: Lowercase greeting substrings
            off_topic_keywords: Lowercase substrings of clearly non-weather topics
        """
        self.greeting_keywords = frozenset(greeting_keywords)
        self.off_topic_keywords = frozenset(off_topic_keywords)

    def classify(self, message: str) -> ClassificationResult:
        """Classify the latest user message.

        Args:
            message: Raw message content

        Returns:
            ClassificationResult with greeting and off-topic flags
        """
        normalized = message.strip().lower()

        result = ClassificationResult(
            is_greeting=contains_any(normalized, self.greeting_keywords),
            is_non_weather=contains_any(normalized, self.off_topic_keywords),
        )

        plugin_logger.info(
            f"🏷️  Classification: greeting={result.is_greeting}, "
            f"non_weather={result.is_non_weather}, off_topic={result.is_off_topic}"
        )
        return result
