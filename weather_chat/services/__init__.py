"""Services package."""
from .config_service import ConfigService
from .knowledge_service import KnowledgeService
from .classification_service import ClassificationService
from .prompt_service import PromptService
from .llm_service import LLMService
from .chat_service import ChatOrchestrationService

__all__ = [
    "ConfigService",
    "KnowledgeService",
    "ClassificationService",
    "PromptService",
    "LLMService",
    "ChatOrchestrationService",
]
