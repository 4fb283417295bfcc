"""Controllers package."""
from .chat_controller import ChatController
from .config_controller import ConfigController
from .knowledge_controller import KnowledgeController

__all__ = [
    "ChatController",
    "ConfigController",
    "KnowledgeController",
]
