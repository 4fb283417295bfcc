"""Config controller for handling configuration-related operations."""
import logging
from typing import Dict

logger = logging.getLogger(__name__)


class ConfigController:
    """Controller for configuration operations."""

    def __init__(self, config_service, knowledge_service):
        """Initialize config controller.

        Args:
            config_service: Configuration service
            knowledge_service: Static knowledge base
        """
        self.config_service = config_service
        self.knowledge_service = knowledge_service

    def get_health(self) -> Dict:
        """Get health status."""
        return {"status": "ok", "message": "Server is running"}

    def get_config(self) -> Dict:
        """Get sanitized configuration.

        Returns:
            Safe configuration dict without sensitive data
        """
        safe_config = self.config_service.get_safe_config()
        safe_config["knowledge_cities"] = self.knowledge_service.list_cities()
        return safe_config
