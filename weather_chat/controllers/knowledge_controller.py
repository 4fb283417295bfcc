"""Knowledge controller exposing the static city weather table."""
import logging
from typing import Dict

from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class KnowledgeController:
    """Controller for knowledge base lookups."""

    def __init__(self, knowledge_service):
        """Initialize knowledge controller.

        Args:
            knowledge_service: Static knowledge base
        """
        self.knowledge_service = knowledge_service

    def list_cities(self) -> Dict:
        """List cities in knowledge base order."""
        return {"cities": self.knowledge_service.list_cities()}

    def get_city(self, query: str) -> JSONResponse:
        """Look up one city.

        Args:
            query: City name or fragment

        Returns:
            Record as JSON, or 404 with an error body
        """
        record = self.knowledge_service.lookup(query)
        if record is None:
            logger.info(f"No knowledge base entry for '{query}'")
            return JSONResponse(
                status_code=404,
                content={"error": f"No weather data found for '{query}'."}
            )

        return JSONResponse(content=record.model_dump(mode="json"))
