"""LLM service for managing API communication with language models."""
import logging
import os
from typing import Dict, List, Optional

from openai import AsyncOpenAI

from weather_chat.errors import CredentialMalformedError, CredentialMissingError
from weather_chat.utils.colored_logger import get_plugin_logger

logger = logging.getLogger(__name__)
plugin_logger = get_plugin_logger(__name__, 'llm')

PLACEHOLDER_API_KEY = "your_openai_api_key_here"
API_KEY_PREFIX = "sk-"


class LLMService:
    """Service for managing LLM API calls."""

    def __init__(self, development: bool = False):
        """Initialize LLM service.

        Args:
            development: Log credential diagnostics (never the key itself)
        """
        self.development = development
        self._clients: Dict[str, AsyncOpenAI] = {}

    def get_client(self, api_key_env: str = "OPENAI_API_KEY") -> AsyncOpenAI:
        """Get or create OpenAI client for a specific API key.

        The credential is checked before any network call is made.

        Args:
            api_key_env: Environment variable name for API key

        Returns:
            AsyncOpenAI client

        Raises:
            CredentialMissingError: If the key is unset or still the placeholder
            CredentialMalformedError: If the key lacks the "sk-" prefix
        """
        api_key = (os.getenv(api_key_env) or "").strip()

        if self.development:
            logger.info(
                "API key check: exists=%s, length=%d, startsWith=%s",
                bool(api_key), len(api_key), api_key[:5] or "none"
            )

        if not api_key or api_key == PLACEHOLDER_API_KEY:
            raise CredentialMissingError(f"{api_key_env} not set in environment variables")

        if not api_key.startswith(API_KEY_PREFIX):
            raise CredentialMalformedError(f"{api_key_env} does not look like an OpenAI API key")

        if api_key_env not in self._clients:
            # Failures are reported to the caller, never retried
            self._clients[api_key_env] = AsyncOpenAI(api_key=api_key, max_retries=0)
            logger.info(f"Created OpenAI client using {api_key_env}")

        return self._clients[api_key_env]

    async def generate_completion(
        self,
        messages: List[Dict],
        model_config: Dict,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> Optional[str]:
        """Generate completion from LLM.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model_config: Model configuration from config.yml
            temperature: Optional temperature override
            max_tokens: Optional max tokens override

        Returns:
            Text of the first choice, or None when the provider returned none

        Raises:
            CredentialError: If the API key is unusable
            openai.APIError: If the API call fails
        """
        client = self.get_client(model_config.get('api_key_env', 'OPENAI_API_KEY'))

        api_params = {
            "model": model_config['model_id'],
            "messages": messages,
            "temperature": temperature if temperature is not None else model_config.get('temperature', 0.7),
            "max_completion_tokens": max_tokens or model_config.get('max_tokens', 500),
        }

        logger.debug(f"Calling LLM with model {model_config['model_id']}")

        try:
            response = await client.chat.completions.create(**api_params)
        except Exception as e:
            logger.error(f"LLM API error: {e}", exc_info=True)
            raise

        content = response.choices[0].message.content if response.choices else None

        preview = (content or "")[:150]
        if content and len(content) > 150:
            preview += "..."
        plugin_logger.info(f"🤖 LLM Response ({model_config['model_id']}): {len(content or '')} chars")
        plugin_logger.info(f"   {preview}")

        return content
