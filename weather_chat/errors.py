"""Exceptions and provider error translation for the weather chat service."""
import logging
from enum import Enum

import openai

logger = logging.getLogger(__name__)


INVALID_MESSAGES_ERROR = "Invalid request. 'messages' array is required."
LAST_MESSAGE_NOT_USER_ERROR = "Last message must be from user."
EMPTY_COMPLETION_ERROR = "No response from AI model."

CREDENTIAL_MISSING_REPLY = (
    "⚠️ OpenAI API key is not configured. Please add your OPENAI_API_KEY "
    "to the .env file and restart the server."
)
CREDENTIAL_MALFORMED_REPLY = (
    "⚠️ Invalid OpenAI API key format. Please check your OPENAI_API_KEY in .env file."
)
PROVIDER_AUTH_REPLY = (
    "⚠️ Invalid or expired OpenAI API key. Please verify your API key is correct "
    "and has sufficient credits. Update it in .env and restart the server."
)
PROVIDER_RATE_LIMIT_REPLY = "⚠️ Rate limit exceeded. Please wait a moment and try again."
PROVIDER_TRANSPORT_REPLY = (
    "⚠️ Unable to connect to OpenAI API. Please check your API key and "
    "internet connection, then try again."
)
UNKNOWN_ERROR_REPLY = (
    "⚠️ Sorry, I encountered an error processing your request. "
    "Please try again in a moment."
)


class WeatherChatError(Exception):
    """Base class for errors raised by the weather chat service."""

    status_code = 500


class InvalidRequestError(WeatherChatError):
    """Request payload has the wrong shape."""

    status_code = 400


class CredentialError(WeatherChatError):
    """Provider credential cannot be used."""


class CredentialMissingError(CredentialError):
    """No credential configured, or it is still the placeholder value."""


class CredentialMalformedError(CredentialError):
    """Credential does not follow the provider's key prefix convention."""


class EmptyCompletionError(WeatherChatError):
    """Provider call succeeded but produced no usable text."""

    def __init__(self, message: str = EMPTY_COMPLETION_ERROR):
        super().__init__(message)


class ProviderErrorKind(str, Enum):
    """Categories of failed provider calls."""
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"


def categorize_provider_error(exc: BaseException) -> ProviderErrorKind:
    """Categorize a provider/transport failure.

    Structured ``openai`` exception types and HTTP status codes are checked
    first; message matching is only used for errors that carry neither.

    Args:
        exc: Exception raised while talking to the provider

    Returns:
        ProviderErrorKind for the failure
    """
    if isinstance(exc, openai.AuthenticationError):
        return ProviderErrorKind.AUTH
    if isinstance(exc, openai.RateLimitError):
        return ProviderErrorKind.RATE_LIMIT

    status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None)
    if status_code == 401:
        return ProviderErrorKind.AUTH
    if status_code == 429:
        return ProviderErrorKind.RATE_LIMIT
    if isinstance(exc, openai.APIError) or status_code:
        return ProviderErrorKind.TRANSPORT

    message = str(exc)
    if "401" in message or "Incorrect API key" in message:
        return ProviderErrorKind.AUTH
    if "429" in message:
        return ProviderErrorKind.RATE_LIMIT
    if "OpenAI" in message:
        return ProviderErrorKind.TRANSPORT
    return ProviderErrorKind.UNKNOWN


_PROVIDER_REPLIES = {
    ProviderErrorKind.AUTH: PROVIDER_AUTH_REPLY,
    ProviderErrorKind.RATE_LIMIT: PROVIDER_RATE_LIMIT_REPLY,
    ProviderErrorKind.TRANSPORT: PROVIDER_TRANSPORT_REPLY,
    ProviderErrorKind.UNKNOWN: UNKNOWN_ERROR_REPLY,
}


def translate_error(exc: BaseException) -> str:
    """Map any failure from the generation path to a user-facing reply.

    Args:
        exc: Exception caught at the chat orchestrator boundary

    Returns:
        Fixed reply string for the failure category
    """
    if isinstance(exc, CredentialMissingError):
        return CREDENTIAL_MISSING_REPLY
    if isinstance(exc, CredentialMalformedError):
        return CREDENTIAL_MALFORMED_REPLY

    kind = categorize_provider_error(exc)
    logger.debug(f"Provider error categorized as {kind.value}: {type(exc).__name__}")
    return _PROVIDER_REPLIES[kind]
