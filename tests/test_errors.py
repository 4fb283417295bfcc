"""Tests for provider error translation."""
import httpx
import openai
import pytest

from tests.conftest import OPENAI_URL, make_status_error
from weather_chat.errors import (
    CREDENTIAL_MALFORMED_REPLY,
    CREDENTIAL_MISSING_REPLY,
    PROVIDER_AUTH_REPLY,
    PROVIDER_RATE_LIMIT_REPLY,
    PROVIDER_TRANSPORT_REPLY,
    UNKNOWN_ERROR_REPLY,
    CredentialMalformedError,
    CredentialMissingError,
    ProviderErrorKind,
    categorize_provider_error,
    translate_error,
)


def test_structured_errors_are_categorized() -> None:
    """Test openai exception types map to their categories."""
    assert categorize_provider_error(
        make_status_error(openai.AuthenticationError, 401)
    ) == ProviderErrorKind.AUTH
    assert categorize_provider_error(
        make_status_error(openai.RateLimitError, 429)
    ) == ProviderErrorKind.RATE_LIMIT
    assert categorize_provider_error(
        make_status_error(openai.InternalServerError, 500)
    ) == ProviderErrorKind.TRANSPORT
    assert categorize_provider_error(
        openai.APIConnectionError(request=httpx.Request("POST", OPENAI_URL))
    ) == ProviderErrorKind.TRANSPORT


def test_status_code_without_specific_type() -> None:
    """Test generic status errors are categorized by status code."""
    assert categorize_provider_error(
        make_status_error(openai.APIStatusError, 401)
    ) == ProviderErrorKind.AUTH
    assert categorize_provider_error(
        make_status_error(openai.APIStatusError, 429)
    ) == ProviderErrorKind.RATE_LIMIT


def test_message_matching_fallback() -> None:
    """Test string matching for errors without type or status."""
    assert categorize_provider_error(Exception("Incorrect API key provided")) == ProviderErrorKind.AUTH
    assert categorize_provider_error(Exception("HTTP 429 from upstream")) == ProviderErrorKind.RATE_LIMIT
    assert categorize_provider_error(Exception("OpenAI is unreachable")) == ProviderErrorKind.TRANSPORT
    assert categorize_provider_error(ValueError("boom")) == ProviderErrorKind.UNKNOWN


@pytest.mark.parametrize(
    "exc,reply",
    [
        (CredentialMissingError("missing"), CREDENTIAL_MISSING_REPLY),
        (CredentialMalformedError("bad prefix"), CREDENTIAL_MALFORMED_REPLY),
        (make_status_error(openai.AuthenticationError, 401), PROVIDER_AUTH_REPLY),
        (make_status_error(openai.RateLimitError, 429), PROVIDER_RATE_LIMIT_REPLY),
        (make_status_error(openai.InternalServerError, 503), PROVIDER_TRANSPORT_REPLY),
        (RuntimeError("unexpected"), UNKNOWN_ERROR_REPLY),
    ],
)
def test_translate_error(exc: Exception, reply: str) -> None:
    """Test every failure category has its own reply."""
    assert translate_error(exc) == reply


def test_replies_are_distinct() -> None:
    """Test that users can tell failure categories apart."""
    replies = {
        CREDENTIAL_MISSING_REPLY,
        CREDENTIAL_MALFORMED_REPLY,
        PROVIDER_AUTH_REPLY,
        PROVIDER_RATE_LIMIT_REPLY,
        PROVIDER_TRANSPORT_REPLY,
        UNKNOWN_ERROR_REPLY,
    }
    assert len(replies) == 6
    assert "API key is not configured" in CREDENTIAL_MISSING_REPLY
