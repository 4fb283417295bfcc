"""Tests for the LLM service and its credential checks."""
import logging

import pytest
from openai import AsyncOpenAI

from tests.conftest import make_completion, make_mock_client
from weather_chat.errors import CredentialMalformedError, CredentialMissingError
from weather_chat.services import LLMService

VALID_KEY = "sk-test-0123456789abcdef"
MODEL_CONFIG = {
    "provider": "openai",
    "model_id": "gpt-4o-mini",
    "api_key_env": "OPENAI_API_KEY",
    "temperature": 0.7,
    "max_tokens": 500,
}


@pytest.fixture
def llm_service() -> LLMService:
    """Create an LLM service."""
    return LLMService()


def test_missing_key(llm_service: LLMService) -> None:
    """Test that an unset key fails before any client is created."""
    with pytest.raises(CredentialMissingError):
        llm_service.get_client()


@pytest.mark.parametrize("value", ["", "   ", "your_openai_api_key_here"])
def test_blank_or_placeholder_key(llm_service: LLMService, monkeypatch, value: str) -> None:
    """Test that blank and placeholder keys count as missing."""
    monkeypatch.setenv("OPENAI_API_KEY", value)
    with pytest.raises(CredentialMissingError):
        llm_service.get_client()


def test_malformed_key(llm_service: LLMService, monkeypatch) -> None:
    """Test the sk- prefix check."""
    monkeypatch.setenv("OPENAI_API_KEY", "pk-not-an-openai-key")
    with pytest.raises(CredentialMalformedError):
        llm_service.get_client()


def test_client_is_memoized(llm_service: LLMService, monkeypatch) -> None:
    """Test that a valid key yields one reusable client."""
    monkeypatch.setenv("OPENAI_API_KEY", f"  {VALID_KEY}  ")
    client = llm_service.get_client()

    assert isinstance(client, AsyncOpenAI)
    assert client.api_key == VALID_KEY
    assert llm_service.get_client() is client


def test_custom_key_env(llm_service: LLMService, monkeypatch) -> None:
    """Test reading the key from another variable."""
    monkeypatch.setenv("WEATHER_OPENAI_KEY", VALID_KEY)
    assert isinstance(llm_service.get_client("WEATHER_OPENAI_KEY"), AsyncOpenAI)


def test_development_diagnostics_hide_key(monkeypatch, caplog) -> None:
    """Test that development logging never prints the full key."""
    monkeypatch.setenv("OPENAI_API_KEY", VALID_KEY)
    service = LLMService(development=True)

    with caplog.at_level(logging.INFO, logger="weather_chat.services.llm_service"):
        service.get_client()

    assert "startsWith=sk-te" in caplog.text
    assert f"length={len(VALID_KEY)}" in caplog.text
    assert VALID_KEY not in caplog.text


def test_production_skips_diagnostics(llm_service: LLMService, monkeypatch, caplog) -> None:
    """Test that diagnostics are off outside development mode."""
    monkeypatch.setenv("OPENAI_API_KEY", VALID_KEY)

    with caplog.at_level(logging.INFO, logger="weather_chat.services.llm_service"):
        llm_service.get_client()

    assert "API key check" not in caplog.text


async def test_generate_completion_parameters(llm_service: LLMService, monkeypatch) -> None:
    """Test model, temperature and token limit sent to the provider."""
    mock_client = make_mock_client(return_value=make_completion("Sunny and 34°C."))
    monkeypatch.setattr(llm_service, "get_client", lambda api_key_env="OPENAI_API_KEY": mock_client)
    messages = [{"role": "user", "content": "Lahore weather?"}]

    content = await llm_service.generate_completion(messages, MODEL_CONFIG)

    assert content == "Sunny and 34°C."
    mock_client.chat.completions.create.assert_awaited_once_with(
        model="gpt-4o-mini",
        messages=messages,
        temperature=0.7,
        max_completion_tokens=500,
    )


async def test_generate_completion_without_choices(llm_service: LLMService, monkeypatch) -> None:
    """Test that a response without choices yields None."""
    response = make_completion(None)
    response.choices = []
    mock_client = make_mock_client(return_value=response)
    monkeypatch.setattr(llm_service, "get_client", lambda api_key_env="OPENAI_API_KEY": mock_client)

    assert await llm_service.generate_completion([], MODEL_CONFIG) is None


async def test_generate_completion_propagates_errors(llm_service: LLMService, monkeypatch) -> None:
    """Test that provider errors reach the caller."""
    mock_client = make_mock_client(side_effect=RuntimeError("socket closed"))
    monkeypatch.setattr(llm_service, "get_client", lambda api_key_env="OPENAI_API_KEY": mock_client)

    with pytest.raises(RuntimeError):
        await llm_service.generate_completion([], MODEL_CONFIG)
