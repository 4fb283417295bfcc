"""Shared fixtures for the weather chat tests."""
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_chat import create_app
from weather_chat.services import ConfigService

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yml"
OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def make_completion(content):
    """Build a fake chat completion whose first choice carries ``content``."""
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def make_status_error(error_cls, status_code: int):
    """Build an openai status error the way the client library raises it."""
    request = httpx.Request("POST", OPENAI_URL)
    response = httpx.Response(status_code, request=request)
    return error_cls(f"Error code: {status_code}", response=response, body=None)


def make_mock_client(side_effect=None, return_value=None) -> MagicMock:
    """Build a fake AsyncOpenAI client."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=side_effect, return_value=return_value)
    return client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Keep developer environment settings out of the tests."""
    for name in ("OPENAI_API_KEY", "PORT", "APP_ENV", "LOG_LEVEL", "WEATHER_CHAT_CONFIG"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_service() -> ConfigService:
    """Configuration loaded from the repository config.yml."""
    return ConfigService(str(CONFIG_PATH))


@pytest.fixture
def app() -> FastAPI:
    """Application built from the repository config.yml."""
    return create_app(str(CONFIG_PATH))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """HTTP client for the application."""
    return TestClient(app)


@pytest.fixture
def use_provider(app: FastAPI, monkeypatch):
    """Replace the provider client with a mock; returns a factory."""

    def _use(side_effect=None, return_value=None) -> MagicMock:
        mock_client = make_mock_client(side_effect=side_effect, return_value=return_value)
        monkeypatch.setattr(
            app.state.llm_service,
            "get_client",
            lambda api_key_env="OPENAI_API_KEY": mock_client
        )
        return mock_client

    return _use
