"""Shared test fixtures for the modelgate test suite."""

from __future__ import annotations

import base64
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from modelgate.config import Settings

# Every variable Settings reads; cleared so the host environment can't leak in.
_SETTINGS_ENV = (
    "MODELGATE_DEBUG",
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OLLAMA_BASE_URL",
    "DEEPINFRA_API_KEY",
    "OPENROUTER_API_KEY",
    "GOOGLE_GENERATIVE_AI_API_KEY",
    "VERTEX_CREDENTIALS",
    "VERTEX_KEY_FILE",
    "VERTEX_PROJECT",
    "VERTEX_LOCATION",
    "MODEL_NAME",
    "MODEL_EMBEDDING_NAME",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    """Build Settings from keyword overrides, ignoring any .env file."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make


@pytest.fixture
def vertex_credentials() -> str:
    """Return base64-encoded service account JSON."""
    payload = {
        "type": "service_account",
        "project_id": "test-project",
        "client_email": "svc@test-project.iam.gserviceaccount.com",
    }
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


@pytest.fixture
def mock_litellm():
    """Stub the litellm module with async completion/responses/embedding calls."""
    litellm = MagicMock()

    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = "chat response"
    completion.usage = {"prompt_tokens": 10, "completion_tokens": 20}
    completion.model_dump.return_value = {"id": "chatcmpl-123"}
    litellm.acompletion = AsyncMock(return_value=completion)

    litellm.aresponses = AsyncMock(
        return_value={
            "id": "resp-123",
            "output": [
                {"type": "reasoning", "summary": []},
                {
                    "type": "message",
                    "content": [
                        {"type": "output_text", "text": "responses "},
                        {"type": "output_text", "text": "reply"},
                    ],
                },
            ],
            "usage": {"input_tokens": 7, "output_tokens": 3},
        }
    )

    embedding = MagicMock()
    embedding.data = [{"embedding": [0.1, 0.2, 0.3]}, {"embedding": [0.4, 0.5, 0.6]}]
    litellm.aembedding = AsyncMock(return_value=embedding)

    with patch.dict("sys.modules", {"litellm": litellm}):
        yield litellm


@pytest.fixture
def reset_router():
    """Start each router test without an installed registry."""
    with patch("modelgate.llm.router._registry", None):
        yield
