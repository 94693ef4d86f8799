"""Provider clients: connection data for one provider, routed through litellm."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from modelgate.exceptions import UnsupportedDialectError
from modelgate.llm.base import Dialect, EmbeddingModel, LanguageModel
from modelgate.llm.providers.types import Provider


@dataclass(frozen=True)
class ProviderClient:
    """Preconfigured client bound to one provider.

    Calling the client returns a model handle in its default dialect;
    ``chat`` forces Chat Completions on clients that support it and
    ``embedding`` returns an embedding handle.  No network call happens
    until a handle is invoked.
    """

    provider: Provider
    prefix: str
    api_key: str | None = None
    api_base: str | None = None
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)
    default_dialect: Dialect = Dialect.CHAT
    supports_chat_dialect: bool = False

    def __post_init__(self) -> None:
        # Clients are shared process-wide; options stay read-only
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def __call__(self, model_id: str) -> LanguageModel:
        return LanguageModel(client=self, model_id=model_id, dialect=self.default_dialect)

    def chat(self, model_id: str) -> LanguageModel:
        """Return a handle that uses the Chat Completions API."""
        if not self.supports_chat_dialect:
            raise UnsupportedDialectError(
                f"{self.provider.value} client has no Chat Completions dialect"
            )
        return LanguageModel(client=self, model_id=model_id, dialect=Dialect.CHAT)

    def embedding(self, model_id: str) -> EmbeddingModel:
        return EmbeddingModel(client=self, model_id=model_id)

    def litellm_kwargs(self) -> dict[str, Any]:
        """Connection keyword arguments for litellm, omitting unset values."""
        kwargs: dict[str, Any] = {}
        if self.api_key:
            kwargs["api_key"] = self.api_key
        if self.api_base:
            kwargs["api_base"] = self.api_base
        kwargs.update({k: v for k, v in self.options.items() if v is not None})
        return kwargs


def create_openai_compatible(
    provider: Provider,
    *,
    api_key: str = "",
    base_url: str = "",
) -> ProviderClient:
    """Client for an OpenAI-compatible endpoint.

    These clients default to the Responses API and also expose the Chat
    Completions dialect through ``chat``.
    """
    return ProviderClient(
        provider=provider,
        prefix="openai/",
        api_key=api_key or None,
        api_base=base_url or None,
        default_dialect=Dialect.RESPONSES,
        supports_chat_dialect=True,
    )


def create_ollama(base_url: str = "") -> ProviderClient:
    return ProviderClient(provider=Provider.OLLAMA, prefix="ollama/", api_base=base_url or None)


def create_openrouter(api_key: str = "") -> ProviderClient:
    return ProviderClient(
        provider=Provider.OPENROUTER, prefix="openrouter/", api_key=api_key or None
    )


def create_google(api_key: str = "") -> ProviderClient:
    """Google AI Studio client.  Without a key litellm reads GEMINI_API_KEY."""
    return ProviderClient(provider=Provider.GOOGLE, prefix="gemini/", api_key=api_key or None)


# litellm routing prefixes for providers that rely on litellm's own
# environment lookup for credentials (ANTHROPIC_API_KEY, GROQ_API_KEY,
# FIREWORKS_AI_API_KEY).
ENV_CONFIGURED_PREFIXES: dict[Provider, str] = {
    Provider.ANTHROPIC: "anthropic/",
    Provider.GROQ: "groq/",
    Provider.FIREWORKS: "fireworks_ai/",
}


def create_env_configured(provider: Provider) -> ProviderClient:
    return ProviderClient(provider=provider, prefix=ENV_CONFIGURED_PREFIXES[provider])
