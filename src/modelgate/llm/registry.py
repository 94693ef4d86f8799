"""Provider registry — one preconfigured client per provider.

The registry is built from ``Settings`` in a single step and is read-only
afterwards.  Whether a provider's language models go through the Chat
Completions dialect is decided here, once, and stored next to the client.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from modelgate.config import DEEPINFRA_BASE_URL, Settings
from modelgate.exceptions import UnknownProviderError
from modelgate.llm.base import EmbeddingModel, LanguageModel
from modelgate.llm.providers.client import (
    ENV_CONFIGURED_PREFIXES,
    ProviderClient,
    create_env_configured,
    create_google,
    create_ollama,
    create_openai_compatible,
    create_openrouter,
)
from modelgate.llm.providers.types import CHAT_DIALECT_PROVIDERS, Provider
from modelgate.llm.providers.vertex import create_vertex

logger = logging.getLogger(__name__)


class Invocation(str, Enum):
    """How ``get_model`` turns a client into a language model handle."""

    DIRECT = "direct"  # client(name)
    CHAT_DIALECT = "chat_dialect"  # client.chat(name)


@dataclass(frozen=True)
class ProviderEntry:
    client: ProviderClient
    invocation: Invocation


def default_provider_for(settings: Settings) -> Provider:
    """Ollama if configured, then DeepInfra, otherwise OpenAI."""
    if settings.ollama_base_url:
        return Provider.OLLAMA
    if settings.deepinfra_api_key:
        return Provider.DEEPINFRA
    return Provider.OPENAI


def build_clients(settings: Settings) -> dict[Provider, ProviderClient]:
    """Construct one client for every provider from *settings*.

    Raises:
        ProviderConfigError: If VERTEX_CREDENTIALS is set but malformed.
    """
    clients: dict[Provider, ProviderClient] = {
        Provider.OPENAI: create_openai_compatible(
            Provider.OPENAI,
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
        ),
        Provider.OLLAMA: create_ollama(settings.ollama_base_url),
        Provider.GOOGLE: create_google(settings.google_generative_ai_api_key),
        Provider.OPENROUTER: create_openrouter(settings.openrouter_api_key),
        Provider.DEEPINFRA: create_openai_compatible(
            Provider.DEEPINFRA,
            api_key=settings.deepinfra_api_key,
            base_url=DEEPINFRA_BASE_URL,
        ),
        Provider.VERTEX: create_vertex(
            project=settings.vertex_project,
            location=settings.vertex_location,
            credentials=settings.vertex_credentials,
            key_file=settings.vertex_key_file,
        ),
    }
    for provider in ENV_CONFIGURED_PREFIXES:
        clients[provider] = create_env_configured(provider)
    return clients


def _invocation_for(provider: Provider, client: ProviderClient) -> Invocation:
    if provider in CHAT_DIALECT_PROVIDERS and client.supports_chat_dialect:
        return Invocation.CHAT_DIALECT
    return Invocation.DIRECT


class ProviderRegistry(Mapping):
    """Immutable mapping from Provider to its preconfigured client."""

    def __init__(
        self,
        clients: Mapping[Provider, ProviderClient],
        default_provider: Provider,
        model_name_override: str = "",
        embedding_name_override: str = "",
    ):
        missing = set(Provider) - set(clients)
        if missing:
            raise ValueError(
                "Registry is missing clients for: "
                + ", ".join(sorted(p.value for p in missing))
            )
        self._entries: Mapping[Provider, ProviderEntry] = MappingProxyType(
            {
                provider: ProviderEntry(client, _invocation_for(provider, client))
                for provider, client in clients.items()
            }
        )
        self._default_provider = default_provider
        self._model_name_override = model_name_override
        self._embedding_name_override = embedding_name_override

    # ── Mapping protocol ──────────────────────────────────────────────────

    def __getitem__(self, provider: Provider | str) -> ProviderClient:
        return self.entry(provider).client

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, provider: object) -> bool:
        try:
            self.entry(provider)  # type: ignore[arg-type]
        except UnknownProviderError:
            return False
        return True

    def get(self, provider, default=None):
        try:
            return self[provider]
        except UnknownProviderError:
            return default

    # ── Lookups ───────────────────────────────────────────────────────────

    @property
    def default_provider(self) -> Provider:
        return self._default_provider

    def entry(self, provider: Provider | str) -> ProviderEntry:
        """Return the stored entry, raising UnknownProviderError for unknown ids."""
        key = Provider.parse(provider)
        try:
            return self._entries[key]
        except KeyError:
            raise UnknownProviderError(provider) from None

    def get_model(self, name: str, provider: Provider | str | None = None) -> LanguageModel:
        """Resolve *name* on *provider* (default provider if omitted).

        ``MODEL_NAME`` takes precedence over *name* when configured.
        """
        provider = self._default_provider if provider is None else provider
        entry = self.entry(provider)
        model_name = self._model_name_override or name

        logger.debug(
            "Resolving model: provider=%s, model=%s, invocation=%s",
            entry.client.provider.value,
            model_name,
            entry.invocation.value,
        )
        if entry.invocation is Invocation.CHAT_DIALECT:
            return entry.client.chat(model_name)
        return entry.client(model_name)

    def get_embedding_model(
        self, name: str, provider: Provider | str | None = None
    ) -> EmbeddingModel:
        """Resolve an embedding model; ``MODEL_EMBEDDING_NAME`` wins over *name*."""
        provider = self._default_provider if provider is None else provider
        entry = self.entry(provider)
        model_name = self._embedding_name_override or name

        logger.debug(
            "Resolving embedding model: provider=%s, model=%s",
            entry.client.provider.value,
            model_name,
        )
        return entry.client.embedding(model_name)


def build_registry(settings: Settings) -> ProviderRegistry:
    """Build the full provider registry from *settings*."""
    return ProviderRegistry(
        build_clients(settings),
        default_provider=default_provider_for(settings),
        model_name_override=settings.model_name,
        embedding_name_override=settings.model_embedding_name,
    )
