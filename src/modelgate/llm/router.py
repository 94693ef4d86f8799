"""LLM Router - process-wide provider registry and model lookups.

The registry is built once, either explicitly through ``init_registry`` at
application startup or lazily on first lookup, and is read-only afterwards.
"""

from __future__ import annotations

import logging
import threading

from modelgate.config import Settings, settings
from modelgate.llm.base import EmbeddingModel, LanguageModel
from modelgate.llm.providers.types import Provider
from modelgate.llm.registry import ProviderRegistry, build_registry

logger = logging.getLogger(__name__)

# Singleton instance
_registry: ProviderRegistry | None = None
_registry_lock = threading.Lock()


def init_registry(config: Settings | None = None) -> ProviderRegistry:
    """Build the provider registry and install it for the process.

    Raises:
        ProviderConfigError: If provider configuration is malformed.
    """
    global _registry
    with _registry_lock:
        _registry = _build(config or settings)
        return _registry


def get_registry() -> ProviderRegistry:
    """Get or create the process-wide provider registry."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = _build(settings)
    return _registry


def _build(config: Settings) -> ProviderRegistry:
    registry = build_registry(config)
    logger.info(
        "Provider registry initialized: default=%s, providers=%d",
        registry.default_provider.value,
        len(registry),
    )
    return registry


def get_default_provider() -> Provider:
    """Provider used when a lookup does not name one."""
    return get_registry().default_provider


def get_model(name: str, provider: Provider | str | None = None) -> LanguageModel:
    """Resolve a chat/completion model handle.

    Args:
        name: Requested model name; ignored when MODEL_NAME is configured.
        provider: Provider identifier.  Defaults to ``get_default_provider()``.

    Raises:
        UnknownProviderError: If *provider* is not a supported identifier.
    """
    return get_registry().get_model(name, provider)


def get_embedding_model(name: str, provider: Provider | str | None = None) -> EmbeddingModel:
    """Resolve an embedding model handle.

    Args:
        name: Requested model name; ignored when MODEL_EMBEDDING_NAME is configured.
        provider: Provider identifier.  Defaults to ``get_default_provider()``.

    Raises:
        UnknownProviderError: If *provider* is not a supported identifier.
    """
    return get_registry().get_embedding_model(name, provider)
