"""Provider selection and model resolution."""

from modelgate.llm.base import Dialect, EmbeddingModel, LanguageModel, LLMResponse
from modelgate.llm.providers import Provider
from modelgate.llm.router import (
    get_default_provider,
    get_embedding_model,
    get_model,
    get_registry,
    init_registry,
)

__all__ = [
    "Dialect",
    "EmbeddingModel",
    "LLMResponse",
    "LanguageModel",
    "Provider",
    "get_default_provider",
    "get_embedding_model",
    "get_model",
    "get_registry",
    "init_registry",
]
