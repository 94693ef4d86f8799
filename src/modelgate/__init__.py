"""modelgate — pick an LLM provider and resolve model handles from configuration."""

from modelgate.exceptions import (
    ModelGateError,
    ProviderConfigError,
    UnknownProviderError,
    UnsupportedDialectError,
)
from modelgate.llm import (
    Provider,
    get_default_provider,
    get_embedding_model,
    get_model,
    init_registry,
)
from modelgate.logs import setup_logging

__version__ = "0.1.0"

__all__ = [
    "ModelGateError",
    "Provider",
    "ProviderConfigError",
    "UnknownProviderError",
    "UnsupportedDialectError",
    "get_default_provider",
    "get_embedding_model",
    "get_model",
    "init_registry",
    "setup_logging",
]
