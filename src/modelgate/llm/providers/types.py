"""Enumeration describing every supported provider backend."""

from __future__ import annotations

from enum import Enum

from modelgate.exceptions import UnknownProviderError

__all__ = ["CHAT_DIALECT_PROVIDERS", "Provider"]


class Provider(str, Enum):
    """Canonical identifiers for the closed set of provider backends."""

    OPENAI = "openai"
    OLLAMA = "ollama"
    ANTHROPIC = "anthropic"
    GROQ = "groq"
    GOOGLE = "google"
    OPENROUTER = "openrouter"
    FIREWORKS = "fireworks"
    DEEPINFRA = "deepinfra"
    VERTEX = "vertex"

    @classmethod
    def parse(cls, value: Provider | str) -> Provider:
        """Return the member for *value*, raising UnknownProviderError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownProviderError(value) from None


# Providers whose default (Responses API) path is bypassed in favour of
# Chat Completions whenever their client supports it.
CHAT_DIALECT_PROVIDERS: frozenset[Provider] = frozenset({Provider.OPENAI, Provider.DEEPINFRA})
