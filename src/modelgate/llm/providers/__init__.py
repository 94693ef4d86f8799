"""Provider clients.

Every provider routes through litellm.  Clients are plain connection data
bound to one provider; calling one yields a model handle:

- openai, deepinfra — OpenAI-compatible endpoints (Responses + Chat dialects)
- ollama            — local models via Ollama
- openrouter        — OpenRouter
- google            — Google AI Studio (Gemini)
- vertex            — Google Vertex AI
- anthropic, groq, fireworks — credentials read from the environment by litellm
"""

from modelgate.llm.providers.client import ProviderClient
from modelgate.llm.providers.types import CHAT_DIALECT_PROVIDERS, Provider

__all__ = ["CHAT_DIALECT_PROVIDERS", "Provider", "ProviderClient"]
