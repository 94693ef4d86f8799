"""modelgate configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

DEEPINFRA_BASE_URL = "https://api.deepinfra.com/v1/openai"


class Settings(BaseSettings):
    """Provider settings loaded from environment / .env file.

    Every value is optional.  An empty string means "not configured"; a
    provider whose values are missing is still constructed and only fails
    when a request is actually sent through it.
    """

    # General
    modelgate_debug: bool = False

    # OpenAI
    openai_api_key: str = ""
    openai_base_url: str = ""

    # Ollama — presence also makes ollama the default provider
    ollama_base_url: str = ""

    # DeepInfra (OpenAI-compatible endpoint)
    deepinfra_api_key: str = ""

    # OpenRouter
    openrouter_api_key: str = ""

    # Google AI Studio.  litellm falls back to GEMINI_API_KEY when blank.
    google_generative_ai_api_key: str = ""

    # Vertex AI
    vertex_credentials: str = ""  # base64-encoded service account JSON
    vertex_key_file: str = "./gke-key.json"
    vertex_project: str = "firecrawl"
    vertex_location: str = "global"

    # Global model name overrides
    model_name: str = ""
    model_embedding_name: str = ""

    @property
    def has_vertex_credentials(self) -> bool:
        return bool(self.vertex_credentials)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "protected_namespaces": ("settings_",),
    }


settings = Settings()
