"""Model handles returned by the provider registry.

A handle names one model on one provider in one API dialect.  Building a
handle performs no I/O; requests are only sent when ``complete`` or
``embed`` is awaited, and are routed through litellm.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from modelgate.llm.providers.client import ProviderClient
    from modelgate.llm.providers.types import Provider

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    """Which OpenAI-style API a language model handle talks to."""

    RESPONSES = "responses"  # /v1/responses
    CHAT = "chat"  # /v1/chat/completions


class LLMResponse(BaseModel):
    """Standardized response from any provider."""

    content: str
    model: str
    usage: dict[str, Any] = {}
    raw: dict[str, Any] | None = None


def _field(obj: Any, name: str) -> Any:
    """Read *name* from either a mapping or an attribute-style object."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _dump(obj: Any) -> dict[str, Any] | None:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    return None


def _responses_text(response: Any) -> str:
    """Concatenate the ``output_text`` parts of a Responses API result."""
    parts: list[str] = []
    for item in _field(response, "output") or []:
        if _field(item, "type") != "message":
            continue
        for part in _field(item, "content") or []:
            if _field(part, "type") == "output_text":
                parts.append(_field(part, "text") or "")
    return "".join(parts)


def _responses_text_format(response_format: dict) -> dict:
    """Translate a Chat Completions ``response_format`` to Responses ``text.format``."""
    if response_format.get("type") == "json_schema" and "json_schema" in response_format:
        return {"type": "json_schema", **response_format["json_schema"]}
    return response_format


def _qualify(prefix: str, model_id: str) -> str:
    # Don't double-prefix
    if prefix and not model_id.startswith(prefix):
        return f"{prefix}{model_id}"
    return model_id


@dataclass(frozen=True)
class LanguageModel:
    """A chat/completion model on a specific provider."""

    client: ProviderClient = field(compare=False, repr=False)
    model_id: str
    dialect: Dialect
    provider: Provider = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "provider", self.client.provider)

    @property
    def litellm_model(self) -> str:
        """Model string in litellm's ``<prefix>/<model>`` routing form."""
        return _qualify(self.client.prefix, self.model_id)

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float = 0.0,
        max_tokens: int = 4096,
        response_format: dict | None = None,
        **kwargs: Any,
    ) -> LLMResponse:
        """Send a chat request in this handle's dialect.

        Args:
            messages: List of {"role": ..., "content": ...} message dicts.
            temperature: Sampling temperature (0 = deterministic).
            max_tokens: Maximum tokens in the response.
            response_format: Optional Chat Completions style format spec.
                Translated to ``text.format`` for the Responses dialect.
            **kwargs: Provider-specific overrides forwarded to litellm.

        Returns:
            LLMResponse with the generated content.
        """
        import litellm

        call_kwargs: dict[str, Any] = {
            "model": self.litellm_model,
            "temperature": temperature,
            **self.client.litellm_kwargs(),
        }

        logger.info(
            "LLM request: provider=%s, model=%s, dialect=%s, messages=%d",
            self.provider.value,
            self.litellm_model,
            self.dialect.value,
            len(messages),
        )

        try:
            if self.dialect is Dialect.RESPONSES:
                call_kwargs["input"] = messages
                call_kwargs["max_output_tokens"] = max_tokens
                if response_format:
                    call_kwargs["text"] = {"format": _responses_text_format(response_format)}
                call_kwargs.update(kwargs)
                response = await litellm.aresponses(**call_kwargs)
                content = _responses_text(response)
            else:
                call_kwargs["messages"] = messages
                call_kwargs["max_tokens"] = max_tokens
                if response_format:
                    call_kwargs["response_format"] = response_format
                call_kwargs.update(kwargs)
                response = await litellm.acompletion(**call_kwargs)
                content = response.choices[0].message.content or ""
        except Exception:
            logger.exception(
                "LLM call failed for provider=%s model=%s", self.provider.value, self.litellm_model
            )
            raise

        return LLMResponse(
            content=content,
            model=self.model_id,
            usage=_dump(_field(response, "usage")) or {},
            raw=_dump(response),
        )


@dataclass(frozen=True)
class EmbeddingModel:
    """An embedding model on a specific provider."""

    client: ProviderClient = field(compare=False, repr=False)
    model_id: str
    provider: Provider = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "provider", self.client.provider)

    @property
    def litellm_model(self) -> str:
        return _qualify(self.client.prefix, self.model_id)

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embedding vectors for a list of texts.

        Args:
            texts: Strings to embed.

        Returns:
            List of embedding vectors (one per input text).
        """
        import litellm

        logger.info(
            "Embedding request: provider=%s, model=%s, texts=%d",
            self.provider.value,
            self.litellm_model,
            len(texts),
        )
        try:
            response = await litellm.aembedding(
                model=self.litellm_model,
                input=texts,
                **self.client.litellm_kwargs(),
            )
        except Exception:
            logger.exception(
                "Embedding call failed for provider=%s model=%s",
                self.provider.value,
                self.litellm_model,
            )
            raise
        return [item["embedding"] for item in response.data]
