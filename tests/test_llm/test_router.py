"""Tests for the process-wide router functions."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modelgate.llm import router
from modelgate.llm.base import Dialect
from modelgate.llm.providers import Provider
from modelgate.llm.registry import ProviderRegistry


@pytest.mark.usefixtures("reset_router")
class TestRegistryLifecycle:
    """Tests for init_registry / get_registry."""

    def test_init_registry_installs(self, make_settings):
        registry = router.init_registry(make_settings(ollama_base_url="http://localhost:11434"))
        assert isinstance(registry, ProviderRegistry)
        assert router.get_registry() is registry
        assert router.get_default_provider() is Provider.OLLAMA

    def test_get_registry_singleton(self, make_settings):
        with patch("modelgate.llm.router.settings", make_settings()):
            first = router.get_registry()
            second = router.get_registry()
        assert first is second
        assert first.default_provider is Provider.OPENAI

    def test_get_registry_uses_global_settings(self, make_settings):
        with patch("modelgate.llm.router.settings", make_settings(deepinfra_api_key="di-key")):
            assert router.get_default_provider() is Provider.DEEPINFRA

    def test_init_registry_replaces(self, make_settings):
        router.init_registry(make_settings())
        router.init_registry(make_settings(deepinfra_api_key="di-key"))
        assert router.get_default_provider() is Provider.DEEPINFRA


@pytest.mark.usefixtures("reset_router")
class TestLookups:
    """Tests for get_model / get_embedding_model."""

    def test_get_model_openai(self, make_settings):
        router.init_registry(make_settings())
        model = router.get_model("gpt-4o", "openai")
        assert model.dialect is Dialect.CHAT
        assert model.model_id == "gpt-4o"

    def test_get_model_default_provider(self, make_settings):
        router.init_registry(make_settings(ollama_base_url="http://localhost:11434"))
        model = router.get_model("llama3")
        assert model.provider == "ollama"
        assert model.litellm_model == "ollama/llama3"

    def test_get_model_override(self, make_settings):
        router.init_registry(make_settings(model_name="forced-model"))
        assert router.get_model("anything", Provider.OPENAI).model_id == "forced-model"

    def test_get_embedding_model(self, make_settings):
        router.init_registry(make_settings(model_embedding_name="emb-override"))
        assert router.get_embedding_model("text-embedding-3-small").model_id == "emb-override"

    def test_unknown_provider(self, make_settings):
        router.init_registry(make_settings())
        with pytest.raises(LookupError):
            router.get_model("gpt-4o", "not-a-provider")

    def test_package_exports(self, make_settings):
        import modelgate

        router.init_registry(make_settings())
        assert modelgate.get_default_provider() is Provider.OPENAI
        assert modelgate.get_model("claude-sonnet-4-20250514", "anthropic").provider == (
            "anthropic"
        )
