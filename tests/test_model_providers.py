"""
Tests for the model provider factory and providers.
"""

import pytest
import requests

from tech_therapy.agent.model_providers import (
    LlamaCppProvider,
    ModelProviderFactory,
    OpenAIProvider,
)
from tech_therapy.agent.model_providers import llamacpp as llamacpp_module
from tech_therapy.config import Config


def test_unknown_provider_is_rejected():
    with pytest.raises(ValueError, match="Unknown provider 'gemini'"):
        ModelProviderFactory.create_provider("gemini")


def test_openai_requires_api_key(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "")
    with pytest.raises(ValueError, match="not properly configured"):
        ModelProviderFactory.create_provider("openai")


def test_openai_provider_uses_configured_model(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(Config, "OPENAI_MODEL_ID", "gpt-4")

    provider = ModelProviderFactory.create_provider("OpenAI")

    assert isinstance(provider, OpenAIProvider)
    assert provider.get_provider_name() == "openai"
    assert provider.model_id == "gpt-4"
    assert provider.params == Config.get_llm_params()


def test_llamacpp_availability_follows_health_check(monkeypatch):
    monkeypatch.setattr(llamacpp_module, "is_server_running", lambda url: url == "http://llama:8033")

    assert LlamaCppProvider(base_url="http://llama:8033").is_available()
    assert not LlamaCppProvider(base_url="http://elsewhere:8033").is_available()


def test_is_server_running_handles_connection_errors(monkeypatch):
    def refuse(url, timeout):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(llamacpp_module.requests, "get", refuse)
    assert llamacpp_module.is_server_running("http://127.0.0.1:8033") is False


def test_is_server_running_checks_health_endpoint(monkeypatch):
    seen = []

    class Ok:
        status_code = 200

    def fake_get(url, timeout):
        seen.append(url)
        return Ok()

    monkeypatch.setattr(llamacpp_module.requests, "get", fake_get)
    assert llamacpp_module.is_server_running("http://127.0.0.1:8033/") is True
    assert seen == ["http://127.0.0.1:8033/health"]


def test_available_providers_listing(monkeypatch):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(llamacpp_module, "is_server_running", lambda url: False)

    providers = {entry["name"]: entry for entry in ModelProviderFactory.get_available_providers()}

    assert providers["openai"]["available"] is True
    assert providers["llamacpp"]["available"] is False
    assert providers["openai"]["display_name"] == "OpenAI GPT"
