"""
Tests for the Strands-backed therapist stream.
"""

import asyncio

import pytest

from tech_therapy.agent import therapist as therapist_module
from tech_therapy.agent.model_providers import ModelProviderFactory
from tech_therapy.agent.therapist import ProviderStreamError, Therapist
from tech_therapy.config import Config


class FakeAgent:
    def __init__(self, events, error=None):
        self.events = events
        self.error = error
        self.prompts = []

    async def stream_async(self, prompt):
        self.prompts.append(prompt)
        for event in self.events:
            yield event
        if self.error is not None:
            raise self.error


def _collect(agen):
    async def run():
        return [item async for item in agen]

    return asyncio.run(run())


def test_stream_forwards_only_text_deltas(monkeypatch):
    agent = FakeAgent([
        {"init_event_loop": True},
        {"data": "Pods crash, "},
        {"data": ""},
        {"event": {"contentBlockStop": {}}},
        {"data": "but you don't."},
        {"result": object()},
    ])
    monkeypatch.setattr(Therapist, "create_agent", lambda self: agent)

    chunks = _collect(Therapist(provider_name="openai").stream("prompt text"))

    assert chunks == ["Pods crash, ", "but you don't."]
    assert agent.prompts == ["prompt text"]


def test_stream_wraps_provider_failure(monkeypatch):
    agent = FakeAgent([{"data": "Hello"}], error=ConnectionError("reset by peer"))
    monkeypatch.setattr(Therapist, "create_agent", lambda self: agent)

    with pytest.raises(ProviderStreamError) as excinfo:
        _collect(Therapist(provider_name="openai").stream("prompt"))
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_unconfigured_provider_fails_the_stream(monkeypatch):
    def refuse(name, **kwargs):
        raise ValueError(f"Provider '{name}' is not properly configured.")

    monkeypatch.setattr(ModelProviderFactory, "create_provider", refuse)

    with pytest.raises(ProviderStreamError):
        _collect(Therapist(provider_name="openai").stream("prompt"))


def test_defaults_come_from_config(monkeypatch):
    monkeypatch.setattr(Config, "MODEL_PROVIDER", "LlamaCpp")

    therapist = therapist_module.get_therapist()

    assert therapist.provider_name == "llamacpp"
    assert therapist.system_prompt == Config.SYSTEM_PROMPT
    assert "tech therapist" in therapist.system_prompt
