"""
Pytest config: local imports without installation, quiet logging and API fakes.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
    """
    Insert the repo root into sys.path for local imports.
    """
    repo_root = Path(__file__).resolve().parent.parent
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()
os.environ.setdefault("LOG_TO_FILE", "False")
os.environ.setdefault("LOG_TO_CONSOLE", "False")

from fastapi.testclient import TestClient  # noqa: E402

from tech_therapy.agent.therapist import get_therapist  # noqa: E402
from tech_therapy.api import create_app  # noqa: E402


class FakeTherapist:
    """
    Test-only therapist that replays canned chunks and records prompts.
    """

    def __init__(self, chunks=None, error: Exception | None = None) -> None:
        self.chunks = list(chunks) if chunks is not None else [
            "Kubernetes: ",
            "where pods go to crash\n",
            "and YAML goes to multiply.",
        ]
        self.error = error
        self.prompts: list[str] = []

    async def stream(self, prompt: str):
        self.prompts.append(prompt)
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_therapist() -> FakeTherapist:
    return FakeTherapist()


@pytest.fixture
def make_client():
    """
    Build a TestClient whose therapy route uses the given fake therapist.
    """

    def _make(therapist: FakeTherapist) -> TestClient:
        app = create_app()
        app.dependency_overrides[get_therapist] = lambda: therapist
        return TestClient(app)

    return _make


@pytest.fixture
def api_client(make_client, fake_therapist) -> TestClient:
    return make_client(fake_therapist)
