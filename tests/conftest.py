from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.settings import Settings, get_settings
from app.dependencies import get_provider_registry
from app.main import create_app
from tests.fakes import RecordingTransport, make_registry, make_settings, vendor_stub

_ENV_VARS = (
    "OPENAI_API_KEY",
    "CLAUDE_API_KEY",
    "ANTHROPIC_API_KEY",
    "GROK_API_KEY",
    "XAI_API_KEY",
    "PERPLEXITY_API_KEY",
    "RELAY_BEARER_TOKEN",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def build_client():
    """Factory for a TestClient wired to fake settings and a stubbed vendor transport."""

    def _build(
        settings: Settings | None = None,
        handler: Callable[[httpx.Request], Any] = vendor_stub,
    ) -> tuple[TestClient, RecordingTransport]:
        settings = settings or make_settings()
        transport = RecordingTransport(handler)
        registry = make_registry(settings, transport)

        app = create_app()
        app.dependency_overrides[get_settings] = lambda: settings
        app.dependency_overrides[get_provider_registry] = lambda: registry
        return TestClient(app), transport

    return _build
