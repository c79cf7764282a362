from __future__ import annotations

from datetime import date
from typing import Any, Callable

import httpx

from app.core.settings import Settings
from app.services.providers.registry import ProviderRegistry

FIXED_DAY = date(2024, 1, 1)


def make_settings(**overrides: Any) -> Settings:
    return Settings(_env_file=None, **overrides)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], Any]):
        self.requests: list[httpx.Request] = []

        async def _record(request: httpx.Request):
            self.requests.append(request)
            response = handler(request)
            if hasattr(response, "__await__"):
                response = await response
            return response

        super().__init__(_record)


def vendor_stub(request: httpx.Request) -> httpx.Response:
    """Answers like each vendor would, echoing the host so tests can tell them apart."""
    host = request.url.host
    if host == "api.anthropic.com":
        return httpx.Response(
            200, json={"content": [{"type": "text", "text": f"reply from {host}"}]}
        )
    return httpx.Response(
        200,
        json={"choices": [{"message": {"role": "assistant", "content": f"reply from {host}"}}]},
    )


def make_registry(settings: Settings, transport: httpx.MockTransport) -> ProviderRegistry:
    client = httpx.AsyncClient(transport=transport)
    return ProviderRegistry(settings, client=client, today=lambda: FIXED_DAY)
