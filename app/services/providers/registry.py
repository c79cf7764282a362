from __future__ import annotations

from datetime import date
from typing import Callable

import httpx

from app.core.settings import Settings
from app.models.chat import ProviderId, ProviderInfo
from app.services.providers.base import ProviderAdapter
from app.services.providers.claude import ClaudeAdapter
from app.services.providers.openai_compatible import (
    GrokAdapter,
    OpenAIAdapter,
    PerplexityAdapter,
)

ADAPTER_CLASSES: tuple[type[ProviderAdapter], ...] = (
    OpenAIAdapter,
    ClaudeAdapter,
    GrokAdapter,
    PerplexityAdapter,
)


class ProviderRegistry:
    def __init__(
        self,
        settings: Settings,
        *,
        client: httpx.AsyncClient | None = None,
        today: Callable[[], date] = date.today,
    ):
        self._adapters: dict[ProviderId, ProviderAdapter] = {
            cls.id: cls(settings, client=client, today=today) for cls in ADAPTER_CLASSES
        }

    def get(self, provider: ProviderId) -> ProviderAdapter:
        return self._adapters[provider]

    def describe(self) -> list[ProviderInfo]:
        return [
            ProviderInfo(
                id=a.id, name=a.display_name, model=a.model, configured=a.configured
            )
            for a in self._adapters.values()
        ]
