from __future__ import annotations

import asyncio
import logging

from app.models.chat import (
    ChatMessage,
    CompareRequest,
    CompareResponse,
    ProviderId,
    RelayRequest,
    RelayResult,
)
from app.services.relay_service import RelayService

logger = logging.getLogger(__name__)


class CompareService:
    """Sends one user message to several providers at once and collects every outcome."""

    def __init__(self, relay_service: RelayService):
        self._relay = relay_service

    async def compare(self, request: CompareRequest) -> CompareResponse:
        # Single-turn: only the latest user message is ever sent.
        messages = [ChatMessage(role="user", content=request.message)]

        outcomes = await asyncio.gather(
            *(
                self._relay.dispatch(
                    RelayRequest(provider=provider.value, messages=messages)
                )
                for provider in request.providers
            ),
            return_exceptions=True,
        )

        results: dict[ProviderId, RelayResult] = {}
        for provider, outcome in zip(request.providers, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.error(
                    "Unexpected failure relaying to %s",
                    provider.value,
                    exc_info=outcome,
                )
                outcome = RelayResult.failure(str(outcome) or type(outcome).__name__)
            results[provider] = outcome

        return CompareResponse(results=results)
