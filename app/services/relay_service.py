from __future__ import annotations

import logging

from app.core.errors import ValidationError
from app.models.chat import ProviderId, RelayRequest, RelayResult
from app.services.providers.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class RelayService:
    """Routes a single relay request to the adapter of the requested provider."""

    def __init__(self, registry: ProviderRegistry):
        self._registry = registry

    async def dispatch(self, request: RelayRequest) -> RelayResult:
        try:
            provider = self._validate(request)
        except ValidationError as e:
            logger.info("Rejected relay request: %s", e)
            return RelayResult.failure(str(e))

        adapter = self._registry.get(provider)
        logger.debug(
            "Relaying %d message(s) to %s", len(request.messages or []), provider.value
        )
        return await adapter.complete(request.messages or [])

    @staticmethod
    def _validate(request: RelayRequest) -> ProviderId:
        if not request.provider or not request.messages:
            raise ValidationError("Missing provider or messages")
        provider = ProviderId.parse(request.provider)
        if provider is None:
            raise ValidationError(f"Unknown provider: {request.provider}")
        return provider
