from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

import httpx

from app.core.errors import ConfigurationError, ProviderError, RelayError, TransportError
from app.core.settings import Settings
from app.models.chat import ChatMessage, ProviderId, RelayResult
from app.services.prompt_builder import build_system_prompt

logger = logging.getLogger(__name__)

MAX_TOKENS = 1000


@dataclass(frozen=True)
class OutboundRequest:
    url: str
    headers: dict[str, str]
    body: dict[str, Any]


class ProviderAdapter(ABC):
    """Translates relay messages into one vendor's API call and back.

    Subclasses declare the vendor constants and implement ``build_request`` and
    ``_reply_text``. ``complete`` never raises for vendor-side problems: every
    ``RelayError`` ends up as a failed ``RelayResult``.
    """

    id: ProviderId
    display_name: str
    env_var: str
    url: str
    disclaim_live_social: bool = False

    def __init__(
        self,
        settings: Settings,
        *,
        client: httpx.AsyncClient | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._settings = settings
        self._client = client
        self._today = today

    @property
    def model(self) -> str:
        return getattr(self._settings, f"{self.id.value}_model")

    @property
    def configured(self) -> bool:
        return self._settings.api_key_for(self.id.value) is not None

    def api_key(self) -> str:
        key = self._settings.api_key_for(self.id.value)
        if key is None:
            raise ConfigurationError(self.env_var)
        return key

    def system_prompt(self) -> str:
        return build_system_prompt(
            self.display_name,
            disclaim_live_social=self.disclaim_live_social,
            today=self._today(),
        )

    @abstractmethod
    def build_request(self, messages: list[ChatMessage]) -> OutboundRequest:
        """Resolve the credential and build url, headers and JSON body."""

    @abstractmethod
    def _reply_text(self, body: dict[str, Any]) -> str:
        """Pull the reply out of this vendor's response nesting."""

    def extract_reply(self, body: dict[str, Any]) -> str:
        error = body.get("error")
        if error:
            raise ProviderError(_error_message(error))
        try:
            text = self._reply_text(body)
        except (KeyError, IndexError, TypeError) as e:
            raise TransportError(
                f"Unexpected response from {self.display_name}: missing {e}"
            ) from e
        if not isinstance(text, str):
            raise TransportError(f"Unexpected response from {self.display_name}")
        return text

    async def complete(self, messages: list[ChatMessage]) -> RelayResult:
        try:
            request = self.build_request(messages)
            body = await self._send(request)
            return RelayResult.success(self.extract_reply(body))
        except RelayError as e:
            logger.warning(
                "Provider %s failed with %s: %s", self.id.value, type(e).__name__, e
            )
            return RelayResult.failure(str(e))

    async def _send(self, request: OutboundRequest) -> dict[str, Any]:
        try:
            if self._client is not None:
                response = await self._client.post(
                    request.url, headers=request.headers, json=request.body
                )
            else:
                async with httpx.AsyncClient(
                    timeout=self._settings.provider_timeout_seconds
                ) as client:
                    response = await client.post(
                        request.url, headers=request.headers, json=request.body
                    )
        except httpx.TimeoutException as e:
            raise TransportError(f"{self.display_name} request timed out") from e
        except httpx.HTTPError as e:
            raise TransportError(f"{self.display_name} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"{self.display_name} returned a non-JSON response "
                f"(HTTP {response.status_code})"
            ) from e

        if not isinstance(data, dict):
            raise TransportError(f"Unexpected response from {self.display_name}")
        if response.is_error and not data.get("error"):
            raise ProviderError(
                f"{self.display_name} returned HTTP {response.status_code}"
            )
        return data


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        if message:
            return str(message)
    return str(error)
