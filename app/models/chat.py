from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class ProviderId(str, Enum):
    OPENAI = "openai"
    CLAUDE = "claude"
    GROK = "grok"
    PERPLEXITY = "perplexity"

    @classmethod
    def parse(cls, value: str) -> ProviderId | None:
        try:
            return cls(value)
        except ValueError:
            return None


class ChatMessage(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str


class RelayRequest(BaseModel):
    # Both fields are checked by the dispatcher so that a missing value yields
    # the relay's own error message rather than a schema error.
    provider: str | None = None
    messages: list[ChatMessage] | None = None


class RelayResult(BaseModel):
    """Outcome of one relay call: exactly one of ``content`` or ``error`` is set."""

    content: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _exactly_one_variant(self) -> RelayResult:
        if (self.content is None) == (self.error is None):
            raise ValueError("RelayResult needs exactly one of content or error")
        return self

    @classmethod
    def success(cls, content: str) -> RelayResult:
        return cls(content=content)

    @classmethod
    def failure(cls, error: str) -> RelayResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


class ProviderInfo(BaseModel):
    id: ProviderId
    name: str
    model: str
    configured: bool


class CompareRequest(BaseModel):
    message: str = Field(min_length=1)
    providers: list[ProviderId] = Field(min_length=1)

    @model_validator(mode="after")
    def _normalize(self) -> CompareRequest:
        if not self.message.strip():
            raise ValueError("message must not be blank")
        # Keep the caller's order, drop repeats.
        self.providers = list(dict.fromkeys(self.providers))
        return self


class CompareResponse(BaseModel):
    results: dict[ProviderId, RelayResult] = Field(default_factory=dict)
