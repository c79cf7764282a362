from __future__ import annotations

from typing import Any

from app.models.chat import ChatMessage, ProviderId
from app.services.providers.base import MAX_TOKENS, OutboundRequest, ProviderAdapter

ANTHROPIC_VERSION = "2023-06-01"


class ClaudeAdapter(ProviderAdapter):
    id = ProviderId.CLAUDE
    display_name = "Claude (Sonnet 4.5 by Anthropic)"
    env_var = "CLAUDE_API_KEY"
    url = "https://api.anthropic.com/v1/messages"

    def build_request(self, messages: list[ChatMessage]) -> OutboundRequest:
        api_key = self.api_key()

        # The Messages API only accepts user/assistant turns; caller-supplied
        # system messages are folded into the top-level system field.
        system_parts = [self.system_prompt()]
        turns: list[dict[str, str]] = []
        for m in messages:
            if m.role == "system":
                system_parts.append(m.content)
            else:
                turns.append(m.model_dump())

        return OutboundRequest(
            url=self.url,
            headers={
                "Content-Type": "application/json",
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_VERSION,
            },
            body={
                "model": self.model,
                "max_tokens": MAX_TOKENS,
                "system": "\n\n".join(system_parts),
                "messages": turns,
            },
        )

    def _reply_text(self, body: dict[str, Any]) -> str:
        return body["content"][0]["text"]
