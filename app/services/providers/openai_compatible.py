from __future__ import annotations

from typing import Any

from app.models.chat import ChatMessage, ProviderId
from app.services.providers.base import MAX_TOKENS, OutboundRequest, ProviderAdapter


class OpenAICompatibleAdapter(ProviderAdapter):
    """Chat-completions style vendors: bearer auth, system prompt inside ``messages``."""

    def prepare_messages(self, messages: list[ChatMessage]) -> list[dict[str, str]]:
        return [m.model_dump() for m in messages]

    def build_request(self, messages: list[ChatMessage]) -> OutboundRequest:
        api_key = self.api_key()
        return OutboundRequest(
            url=self.url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            body={
                "model": self.model,
                "messages": [
                    {"role": "system", "content": self.system_prompt()},
                    *self.prepare_messages(messages),
                ],
                "max_tokens": MAX_TOKENS,
            },
        )

    def _reply_text(self, body: dict[str, Any]) -> str:
        return body["choices"][0]["message"]["content"]


class OpenAIAdapter(OpenAICompatibleAdapter):
    id = ProviderId.OPENAI
    display_name = "ChatGPT (GPT-4o by OpenAI)"
    env_var = "OPENAI_API_KEY"
    url = "https://api.openai.com/v1/chat/completions"


class GrokAdapter(OpenAICompatibleAdapter):
    id = ProviderId.GROK
    display_name = "Grok 4 by xAI"
    env_var = "GROK_API_KEY"
    url = "https://api.x.ai/v1/chat/completions"
    # The xAI API has no live X data even though the consumer product does.
    disclaim_live_social = True


class PerplexityAdapter(OpenAICompatibleAdapter):
    id = ProviderId.PERPLEXITY
    display_name = "Perplexity (Sonar Pro)"
    env_var = "PERPLEXITY_API_KEY"
    url = "https://api.perplexity.ai/chat/completions"

    def prepare_messages(self, messages: list[ChatMessage]) -> list[dict[str, str]]:
        # Perplexity enforces strict user/assistant alternation, so only the
        # latest user turn is sent.
        last_user = next((m for m in reversed(messages) if m.role == "user"), None)
        if last_user is None:
            return []
        return [{"role": "user", "content": last_user.content}]
