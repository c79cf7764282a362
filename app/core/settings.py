from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="Multi-Provider Chat Relay", alias="APP_NAME")
    environment: Literal["local", "dev", "staging", "prod"] = Field(
        default="local", alias="ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Provider credentials. A missing key disables only that provider.
    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")
    claude_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("CLAUDE_API_KEY", "ANTHROPIC_API_KEY"),
    )
    grok_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("GROK_API_KEY", "XAI_API_KEY"),
    )
    perplexity_api_key: SecretStr | None = Field(
        default=None, alias="PERPLEXITY_API_KEY"
    )

    openai_model: str = Field(default="gpt-4o", alias="OPENAI_MODEL")
    claude_model: str = Field(
        default="claude-sonnet-4-5-20250929", alias="CLAUDE_MODEL"
    )
    grok_model: str = Field(default="grok-4", alias="GROK_MODEL")
    perplexity_model: str = Field(default="sonar-pro", alias="PERPLEXITY_MODEL")

    provider_timeout_seconds: float = Field(
        default=60.0, gt=0, alias="PROVIDER_TIMEOUT_SECONDS"
    )

    relay_bearer_token: SecretStr | None = Field(
        default=None, alias="RELAY_BEARER_TOKEN"
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"], alias="CORS_ALLOW_ORIGINS"
    )

    def api_key_for(self, provider: str) -> str | None:
        secret: SecretStr | None = getattr(self, f"{provider}_api_key", None)
        if secret is None:
            return None
        value = secret.get_secret_value().strip()
        return value or None


@lru_cache
def get_settings() -> Settings:
    return Settings()
