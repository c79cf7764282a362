from __future__ import annotations

import secrets
from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status

from app.core.settings import Settings, get_settings
from app.services.compare_service import CompareService
from app.services.providers.registry import ProviderRegistry
from app.services.relay_service import RelayService


@lru_cache
def get_provider_registry() -> ProviderRegistry:
    return ProviderRegistry(get_settings())


def get_relay_service(
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> RelayService:
    return RelayService(registry)


def get_compare_service(
    relay_service: RelayService = Depends(get_relay_service),
) -> CompareService:
    return CompareService(relay_service)


def verify_caller(
    authorization: str | None = Header(default=None),
    apikey: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Check the static bearer credential shared with the client, when one is configured."""
    token = settings.relay_bearer_token
    expected = token.get_secret_value().strip() if token is not None else ""
    if not expected:
        return

    presented = apikey
    if authorization:
        scheme, _, credential = authorization.partition(" ")
        if scheme.lower() == "bearer":
            presented = credential.strip()

    if not presented or not secrets.compare_digest(presented, expected):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
