from fastapi import APIRouter, Depends

from app.dependencies import get_provider_registry
from app.models.chat import ProviderInfo
from app.services.providers.registry import ProviderRegistry

router = APIRouter()


@router.get("/providers", response_model=list[ProviderInfo])
def list_providers(
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> list[ProviderInfo]:
    return registry.describe()
