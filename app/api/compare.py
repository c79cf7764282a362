import logging

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_compare_service, verify_caller
from app.models.chat import CompareRequest, CompareResponse
from app.services.compare_service import CompareService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_caller)])


@router.post(
    "/compare",
    response_model=CompareResponse,
    response_model_exclude_none=True,
)
async def compare_providers(
    request: CompareRequest,
    compare_service: CompareService = Depends(get_compare_service),
) -> CompareResponse:
    try:
        return await compare_service.compare(request)
    except Exception as e:
        logger.exception("Compare endpoint failed")
        raise HTTPException(status_code=400, detail=str(e) or type(e).__name__)
