import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_relay_service, verify_caller
from app.models.chat import RelayRequest, RelayResult
from app.services.relay_service import RelayService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_caller)])


@router.post(
    "/chat",
    response_model=RelayResult,
    response_model_exclude_none=True,
    responses={400: {"model": RelayResult}},
)
async def relay_chat(
    payload: RelayRequest | None = None,
    relay_service: RelayService = Depends(get_relay_service),
) -> JSONResponse:
    try:
        result = await relay_service.dispatch(payload or RelayRequest())
    except Exception as e:
        logger.exception("Relay endpoint failed")
        result = RelayResult.failure(str(e) or type(e).__name__)

    return JSONResponse(
        content=result.model_dump(exclude_none=True),
        status_code=200 if result.ok else 400,
    )
