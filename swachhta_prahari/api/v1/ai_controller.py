# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, Body, Depends, Query, Request

# Local application imports
from ...application.dto.detection_dto import AIConfigUpdateRequest
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.detection import (
    ProcessDetectionUseCase,
    GetModelStatusUseCase,
    GetDetectionStatsUseCase,
    UpdateAIConfigUseCase,
)
from ...core.rate_limit import client_key, rate_limited_response
from ...domain.exceptions import PrahariError
from ...di.container import get_container
from .access_policy import require_action
from .dependencies import verify_webhook_secret, get_webhook_limiter
from .responses import envelope, http_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ai"])


@router.post("/detection", dependencies=[Depends(verify_webhook_secret)])
async def receive_detection(request: Request, payload: Dict[str, Any] = Body(...)):
    """
    Webhook for detections reported by edge models

    Public but rate limited; when WEBHOOK_SECRET is configured the
    X-Webhook-Secret header must match. The raw payload is validated by the
    use case so field errors come back as a list of messages.
    """
    limiter = get_webhook_limiter()
    key = client_key(request)
    if not limiter.hit(key):
        logger.warning(f"Detection webhook rate limit exceeded for {key}")
        return rate_limited_response(limiter.retry_after(key))

    container = get_container()
    process_use_case = container.get(ProcessDetectionUseCase)

    try:
        result = await process_use_case.execute(payload)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(result, message="Detection processed successfully")


@router.get("/model/status")
async def get_model_status(
    current_user: UserResponse = Depends(require_action("ai:read")),
) -> dict:
    container = get_container()
    model_status = await container.get(GetModelStatusUseCase).execute()
    return envelope({"modelStatus": model_status})


@router.get("/detection/stats")
async def get_detection_stats(
    time_range: str = Query(default="7d", alias="timeRange", pattern="^(24h|7d|30d)$"),
    current_user: UserResponse = Depends(require_action("ai:read")),
) -> dict:
    container = get_container()
    stats = await container.get(GetDetectionStatsUseCase).execute(time_range)
    return envelope(stats)


@router.put("/config")
async def update_ai_config(
    request: AIConfigUpdateRequest,
    current_user: UserResponse = Depends(require_action("ai:configure")),
) -> dict:
    """Update AI settings for one camera (cameraId given) or every camera"""
    container = get_container()
    update_use_case = container.get(UpdateAIConfigUseCase)

    try:
        result = await update_use_case.execute(request, current_user.id)
    except PrahariError as exception:
        raise http_error(exception)
    return envelope(
        result, message=f"AI configuration updated for {result['modifiedCount']} cameras"
    )
