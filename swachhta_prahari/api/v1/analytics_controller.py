# External package imports
from fastapi import APIRouter, Depends, Query

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.analytics import (
    GetDashboardUseCase,
    GetAnalyticsOverviewUseCase,
)
from ...di.container import get_container
from .access_policy import require_action
from .responses import envelope


router = APIRouter(tags=["analytics"])


@router.get("/dashboard")
async def get_dashboard(
    current_user: UserResponse = Depends(require_action("analytics:read")),
) -> dict:
    """Today's incident counts, camera status, open critical incidents and system health"""
    container = get_container()
    dashboard = await container.get(GetDashboardUseCase).execute()
    return envelope(dashboard)


@router.get("/overview")
async def get_analytics_overview(
    range_name: str = Query(default="7d", alias="range", pattern="^(24h|7d|30d)$"),
    current_user: UserResponse = Depends(require_action("analytics:read")),
) -> dict:
    container = get_container()
    overview = await container.get(GetAnalyticsOverviewUseCase).execute(range_name)
    return envelope(overview)
