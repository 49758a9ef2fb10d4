# Standard library imports
from datetime import datetime

# Local application imports
from ....core.config import get_settings
from ....core.time_utils import utc_now, period_bounds
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import IncidentType, Thresholds
from ...dto.detection_dto import ModelStatusResponse

MODEL_LAST_UPDATED = datetime(2025, 8, 25)


class GetModelStatusUseCase:
    """Static model metadata plus live detection counts"""

    def __init__(self, incident_repository: IncidentRepository) -> None:
        self.incident_repository = incident_repository

    async def _count(self, period: str, now: datetime) -> int:
        start, end = period_bounds(period, now)
        return await self.incident_repository.count(IncidentFilter(start_date=start, end_date=end))

    async def execute(self) -> ModelStatusResponse:
        now = utc_now()
        return ModelStatusResponse(
            model_version=get_settings().ai_model_version,
            status="active",
            supported_types=[t.value for t in IncidentType],
            default_confidence_threshold=Thresholds.AI_CONFIDENCE_DEFAULT,
            detections_today=await self._count("today", now),
            detections_this_week=await self._count("week", now),
            detections_this_month=await self._count("month", now),
            last_updated=MODEL_LAST_UPDATED,
        )
