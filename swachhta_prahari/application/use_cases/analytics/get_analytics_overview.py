# Standard library imports
from collections import Counter, defaultdict
from datetime import timedelta
from typing import Dict

# Local application imports
from ....core.time_utils import utc_now
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import CameraStatus, IncidentStatus
from ....domain.services import cleanliness_index
from ...dto.analytics_dto import AnalyticsOverviewResponse

RANGES = {
    "24h": timedelta(days=1),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}
DEFAULT_RANGE = "7d"


class GetAnalyticsOverviewUseCase:
    """
    System overview for a trailing window: camera availability, daily
    incident trends per type, resolution performance and the cleanliness
    index per zone.
    """

    def __init__(self, incident_repository: IncidentRepository, camera_repository: CameraRepository) -> None:
        self.incident_repository = incident_repository
        self.camera_repository = camera_repository

    async def execute(self, range_name: str = DEFAULT_RANGE) -> AnalyticsOverviewResponse:
        if range_name not in RANGES:
            range_name = DEFAULT_RANGE
        end = utc_now()
        start = end - RANGES[range_name]

        incidents = await self.incident_repository.find_matching(IncidentFilter(start_date=start, end_date=end))
        camera_status = await self.camera_repository.count_by_status()

        per_day: Dict[str, Counter] = defaultdict(Counter)
        for incident in incidents:
            if incident.created_at:
                per_day[incident.created_at.strftime("%Y-%m-%d")][incident.type] += 1
        trends = [
            {
                "date": day,
                "incidents": [{"type": t, "count": c} for t, c in sorted(per_day[day].items())],
                "total": sum(per_day[day].values()),
            }
            for day in sorted(per_day)
        ]

        resolved_times = [
            i.response_time_minutes
            for i in incidents
            if i.status == IncidentStatus.RESOLVED.value and i.response_time_minutes is not None
        ]
        false_positives = sum(1 for i in incidents if i.status == IncidentStatus.FALSE_POSITIVE.value)
        accuracy = ((len(incidents) - false_positives) / len(incidents)) * 100 if incidents else 100.0

        return AnalyticsOverviewResponse(
            range=range_name,
            start_date=start,
            end_date=end,
            system_overview={
                "totalCameras": sum(camera_status.values()),
                "activeCameras": camera_status.get(CameraStatus.ONLINE.value, 0),
                "detectionAccuracy": round(accuracy, 2),
            },
            incident_trends=trends,
            performance_metrics={
                "averageResponseTime": round(sum(resolved_times) / len(resolved_times)) if resolved_times else 0,
                "totalResolved": len(resolved_times),
            },
            cleanliness_index=cleanliness_index(incidents),
        )
