# Standard library imports
from collections import Counter

# Local application imports
from ....core.config import get_settings
from ....core.time_utils import utc_now, start_of_day
from ....domain.repositories.camera_repository import CameraRepository
from ....domain.repositories.incident_repository import IncidentRepository, IncidentFilter
from ....domain.constants import CameraStatus, IncidentStatus, Severity
from ...dto.analytics_dto import DashboardResponse, SystemHealth
from ...dto.incident_dto import IncidentResponse

RECENT_CRITICAL_LIMIT = 5


class GetDashboardUseCase:
    """Today's incident summary, camera status counts and open high-severity incidents"""

    def __init__(self, incident_repository: IncidentRepository, camera_repository: CameraRepository) -> None:
        self.incident_repository = incident_repository
        self.camera_repository = camera_repository

    async def execute(self) -> DashboardResponse:
        now = utc_now()
        today = await self.incident_repository.find_matching(IncidentFilter(start_date=start_of_day(now)))
        camera_status = await self.camera_repository.count_by_status()
        critical = await self.incident_repository.find_matching(
            IncidentFilter(
                severity=[Severity.HIGH.value, Severity.CRITICAL.value],
                status=[IncidentStatus.DETECTED.value, IncidentStatus.PENDING.value],
            ),
            limit=RECENT_CRITICAL_LIMIT,
        )

        online = camera_status.get(CameraStatus.ONLINE.value, 0)
        return DashboardResponse(
            incident_summary=dict(Counter(i.status for i in today)),
            camera_status=camera_status,
            critical_incidents=[IncidentResponse.from_domain(i) for i in critical],
            system_health=SystemHealth(
                camera_network=f"{online}/{get_settings().total_camera_slots}",
                last_update=now,
            ),
        )
